from __future__ import annotations

"""
Directory Listing Data Models.

Provides the value types exchanged between the walker and the formatter:
the closed set of entry kinds, the per-entry metadata record and the
formatting options threaded through rendering.
"""

from dataclasses import dataclass
from enum import Enum

# -----------------------------------------------------------------------------
# CONSTANTS
# -----------------------------------------------------------------------------

HIDDEN_PREFIX = "."
INDENT_MARKER = "⤷ "
SIZE_COLUMN_WIDTH = 9
MODIFIED_COLUMN_WIDTH = 25
COLUMN_SEPARATOR = "  "

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------


class EntryKind(Enum):
    """Classification of a filesystem node. Symlinks and special files are OTHER."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One filesystem node visited during a walk.

    Attributes:
        path: Path joined from the traversal root as given by the user.
        name: Final path component.
        depth: Distance from the traversal root (root = 0).
        kind: Entry classification (symlinks are not followed).
        size: Byte size as reported by the filesystem for this node alone.
        modified: Last modification instant as a POSIX timestamp.
    """
    path: str
    name: str
    depth: int
    kind: EntryKind
    size: int
    modified: float


@dataclass(frozen=True)
class FormatOptions:
    """
    Immutable formatting configuration for rendered rows.

    Attributes:
        show_modified: Render the modified-at column.
        size_width: Right-alignment width of the size column.
        modified_width: Right-alignment width of the modified-at column.
        indent_marker: Glyph repeated once per nesting level below depth 1.
        size_style: Style of the size column.
        modified_style: Style of the modified-at column.
        indent_style: Style of the indentation prefix.
        header_style: Style of header labels.
    """
    show_modified: bool = False
    size_width: int = SIZE_COLUMN_WIDTH
    modified_width: int = MODIFIED_COLUMN_WIDTH
    indent_marker: str = INDENT_MARKER
    size_style: str = "green"
    modified_style: str = "blue"
    indent_style: str = "dim"
    header_style: str = "bold underline"


# Display treatment per entry kind
KIND_STYLES = {
    EntryKind.FILE: "white",
    EntryKind.DIRECTORY: "blue",
    EntryKind.OTHER: "yellow",
}
