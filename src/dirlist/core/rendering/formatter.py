from __future__ import annotations

"""
Entry Formatter.

Converts DirectoryEntry records into styled rich Text rows. Formatting is
pure: every value it renders comes from the entry and the FormatOptions
passed in, never from the filesystem.
"""

from datetime import datetime, timezone

from rich.text import Text

from dirlist.domain.listing_models import (
    COLUMN_SEPARATOR,
    KIND_STYLES,
    DirectoryEntry,
    FormatOptions,
)

# IEC prefixes in ascending order of magnitude
_IEC_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")

# Locale-independent calendar names
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

HEADER_SIZE = "Size"
HEADER_MODIFIED = "Modified at"
HEADER_NAME = "Name"

# Shown when a timestamp falls outside the representable calendar range
UNREPRESENTABLE_MODIFIED = "-"

# -----------------------------------------------------------------------------
# COLUMN RENDERERS
# -----------------------------------------------------------------------------

def format_size(num_bytes: int) -> str:
    """
    Render a byte count with binary (IEC) units.

    Values below 1024 are shown as whole bytes ("0 B", "1023 B"); larger
    values get one decimal and the largest fitting prefix ("1.0 KiB").
    """
    if num_bytes < 1024:
        return f"{num_bytes} B"

    value = float(num_bytes)
    unit = _IEC_UNITS[0]
    for unit in _IEC_UNITS:
        value /= 1024.0
        if value < 1024.0:
            break
    return f"{value:.1f} {unit}"


def format_modified(timestamp: float) -> str:
    """
    Render a POSIX timestamp as a UTC calendar string.

    Example: "Tue, 1 Jul 2003 10:52:37". No offset suffix is appended
    since the value is always UTC. Instants outside what datetime can
    represent (e.g. past year 9999) render as UNREPRESENTABLE_MODIFIED.
    """
    try:
        dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return UNREPRESENTABLE_MODIFIED
    return (
        f"{_WEEKDAYS[dt.weekday()]}, {dt.day} {_MONTHS[dt.month - 1]} {dt.year} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )


def format_indent(depth: int, marker: str) -> str:
    """Repeat the indentation marker once per level below depth 1."""
    return marker * max(depth - 1, 0)

# -----------------------------------------------------------------------------
# ROW RENDERERS
# -----------------------------------------------------------------------------

def format_entry(entry: DirectoryEntry, options: FormatOptions) -> Text:
    """
    Render one entry as a styled row.

    Layout: right-aligned size, optional right-aligned modified time,
    dimmed indentation, then the name colored by entry kind.

    Args:
        entry: The entry to render.
        options: Column widths, styles and toggles.

    Returns:
        Text: The styled row, without a trailing newline.
    """
    line = Text()
    line.append(format_size(entry.size).rjust(options.size_width), style=options.size_style)
    line.append(COLUMN_SEPARATOR)

    if options.show_modified:
        line.append(
            format_modified(entry.modified).rjust(options.modified_width),
            style=options.modified_style,
        )
        line.append(COLUMN_SEPARATOR)

    indent = format_indent(entry.depth, options.indent_marker)
    if indent:
        line.append(indent, style=options.indent_style)

    line.append(entry.name, style=KIND_STYLES[entry.kind])
    return line


def format_header(options: FormatOptions) -> Text:
    """
    Render the column header row aligned to the data columns.

    Padding is left unstyled so only the labels are underlined.
    """
    line = Text()
    _append_label(line, HEADER_SIZE, options.size_width, options.header_style)
    line.append(COLUMN_SEPARATOR)

    if options.show_modified:
        _append_label(line, HEADER_MODIFIED, options.modified_width, options.header_style)
        line.append(COLUMN_SEPARATOR)

    line.append(HEADER_NAME, style=options.header_style)
    return line


def _append_label(line: Text, label: str, width: int, style: str) -> None:
    """Append a right-aligned label whose padding carries no style."""
    padding = width - len(label)
    if padding > 0:
        line.append(" " * padding)
    line.append(label, style=style)
