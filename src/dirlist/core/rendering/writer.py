from __future__ import annotations

"""
Output Writer.

Streams the optional header row and one formatted row per entry to a rich
Console, in the order the walker produces them.
"""

import logging
import sys
from typing import Iterable

from rich.console import Console
from rich.text import Text

from dirlist.core.rendering.formatter import format_entry, format_header
from dirlist.domain.listing_models import DirectoryEntry, FormatOptions

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def make_console(no_color: bool = False, file=None) -> Console:
    """
    Build the Console used for listing output.

    Terminal and color detection are left to rich; no_color drops every
    ANSI attribute (bold, underline and dim included, not only colors).
    Highlighting is disabled so names are never re-styled.
    """
    if no_color:
        return Console(
            file=file if file is not None else sys.stdout,
            no_color=True,
            color_system=None,
            highlight=False,
            soft_wrap=True,
        )
    return Console(
        file=file if file is not None else sys.stdout,
        highlight=False,
        soft_wrap=True,
    )


def write_listing(
        console: Console,
        entries: Iterable[DirectoryEntry],
        options: FormatOptions,
        show_headers: bool = False,
) -> int:
    """
    Write the listing, one line per entry, as entries are produced.

    Errors raised by the entry source propagate after the lines already
    written have been emitted.

    Args:
        console: Destination console.
        entries: Lazy entry source (usually walk_entries()).
        options: Formatting configuration.
        show_headers: Emit the header row first.

    Returns:
        int: Number of entry rows written.
    """
    if show_headers:
        _emit(console, format_header(options))

    count = 0
    for entry in entries:
        _emit(console, format_entry(entry, options))
        count += 1

    logger.debug(f"Listing complete: {count} entr{'y' if count == 1 else 'ies'} written")
    return count


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _emit(console: Console, line: Text) -> None:
    """Print one row and flush so output appears incrementally."""
    console.print(line, soft_wrap=True, highlight=False)
    console.file.flush()
