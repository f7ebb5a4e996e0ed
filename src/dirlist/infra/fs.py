from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path expansion and stat interpretation helpers. Acts as the thin
abstraction over the 'os' and 'stat' modules used by the directory walker.
"""

import os
import stat
from typing import Optional

from dirlist.domain.listing_models import HIDDEN_PREFIX, EntryKind

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def expand_root_path(path: Optional[str], fallback: str) -> str:
    """
    Expand user home shortcuts (~/) and environment variables ($VAR/%VAR%).

    The result is left relative when the input is relative so listed paths
    read the way the user typed them. Surrounding whitespace is part of the
    path and is kept. Reverts to fallback if the input is blank.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Expanded path.
    """
    p = path or ""
    if not p.strip():
        p = fallback
    return os.path.expandvars(os.path.expanduser(p))


def is_hidden_name(name: str) -> bool:
    """Return True if a file name follows the dot-prefix hidden convention."""
    return name.startswith(HIDDEN_PREFIX)

# -----------------------------------------------------------------------------
# STAT INTERPRETATION API
# -----------------------------------------------------------------------------

def kind_from_mode(mode: int) -> EntryKind:
    """
    Map an lstat mode to the closed entry classification.

    Args:
        mode: The st_mode field of a non-following stat call.

    Returns:
        EntryKind: FILE, DIRECTORY or OTHER (symlinks, devices, sockets...).
    """
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER
