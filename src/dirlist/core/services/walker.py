from __future__ import annotations

"""
Directory Walking Service.

Produces a lazy, depth-bounded, pre-order sequence of DirectoryEntry
records. Directories beyond the maximum depth are never opened and hidden
directories are pruned before descent, so nothing below them is read.
"""

import logging
import os
from typing import Iterator

from dirlist.domain.config import ListingConfig
from dirlist.domain.errors import EntryReadError, MetadataError
from dirlist.domain.listing_models import DirectoryEntry, EntryKind
from dirlist.infra.fs import is_hidden_name, kind_from_mode

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def walk_entries(config: ListingConfig) -> Iterator[DirectoryEntry]:
    """
    Traverse the filesystem rooted at config.root_path.

    The root is depth 0 and is only yielded when min_depth is 0. Siblings
    are yielded in the order the operating system lists them. A directory
    is yielded before its contents. The first read or stat failure aborts
    the walk.

    Args:
        config: Resolved listing configuration.

    Yields:
        DirectoryEntry: Each visited node with min_depth <= depth <= max_depth.

    Raises:
        EntryReadError: A directory could not be opened or iterated.
        MetadataError: An entry's metadata could not be retrieved.
    """
    root = config.root_path

    try:
        st = os.stat(root)
    except OSError as e:
        raise EntryReadError(root, e) from e

    root_entry = DirectoryEntry(
        path=root,
        name=os.path.basename(os.path.normpath(root)) or root,
        depth=0,
        kind=kind_from_mode(st.st_mode),
        size=st.st_size,
        modified=st.st_mtime,
    )

    if config.min_depth <= 0 <= config.max_depth:
        yield root_entry

    if root_entry.kind is EntryKind.DIRECTORY and config.max_depth > 0:
        yield from _walk_directory(root, 1, config)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _walk_directory(dir_path: str, depth: int, config: ListingConfig) -> Iterator[DirectoryEntry]:
    """Yield the children of dir_path (at the given depth) and descend into subdirectories."""
    logger.debug(f"Reading directory '{dir_path}' at depth {depth}")

    try:
        it = os.scandir(dir_path)
    except OSError as e:
        raise EntryReadError(dir_path, e) from e

    with it:
        while True:
            try:
                dirent = next(it)
            except StopIteration:
                break
            except OSError as e:
                raise EntryReadError(dir_path, e) from e

            if not config.show_hidden and is_hidden_name(dirent.name):
                logger.debug(f"Pruning hidden entry '{dirent.path}'")
                continue

            entry = _entry_from_dirent(dirent, depth)

            if depth >= config.min_depth:
                yield entry

            if entry.kind is EntryKind.DIRECTORY and depth < config.max_depth:
                yield from _walk_directory(dirent.path, depth + 1, config)


def _entry_from_dirent(dirent: os.DirEntry, depth: int) -> DirectoryEntry:
    """Build a DirectoryEntry from a scandir record without following symlinks."""
    try:
        st = dirent.stat(follow_symlinks=False)
    except OSError as e:
        raise MetadataError(dirent.path, e) from e

    return DirectoryEntry(
        path=dirent.path,
        name=dirent.name,
        depth=depth,
        kind=kind_from_mode(st.st_mode),
        size=st.st_size,
        modified=st.st_mtime,
    )
