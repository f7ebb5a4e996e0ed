from __future__ import annotations

"""
Listing Error Hierarchy.

Defines the failure kinds raised while resolving options and walking the
filesystem. Every error is terminal: the CLI controller reports it and
exits with a non-zero status.
"""

from typing import Optional


class ListingError(Exception):
    """
    Base class for all dirlist failures.

    Attributes:
        path: Filesystem path involved in the failure, when known.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidArguments(ListingError):
    """Raised when command-line options cannot be parsed or are out of range."""


class EntryReadError(ListingError):
    """Raised when a directory cannot be opened or one of its entries cannot be read."""

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        message = f"Error getting file entry: {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, path=path)


class MetadataError(ListingError):
    """Raised when size, kind or modified time cannot be retrieved for an entry."""

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        message = f"Failed extracting metadata for {path}. Perhaps you are missing permissions?"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message, path=path)
