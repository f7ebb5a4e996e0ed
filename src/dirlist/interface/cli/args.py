from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into the immutable ListingConfig.
"""

import argparse
from typing import NoReturn

from dirlist import __version__
from dirlist.domain.config import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MIN_DEPTH,
    DEFAULT_ROOT_PATH,
    ListingConfig,
)
from dirlist.domain.errors import InvalidArguments
from dirlist.infra.fs import expand_root_path

# -----------------------------------------------------------------------------
# PARSER
# -----------------------------------------------------------------------------

class ListingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises InvalidArguments instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArguments(message)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> ListingArgumentParser:
    """
    Construct the argument parser for the dirlist CLI.

    Returns:
        ListingArgumentParser: Configured parser instance.
    """
    p = ListingArgumentParser(
        prog="dirlist",
        description="List a directory tree with sizes, optional modification times and colors.",
    )

    # --- Traversal ---
    p.add_argument(
        "-p", "--path",
        dest="path",
        default=None,
        help=f"Root of the traversal (default: '{DEFAULT_ROOT_PATH}').",
    )
    p.add_argument(
        "--min-depth",
        dest="min_depth",
        type=_non_negative_int,
        default=DEFAULT_MIN_DEPTH,
        metavar="N",
        help=f"Minimum depth to include; the root is depth 0 (default: {DEFAULT_MIN_DEPTH}).",
    )
    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=_non_negative_int,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"Maximum depth to traverse and include (default: {DEFAULT_MAX_DEPTH}).",
    )
    p.add_argument(
        "--hidden",
        action="store_true",
        help="Include entries starting with '.' and their contents.",
    )

    # --- Presentation ---
    p.add_argument(
        "--headers",
        action="store_true",
        help="Print a column header row.",
    )
    p.add_argument(
        "--modified",
        action="store_true",
        help="Show the last modification time (UTC).",
    )
    p.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Disable colored output.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace) -> ListingConfig:
    """
    Translate the argparse Namespace into a ListingConfig.

    Args:
        args: Parsed command-line arguments.

    Returns:
        ListingConfig: Immutable run configuration.
    """
    return ListingConfig(
        root_path=expand_root_path(args.path, DEFAULT_ROOT_PATH),
        min_depth=args.min_depth,
        max_depth=args.max_depth,
        show_headers=bool(args.headers),
        show_hidden=bool(args.hidden),
        show_modified=bool(args.modified),
    )

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    """
    Parse a depth value.

    Raises:
        argparse.ArgumentTypeError: If value is not an integer >= 0.
    """
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth value: '{value}'") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"depth must be >= 0, got {n}")
    return n
