from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration validation, the streaming walk-format-write loop, and the
mapping of failures to process exit codes.
"""

import sys
from typing import List, Optional

from dirlist.core.rendering.writer import make_console, write_listing
from dirlist.core.services.walker import walk_entries
from dirlist.domain.config import validate_config
from dirlist.domain.errors import InvalidArguments, ListingError
from dirlist.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from dirlist.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_ARGUMENTS = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    try:
        args = parser.parse_args(argv)
    except InvalidArguments as e:
        parser.print_usage(sys.stderr)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENTS

    # 2. Logging bootstrap (console stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file), force=True)

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args) -> int:
    """Resolve configuration and stream the listing, mapping failures to exit codes."""
    # 3. Configuration resolution and validation
    config = cli_args.args_to_config(args)
    logger.debug(f"Resolved configuration: {config}")

    for w in validate_config(config):
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Walk -> format -> write
    console = make_console(no_color=bool(args.no_color))
    try:
        count = write_listing(
            console,
            walk_entries(config),
            config.format_options(),
            show_headers=config.show_headers,
        )
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except ListingError as e:
        logger.debug(f"Listing aborted at '{e.path}'", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logger.debug(f"Listed {count} entries under '{config.root_path}'")
    return EXIT_OK

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
