from __future__ import annotations

"""
Listing Configuration Domain.

Holds the immutable run configuration resolved from command-line options,
its defaults, and the semantic checks applied before traversal starts.
"""

import logging
from dataclasses import dataclass
from typing import List

from dirlist.domain.listing_models import FormatOptions

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_ROOT_PATH = "."
DEFAULT_MIN_DEPTH = 1
DEFAULT_MAX_DEPTH = 1


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ListingConfig:
    """
    Resolved invocation options for a single listing run.

    Attributes:
        root_path: Root of the traversal.
        min_depth: Shallowest depth included in the output.
        max_depth: Deepest depth visited and included.
        show_headers: Emit a header row before entries.
        show_hidden: Include dot-prefixed entries and their subtrees.
        show_modified: Include the modified-at column.
    """
    root_path: str = DEFAULT_ROOT_PATH
    min_depth: int = DEFAULT_MIN_DEPTH
    max_depth: int = DEFAULT_MAX_DEPTH
    show_headers: bool = False
    show_hidden: bool = False
    show_modified: bool = False

    def format_options(self) -> FormatOptions:
        """Derive the formatting options used for every rendered row."""
        return FormatOptions(show_modified=self.show_modified)


def get_default_config() -> ListingConfig:
    """Return the configuration used when no option is given."""
    return ListingConfig()


def validate_config(config: ListingConfig) -> List[str]:
    """
    Check semantic constraints that do not prevent a run.

    Args:
        config: The resolved configuration.

    Returns:
        List[str]: Human readable warnings, empty when the config is coherent.
    """
    warnings: List[str] = []

    if config.min_depth > config.max_depth:
        warnings.append(
            f"min depth ({config.min_depth}) is greater than max depth "
            f"({config.max_depth}); nothing will be listed"
        )

    logger.debug(f"Configuration validated with {len(warnings)} warning(s)")
    return warnings
