"""dirlist: depth-bounded, color-coded directory listings."""

__version__ = "0.3.0"
