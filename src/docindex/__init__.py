"""Static documentation search-index builder."""

__version__ = "0.1.0"
