"""Error types raised while building or loading a search index."""

from __future__ import annotations


class IndexBuildError(Exception):
    """Base class for recoverable index build problems."""


class MissingPageError(IndexBuildError):
    """A reference points at a page that is not part of the documentation tree."""

    def __init__(self, location: str, target: str) -> None:
        super().__init__(f"{location}: reference to missing page {target!r}")
        self.location = location
        self.target = target


class DuplicateLocationError(IndexBuildError):
    """Two records resolved to the same location."""

    def __init__(self, location: str) -> None:
        super().__init__(f"Duplicate location {location!r}")
        self.location = location


class SourceEncodingError(IndexBuildError):
    """A page could not be decoded."""

    def __init__(self, path: str, encoding: str) -> None:
        super().__init__(f"Cannot decode {path} as {encoding}")
        self.path = path
        self.encoding = encoding


class IndexFormatError(Exception):
    """A serialized index could not be read back."""
