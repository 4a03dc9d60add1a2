"""Utility helpers for working with files."""

from __future__ import annotations

import os
import tempfile
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, Iterator

from docindex.models import PageSource


def is_excluded(location: str, patterns: Iterable[str]) -> bool:
    return any(fnmatch(location, pattern) for pattern in patterns)


def iter_html_pages(root: Path, *, exclude: Iterable[str] = ()) -> Iterator[PageSource]:
    """Yield rendered pages under ``root`` sorted by their URL path."""
    root = Path(root)
    if not root.is_dir():
        return
    patterns = tuple(exclude)
    candidates = sorted(
        (path.relative_to(root).as_posix(), path)
        for path in root.rglob("*")
        if path.is_file() and path.suffix.lower() in (".html", ".htm")
    )
    for location, path in candidates:
        if is_excluded(location, patterns):
            continue
        yield PageSource(path=path, location=location)


def atomic_write_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Replace ``path`` with ``content`` without exposing a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
