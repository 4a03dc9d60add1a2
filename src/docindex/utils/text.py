"""Text helpers used to turn rendered markup into searchable text."""

from __future__ import annotations

import re
from typing import Iterable

_WHITESPACE_RE = re.compile(r"\s+")
_FENCE_RE = re.compile(r"```[\w+-]*")
_PAGE_TITLE_SEPARATOR = " · "


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def strip_markup(text: str) -> str:
    """Remove code fences and inline backticks.

    Input is already decoded text, so angle brackets are content and stay.
    Substitutions repeat until nothing changes, so a second call returns
    its input unchanged.
    """
    previous = None
    while previous != text:
        previous = text
        text = _FENCE_RE.sub(" ", text)
        text = text.replace("`", "")
    return text


def normalize_whitespace(lines: Iterable[str]) -> str:
    """Collapse whitespace and join lines."""
    return "\n".join(line.strip() for line in lines if line.strip())


def page_name_from_title(title: str) -> str:
    """Drop the site name suffix generators append to ``<title>``."""
    return collapse_whitespace(title.split(_PAGE_TITLE_SEPARATOR, 1)[0])
