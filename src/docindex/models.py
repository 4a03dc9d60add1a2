"""Core docindex data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict


class Category(str, Enum):
    """Structural classification of an index record."""

    PAGE = "page"
    SECTION = "section"
    FUNCTION = "function"
    METHOD = "method"
    MODULE = "module"


# Wire order expected by the browser search widget.
RECORD_FIELDS = ("location", "page", "title", "text", "category")


@dataclass(slots=True, frozen=True)
class IndexRecord:
    """One searchable unit of the documentation index."""

    location: str
    page: str
    title: str
    text: str
    category: Category

    def to_dict(self) -> Dict[str, str]:
        return {
            "location": self.location,
            "page": self.page,
            "title": self.title,
            "text": self.text,
            "category": self.category.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IndexRecord":
        return cls(
            location=str(data["location"]),
            page=str(data["page"]),
            title=str(data["title"]),
            text=str(data.get("text") or ""),
            category=Category(data["category"]),
        )


@dataclass(slots=True)
class PageSource:
    """A rendered page on disk and the URL path it is served under."""

    path: Path
    location: str
