"""Keyword search over a built index."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from docindex.index.serializer import load_index
from docindex.models import Category, IndexRecord

TITLE_WEIGHT = 3
TEXT_WEIGHT = 1
PAGE_WEIGHT = 1


@dataclass(slots=True)
class SearchResult:
    position: int
    score: int
    location: str
    page: str
    title: str
    text: str
    category: str


def _terms(query: str) -> List[str]:
    return [term for term in query.lower().split() if term]


class Searcher:
    """Scores records by term hits, falling back to index order on ties."""

    def __init__(self, records: Sequence[IndexRecord]) -> None:
        self.records = list(records)

    @classmethod
    def from_path(cls, path: Path) -> "Searcher":
        return cls(load_index(path))

    def score(self, record: IndexRecord, terms: Sequence[str]) -> int:
        title = record.title.lower()
        text = record.text.lower()
        page = record.page.lower()
        total = 0
        for term in terms:
            if term in title:
                total += TITLE_WEIGHT
            if term in text:
                total += TEXT_WEIGHT
            if term in page:
                total += PAGE_WEIGHT
        return total

    def search(
        self, query: str, *, top_k: int = 10, category: Category | None = None
    ) -> List[SearchResult]:
        terms = _terms(query)
        if not terms:
            return []

        results: List[SearchResult] = []
        for position, record in enumerate(self.records):
            if category is not None and record.category != category:
                continue
            score = self.score(record, terms)
            if score <= 0:
                continue
            results.append(
                SearchResult(
                    position=position,
                    score=score,
                    location=record.location,
                    page=record.page,
                    title=record.title,
                    text=record.text,
                    category=record.category.value,
                )
            )
        # sorted() is stable, so equal scores keep index order.
        results = sorted(results, key=lambda result: -result.score)
        return results[: max(top_k, 0)]
