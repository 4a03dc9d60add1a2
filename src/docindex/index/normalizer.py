"""Deterministic cleanup of extracted records."""

from __future__ import annotations

import logging
from typing import Iterable, List

from docindex.errors import DuplicateLocationError
from docindex.models import IndexRecord
from docindex.utils.text import collapse_whitespace, strip_markup

LOGGER = logging.getLogger(__name__)


def clean_text(text: str) -> str:
    """Readable single-line text: markup removed, whitespace collapsed."""
    return collapse_whitespace(strip_markup(text))


def normalize_record(record: IndexRecord) -> IndexRecord:
    return IndexRecord(
        location=record.location.strip(),
        page=collapse_whitespace(record.page),
        title=collapse_whitespace(record.title),
        text=clean_text(record.text),
        category=record.category,
    )


class Normalizer:
    """Cleans records and drops repeated locations, keeping the first."""

    def __init__(self) -> None:
        self.duplicates: List[DuplicateLocationError] = []

    def normalize(self, records: Iterable[IndexRecord]) -> List[IndexRecord]:
        seen: set[str] = set()
        output: List[IndexRecord] = []
        for record in records:
            cleaned = normalize_record(record)
            if cleaned.location in seen:
                duplicate = DuplicateLocationError(cleaned.location)
                LOGGER.warning("%s, keeping the first occurrence", duplicate)
                self.duplicates.append(duplicate)
                continue
            seen.add(cleaned.location)
            output.append(cleaned)
        return output


def normalize_records(records: Iterable[IndexRecord]) -> List[IndexRecord]:
    return Normalizer().normalize(records)
