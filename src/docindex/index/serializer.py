"""Serialization of the record array consumed by the browser search widget."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Iterable, List

from docindex.config import DEFAULT_VARIABLE, OUTPUT_FORMATS
from docindex.errors import IndexFormatError
from docindex.models import IndexRecord
from docindex.utils.files import atomic_write_text

LOGGER = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_ASSIGNMENT_RE = re.compile(r"^\s*(?:var|let|const)\s+[A-Za-z_$][A-Za-z0-9_$]*\s*=\s*")


def encode_records(records: Iterable[IndexRecord]) -> str:
    """Compact JSON array, fields in wire order, records in the given order."""
    return json.dumps(
        [record.to_dict() for record in records],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def serialize_records(
    records: Iterable[IndexRecord],
    *,
    fmt: str = "js",
    variable: str = DEFAULT_VARIABLE,
) -> str:
    """Render the index either as a script assignment or as plain JSON."""
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format {fmt!r}")
    docs = encode_records(records)
    if fmt == "json":
        return '{"docs":' + docs + "}\n"
    if not _IDENTIFIER_RE.match(variable):
        raise ValueError(f"Invalid JavaScript identifier {variable!r}")
    return f'var {variable} = {{"docs":\n{docs}\n}}\n'


def write_index(
    records: Iterable[IndexRecord],
    path: Path,
    *,
    fmt: str = "js",
    variable: str = DEFAULT_VARIABLE,
) -> Path:
    """Replace the index at ``path`` with the serialized records."""
    path = Path(path)
    payload = serialize_records(records, fmt=fmt, variable=variable)
    atomic_write_text(path, payload)
    LOGGER.info("Wrote %s (%d bytes)", path, len(payload.encode("utf-8")))
    return path


def parse_index(payload: str) -> List[IndexRecord]:
    """Read records back from either serialized form."""
    body = _ASSIGNMENT_RE.sub("", payload, count=1).strip().rstrip(";")
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise IndexFormatError(f"Index is not valid JSON: {exc}") from exc

    docs = data.get("docs") if isinstance(data, dict) else data
    if not isinstance(docs, list):
        raise IndexFormatError("Index does not contain a record array")
    try:
        return [IndexRecord.from_dict(item) for item in docs]
    except (KeyError, TypeError, ValueError) as exc:
        raise IndexFormatError(f"Malformed index record: {exc}") from exc


def load_index(path: Path) -> List[IndexRecord]:
    path = Path(path)
    try:
        payload = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise IndexFormatError(f"Index not found: {path}") from exc
    return parse_index(payload)
