"""FastAPI application backing the search preview UI."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Any, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from docindex.config import AppConfig
from docindex.errors import IndexFormatError
from docindex.index.search import Searcher, SearchResult
from docindex.index.serializer import load_index
from docindex.models import Category
from docindex.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="docindex preview", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(frontend_router)
app.state.index_path = None


class SearchPayload(BaseModel):
    query: str
    index: Path | None = None
    top_k: int = 10
    category: Category | None = None


def configure_index(path: Path | None) -> None:
    """Set the index served when requests do not name one."""
    app.state.index_path = Path(path) if path is not None else None


def _resolve_index_path(index: Path | None) -> Path:
    if index is not None:
        return Path(index)
    if app.state.index_path is not None:
        return app.state.index_path
    return AppConfig(source_dir=Path.cwd()).resolve_output_path()


def _load_searcher(index: Path | None) -> Searcher:
    resolved = _resolve_index_path(index)
    if not resolved.exists():
        raise HTTPException(
            status_code=404,
            detail=f"Index not found at {resolved}. Build it first with 'docindex build'.",
        )
    try:
        return Searcher(load_index(resolved))
    except IndexFormatError as exc:
        LOGGER.error("Unable to load %s: %s", resolved, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/search")
async def search_index(payload: SearchPayload) -> dict[str, List[SearchResult]]:
    query = payload.query.strip()
    if not query:
        raise HTTPException(status_code=400, detail="Empty query")

    top_k = max(1, min(payload.top_k, 50))
    searcher = _load_searcher(payload.index)
    results = searcher.search(query, top_k=top_k, category=payload.category)
    return {"results": results}


@app.get("/records")
async def describe_records(index: Path | None = None) -> dict[str, Any]:
    """Record count of the index, broken down by category."""
    searcher = _load_searcher(index)
    counts = Counter(record.category.value for record in searcher.records)
    return {
        "index": str(_resolve_index_path(index)),
        "total": len(searcher.records),
        "categories": {category.value: counts.get(category.value, 0) for category in Category},
    }
