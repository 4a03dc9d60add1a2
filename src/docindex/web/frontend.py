"""Static HTML frontend for the search preview."""

from __future__ import annotations

from functools import lru_cache
from importlib.resources import files

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

PAGE_TITLE = "docindex search preview"

router = APIRouter()


@lru_cache(maxsize=1)
def _load_template() -> str:
    template = files("docindex.web").joinpath("templates", "index.html")
    return template.read_text(encoding="utf-8")


def render_page(title: str = PAGE_TITLE) -> str:
    """Fill the template placeholders; the template itself is read once."""
    return _load_template().replace("{{ title }}", title)


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    return HTMLResponse(content=render_page())
