"""Shared fixtures: small rendered documentation trees."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="UTF-8"><title>{title} · Demo.jl</title></head>
<body>
<nav class="docs-sidebar"><a href="index.html">Home</a><a href="api.html">API</a></nav>
<div class="docs-main">
<article class="content">
{body}
</article>
<footer><a href="https://example.org">Powered by a documentation generator</a></footer>
</div>
</body>
</html>
"""


def render_page(title: str, body: str) -> str:
    return PAGE_TEMPLATE.format(title=title, body=body)


def docstring(
    binding: str,
    kind: str = "Function",
    sections: Iterable[str] = (),
    anchor: str | None = None,
) -> str:
    anchor = anchor or binding
    parts = "".join(f"<section><div>{section}</div></section>" for section in sections)
    return (
        '<article class="docstring"><header>'
        f'<a class="docstring-binding" id="{anchor}" href="#{anchor}"><code>{binding}</code></a>'
        f' — <span class="docstring-category">{kind}</span>'
        f"</header>{parts}</article>"
    )


def heading(level: int, anchor: str, text: str) -> str:
    return (
        f'<h{level} id="{anchor}"><a class="docs-heading-anchor" href="#{anchor}">{text}</a></h{level}>'
    )


def overloads(name: str, count: int) -> list[str]:
    return [
        f"<pre><code>{name}(x{i})</code></pre><p>Overload number {i} of {name}.</p>"
        for i in range(1, count + 1)
    ]


@pytest.fixture
def write_page(tmp_path: Path) -> Callable[..., Path]:
    """Write a rendered page below ``tmp_path/build``."""

    def _write(location: str, title: str, body: str) -> Path:
        path = tmp_path / "build" / location
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_page(title, body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def docs_tree(tmp_path: Path, write_page: Callable[..., Path]) -> Path:
    """Two pages, each documenting a function with three overloads."""
    write_page(
        "index.html",
        "Introduction",
        heading(1, "Demo.jl", "Demo.jl")
        + heading(2, "Overview", "Overview")
        + "<p>This package implements   the basic operations.</p>"
        + docstring("Demo.solve", sections=overloads("solve", 3)),
    )
    write_page(
        "api.html",
        "API",
        heading(1, "API", "API")
        + "<p>This page is a dump of all the docstrings.</p>"
        + docstring("Demo.constraint!", sections=overloads("constraint!", 3)),
    )
    return tmp_path / "build"
