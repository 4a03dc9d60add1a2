"""Command line interface for docindex."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from docindex.config import DEFAULT_EXCLUDES, AppConfig
from docindex.errors import IndexFormatError
from docindex.index.builder import IndexBuilder
from docindex.index.search import Searcher
from docindex.models import Category


console = Console()
app = typer.Typer(help="docindex - static search index builder for rendered documentation")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _default_index_path(source: Path | None) -> Path:
    config = AppConfig(source_dir=source if source is not None else Path.cwd())
    return config.resolve_output_path()


@app.command()
def build(
    source: Path = typer.Argument(..., help="Directory of rendered HTML pages.", resolve_path=True),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Index path, relative paths are placed inside SOURCE"
    ),
    fmt: str = typer.Option("js", "--format", help="Output format: js or json"),
    variable: str = typer.Option(
        AppConfig().variable_name, "--variable", help="JavaScript variable bound to the index"
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", help="Glob of page paths to skip (repeatable)"
    ),
    encoding: str = typer.Option("utf-8", help="Encoding of the rendered pages"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Build the search index for a rendered documentation tree."""
    _setup_logging(verbose)
    try:
        config = AppConfig(
            source_dir=source,
            output_path=output,
            output_format=fmt,
            variable_name=variable,
            encoding=encoding,
            exclude_patterns=tuple(exclude) if exclude else DEFAULT_EXCLUDES,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    console.print(f"Indexing [bold]{source}[/bold]...")
    try:
        result = IndexBuilder(config).build()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    stats = result.stats
    console.print(
        f"Pages: {stats.pages}, records: {stats.records}, "
        f"skipped pages: {stats.skipped_pages}, skipped entries: {stats.skipped_entries}, "
        f"duplicates: {stats.duplicates}"
    )
    if result.exit_code != 0:
        console.print("[yellow]No records produced.[/yellow]")
    else:
        console.print(f"Wrote [bold]{result.output_path}[/bold]")
    raise typer.Exit(code=result.exit_code)


@app.command()
def search(
    query: str = typer.Argument(..., help="Query text"),
    index: Path = typer.Option(None, "--index", help="Built index file"),
    top_k: int = typer.Option(AppConfig().top_k, help="Number of results to display"),
    category: Optional[Category] = typer.Option(None, help="Only show records of this category"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Preview what the search widget would find."""
    _setup_logging(verbose)
    resolved = index if index is not None else _default_index_path(None)

    if not resolved.exists():
        raise typer.BadParameter(f"Index not found: {resolved}")

    try:
        searcher = Searcher.from_path(resolved)
    except IndexFormatError as exc:
        raise typer.BadParameter(str(exc)) from exc

    results = searcher.search(query, top_k=top_k, category=category)
    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Score")
    table.add_column("Location")
    table.add_column("Category")
    table.add_column("Snippet")

    for result in results:
        table.add_row(str(result.score), result.location, result.category, result.text[:180])

    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    index: Path = typer.Option(None, "--index", help="Built index file"),
) -> None:
    """Start the search preview web interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    from docindex.web.app import app as web_app, configure_index

    resolved = index if index is not None else _default_index_path(None)
    if not resolved.exists():
        console.print("[yellow]Warning: index not found, searches might fail.[/yellow]")
    configure_index(resolved)

    console.print(f"Starting search preview on http://{host}:{port} (index: {resolved})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
