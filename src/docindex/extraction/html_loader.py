"""Record extraction from rendered HTML documentation pages.

Uses BeautifulSoup with the standard ``html.parser`` backend, which is
lenient enough for generator output and needs no compiled extras.
"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Set
from urllib.parse import unquote, urlsplit

from bs4 import BeautifulSoup, Tag

from docindex.config import AppConfig
from docindex.errors import MissingPageError, SourceEncodingError
from docindex.models import Category, IndexRecord, PageSource
from docindex.utils.files import iter_html_pages
from docindex.utils.text import collapse_whitespace, normalize_whitespace, page_name_from_title

LOGGER = logging.getLogger(__name__)

HEADINGS = ("h1", "h2", "h3", "h4", "h5", "h6")
# Docstring kinds outside this table (types, constants, ...) are indexed as functions.
CATEGORY_KINDS: Dict[str, Category] = {
    "function": Category.FUNCTION,
    "macro": Category.FUNCTION,
    "method": Category.METHOD,
    "module": Category.MODULE,
}
_CHROME = ("head", "script", "style", "nav", "footer")
_PAGE_SUFFIXES = ("", ".html", ".htm")


class AnchorRegistry:
    """Hands out unique in-page anchors in declaration order."""

    def __init__(self) -> None:
        self._used: Set[str] = set()

    def claim(self, base: str) -> str:
        anchor = base
        suffix = 2
        while anchor in self._used:
            anchor = f"{base}-{suffix}"
            suffix += 1
        self._used.add(anchor)
        return anchor


@dataclass(slots=True)
class ExtractionStats:
    pages: int = 0
    skipped_pages: int = 0
    skipped_entries: int = 0
    processed: List[str] = field(default_factory=list)


def read_page(source: PageSource, *, encoding: str = "utf-8") -> str:
    try:
        return source.path.read_text(encoding=encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise SourceEncodingError(source.location, encoding) from exc


def resolve_reference(href: str, page_location: str) -> str | None:
    """Return the page path a relative link points at, or None for external links."""
    parts = urlsplit(href)
    if parts.scheme or parts.netloc or not parts.path:
        return None
    path = unquote(parts.path)
    if posixpath.splitext(path)[1].lower() not in _PAGE_SUFFIXES:
        return None
    if path.startswith("/"):
        target = path.lstrip("/")
    else:
        target = posixpath.join(posixpath.dirname(page_location), path)
    if path.endswith("/") or not posixpath.splitext(path)[1]:
        target = posixpath.join(target, "index.html")
    return posixpath.normpath(target)


def check_references(unit: Tag, location: str, page_location: str, known: Set[str]) -> None:
    for link in unit.find_all("a", href=True):
        target = resolve_reference(link["href"], page_location)
        if target is not None and target not in known:
            raise MissingPageError(location, target)


def _text_of(unit: Tag) -> str:
    for link in unit.select(".docs-sourcelink"):
        link.decompose()
    return normalize_whitespace(unit.get_text("\n").splitlines())


def _page_name(soup: BeautifulSoup, root: Tag, source: PageSource) -> str:
    if soup.title is not None and soup.title.get_text(strip=True):
        return page_name_from_title(soup.title.get_text())
    heading = root.find("h1")
    if heading is not None and heading.get_text(strip=True):
        return collapse_whitespace(heading.get_text(" "))
    return Path(source.location).stem


def _content_root(soup: BeautifulSoup) -> Tag:
    return (
        soup.find("article", class_="content")
        or soup.find("main")
        or soup.body
        or soup
    )


def _heading_anchor(heading: Tag) -> str | None:
    if heading.get("id"):
        return heading["id"]
    inner = heading.find("a", id=True)
    return inner["id"] if inner is not None else None


def _is_structural(tag: Tag) -> bool:
    if tag.name in HEADINGS:
        return True
    return tag.name == "article" and "docstring" in (tag.get("class") or [])


class HtmlExtractor:
    """Turns a tree of rendered pages into raw index records."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self.stats = ExtractionStats()

    def extract(self, root: Path) -> Iterator[IndexRecord]:
        """Yield records page by page, in sorted page order."""
        root = Path(root)
        known = {page.location for page in iter_html_pages(root)}
        for source in iter_html_pages(root, exclude=self.config.exclude_patterns):
            try:
                html = read_page(source, encoding=self.config.encoding)
            except SourceEncodingError as exc:
                LOGGER.warning("Skipping page: %s", exc)
                self.stats.skipped_pages += 1
                continue
            except OSError as exc:
                LOGGER.warning("Skipping unreadable page %s: %s", source.location, exc)
                self.stats.skipped_pages += 1
                continue

            LOGGER.debug("Extracting %s", source.location)
            self.stats.pages += 1
            self.stats.processed.append(source.location)
            yield from self.extract_page(source, html, known)

    def extract_page(
        self, source: PageSource, html: str, known: Iterable[str] = ()
    ) -> List[IndexRecord]:
        """Records of a single page: the page itself, then sections and entries."""
        known_pages = set(known) | {source.location}
        soup = BeautifulSoup(html, "html.parser")
        root = _content_root(soup)
        page_name = _page_name(soup, root, source)
        anchors = AnchorRegistry()

        records: List[IndexRecord] = []
        blocks = [
            tag
            for tag in root.find_all(_is_structural)
            if tag.name == "article" or tag.find_parent("article", class_="docstring") is None
        ]
        for tag in blocks:
            if tag.name == "article":
                records.extend(self._entry_records(tag, source, page_name, anchors, known_pages))
            else:
                anchor = _heading_anchor(tag)
                if anchor is None:
                    continue
                records.append(
                    IndexRecord(
                        location=f"{source.location}#{anchors.claim(anchor)}",
                        page=page_name,
                        title=collapse_whitespace(tag.get_text(" ")),
                        text="",
                        category=Category.SECTION,
                    )
                )

        for tag in [*blocks, *root.find_all(_CHROME)]:
            if not tag.decomposed:
                tag.decompose()
        prose = normalize_whitespace(root.get_text("\n").splitlines())
        page_record = IndexRecord(
            location=source.location,
            page=page_name,
            title=page_name,
            text=prose,
            category=Category.PAGE,
        )
        return [page_record, *records]

    def _entry_records(
        self,
        article: Tag,
        source: PageSource,
        page_name: str,
        anchors: AnchorRegistry,
        known: Set[str],
    ) -> List[IndexRecord]:
        binding = article.select_one(".docstring-binding")
        if binding is None or not binding.get_text(strip=True):
            LOGGER.warning("Docstring without binding in %s skipped", source.location)
            self.stats.skipped_entries += 1
            return []

        name = collapse_whitespace(binding.get_text(" "))
        base = binding.get("id") or article.get("id") or name
        kind_tag = article.select_one(".docstring-category")
        kind = collapse_whitespace(kind_tag.get_text(" ")).lower() if kind_tag else "function"
        category = CATEGORY_KINDS.get(kind, Category.FUNCTION)

        header = article.find("header", recursive=False)
        if header is not None:
            header.extract()
        units = article.find_all("section", recursive=False) or [article]

        records = []
        for unit in units:
            # Anchors are claimed before validation so numbering matches the page.
            anchor = anchors.claim(base if unit is article else unit.get("id") or base)
            location = f"{source.location}#{anchor}"
            try:
                check_references(unit, location, source.location, known)
            except MissingPageError as exc:
                LOGGER.warning("Skipping entry: %s", exc)
                self.stats.skipped_entries += 1
                continue
            records.append(
                IndexRecord(
                    location=location,
                    page=page_name,
                    title=name,
                    text=_text_of(unit),
                    category=category,
                )
            )
        return records


def extract_records(root: Path, config: AppConfig | None = None) -> Iterator[IndexRecord]:
    """Lazily extract raw records from every page under ``root``."""
    return HtmlExtractor(config).extract(root)
