"""Tests for file utility functions."""

from __future__ import annotations

from pathlib import Path

from docindex.utils.files import atomic_write_text, is_excluded, iter_html_pages


class TestIterHtmlPages:
    """Test iter_html_pages function."""

    def test_sorted_relative_locations(self, tmp_path: Path) -> None:
        """Should yield pages sorted by URL path."""
        (tmp_path / "lib").mkdir()
        (tmp_path / "lib" / "z.html").write_text("z")
        (tmp_path / "index.html").write_text("i")
        (tmp_path / "api.html").write_text("a")
        (tmp_path / "notes.txt").write_text("t")

        locations = [page.location for page in iter_html_pages(tmp_path)]

        assert locations == ["api.html", "index.html", "lib/z.html"]

    def test_exclude_patterns(self, tmp_path: Path) -> None:
        """Should skip pages matching an exclude glob."""
        (tmp_path / "assets" / "themes").mkdir(parents=True)
        (tmp_path / "assets" / "themes" / "dark.html").write_text("x")
        (tmp_path / "search.html").write_text("s")
        (tmp_path / "index.html").write_text("i")

        pages = list(iter_html_pages(tmp_path, exclude=("search.html", "assets/*")))

        assert [page.location for page in pages] == ["index.html"]
        assert pages[0].path == tmp_path / "index.html"

    def test_missing_root(self, tmp_path: Path) -> None:
        """Should yield nothing for a missing directory."""
        assert list(iter_html_pages(tmp_path / "missing")) == []

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert list(iter_html_pages(tmp_path)) == []


class TestIsExcluded:
    """Test is_excluded function."""

    def test_matches(self) -> None:
        assert is_excluded("assets/a/b.html", ["assets/*"])
        assert not is_excluded("api.html", ["assets/*", "search.html"])


class TestAtomicWriteText:
    """Test atomic_write_text function."""

    def test_writes_and_replaces(self, tmp_path: Path) -> None:
        """Should create parents and replace existing content."""
        target = tmp_path / "out" / "index.js"

        atomic_write_text(target, "first")
        atomic_write_text(target, "second")

        assert target.read_text(encoding="utf-8") == "second"
        assert [path.name for path in target.parent.iterdir()] == ["index.js"]
