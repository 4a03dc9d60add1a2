"""Tests for the frontend module."""

from __future__ import annotations

from docindex.web.frontend import PAGE_TITLE, _load_template, render_page, router


class TestLoadTemplate:
    """Tests for _load_template function."""

    def test_load_template_contains_html(self) -> None:
        """Template contains valid HTML."""
        result = _load_template().lower()
        assert "<!doctype" in result
        assert "</html>" in result

    def test_load_template_posts_to_search(self) -> None:
        """Template queries the search endpoint."""
        assert 'fetch("/search"' in _load_template()

    def test_load_template_cached(self) -> None:
        """Template is read from the package once."""
        assert _load_template() is _load_template()


class TestRenderPage:
    """Tests for render_page function."""

    def test_default_title(self) -> None:
        html = render_page()

        assert f"<title>{PAGE_TITLE}</title>" in html
        assert "{{ title }}" not in html

    def test_custom_title(self) -> None:
        html = render_page("Demo.jl search")

        assert "<h1>Demo.jl search</h1>" in html


class TestRouter:
    """Tests for the frontend router."""

    def test_router_has_index_route(self) -> None:
        """Router has the index route registered."""
        routes = [route.path for route in router.routes]
        assert "/" in routes
