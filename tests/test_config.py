"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from docindex.config import AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.output_path == Path("search_index.js")
        assert config.output_format == "js"
        assert config.variable_name == "documenterSearchIndex"
        assert config.encoding == "utf-8"
        assert "search.html" in config.exclude_patterns

    def test_json_format_default_name(self) -> None:
        """Should pick a .json file name for the json format."""
        config = AppConfig(output_format="json")

        assert config.output_path == Path("search_index.json")

    def test_unknown_format(self) -> None:
        """Should reject unknown output formats."""
        with pytest.raises(ValueError):
            AppConfig(output_format="yaml")

    def test_resolve_output_path_relative(self) -> None:
        """Should place relative output paths inside the source tree."""
        config = AppConfig(source_dir=Path("/docs/build"))

        assert config.resolve_output_path() == Path("/docs/build/search_index.js")

    def test_resolve_output_path_absolute(self) -> None:
        """Should return absolute path as-is."""
        config = AppConfig(source_dir=Path("/docs/build"), output_path=Path("/tmp/index.js"))

        assert config.resolve_output_path() == Path("/tmp/index.js")

    def test_resolve_output_path_with_base(self) -> None:
        """Should resolve against an explicit base directory."""
        config = AppConfig(output_path=Path("out/index.js"))

        resolved = config.resolve_output_path(base_dir=Path("/project"))

        assert resolved == Path("/project/out/index.js")
