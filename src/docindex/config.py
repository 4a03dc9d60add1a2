"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

DEFAULT_OUTPUT_NAME = "search_index.js"
DEFAULT_VARIABLE = "documenterSearchIndex"
DEFAULT_EXCLUDES: Tuple[str, ...] = ("search.html", "assets/*")
OUTPUT_FORMATS = ("js", "json")


@dataclass(slots=True)
class AppConfig:
    source_dir: Path = Path("build")
    output_path: Path | None = None
    output_format: str = "js"
    variable_name: str = DEFAULT_VARIABLE
    encoding: str = "utf-8"
    exclude_patterns: Tuple[str, ...] = DEFAULT_EXCLUDES
    top_k: int = 10

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {self.output_format!r}, expected one of {OUTPUT_FORMATS}"
            )
        if self.output_path is None:
            suffix = ".js" if self.output_format == "js" else ".json"
            self.output_path = Path(DEFAULT_OUTPUT_NAME).with_suffix(suffix)

    def resolve_output_path(self, base_dir: Path | None = None) -> Path:
        """Relative output paths live inside the documentation tree."""
        output = Path(self.output_path)
        if output.is_absolute():
            return output
        base = self.source_dir if base_dir is None else base_dir
        return Path(base) / output
