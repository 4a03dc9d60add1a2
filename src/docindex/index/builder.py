"""Documentation index build pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from docindex.config import AppConfig
from docindex.extraction.html_loader import HtmlExtractor
from docindex.index.normalizer import Normalizer
from docindex.index.serializer import write_index
from docindex.models import IndexRecord

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildStats:
    pages: int = 0
    records: int = 0
    skipped_pages: int = 0
    skipped_entries: int = 0
    duplicates: int = 0
    processed_pages: list[str] = field(default_factory=list)


@dataclass(slots=True)
class BuildResult:
    output_path: Path
    records: List[IndexRecord]
    stats: BuildStats

    @property
    def exit_code(self) -> int:
        return 0 if self.records else 1


class IndexBuilder:
    """Runs extraction, normalization and serialization once."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def build(self) -> BuildResult:
        """Build the index for the configured source tree.

        Writes an index, empty when nothing could be extracted, unless the
        output would land inside a documentation directory that does not exist.
        """
        source = Path(self.config.source_dir)
        source_exists = source.is_dir()
        if not source_exists:
            LOGGER.warning("Documentation directory not found: %s", source)

        extractor = HtmlExtractor(self.config)
        normalizer = Normalizer()
        records = normalizer.normalize(extractor.extract(source))

        output = self.config.resolve_output_path()
        if source_exists or Path(self.config.output_path).is_absolute():
            write_index(
                records,
                output,
                fmt=self.config.output_format,
                variable=self.config.variable_name,
            )
        else:
            LOGGER.warning("Not writing %s: its documentation directory is missing", output)

        stats = BuildStats(
            pages=extractor.stats.pages,
            records=len(records),
            skipped_pages=extractor.stats.skipped_pages,
            skipped_entries=extractor.stats.skipped_entries,
            duplicates=len(normalizer.duplicates),
            processed_pages=list(extractor.stats.processed),
        )
        if not records:
            LOGGER.warning("No records extracted from %s", source)
        else:
            LOGGER.info("Indexed %d records from %d pages", stats.records, stats.pages)
        return BuildResult(output_path=output, records=records, stats=stats)
