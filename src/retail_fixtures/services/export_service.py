"""
Export service for generated fixture datasets.

Writes the JSON document to ``paths.output`` and, when ``paths.tables`` is
configured, one CSV per table into that directory.

Usage:
    from retail_fixtures.services import ExportService

    service = ExportService(config)
    written = service.export(dataset)
"""

import logging
from pathlib import Path
from typing import Literal

from retail_fixtures.config.models import FixtureConfig
from retail_fixtures.services.writers import BaseWriter, CSVWriter, JSONWriter
from retail_fixtures.shared.models import FixtureDataset

logger = logging.getLogger(__name__)

ExportFormat = Literal["json", "csv"]


class ExportService:
    """
    Export orchestrator.

    Attributes:
        config: Fixture configuration (output paths and indentation)
    """

    def __init__(self, config: FixtureConfig):
        self.config = config
        logger.info(f"ExportService initialized with output: {config.paths.output}")

    def _get_writer(self, format: ExportFormat) -> BaseWriter:
        """Writer instance for the given format."""
        if format == "json":
            return JSONWriter(indent=self.config.output.indent)
        elif format == "csv":
            return CSVWriter(index=False)
        else:
            raise ValueError(f"Unsupported format: {format}")

    def export(self, dataset: FixtureDataset) -> dict[str, list[Path]]:
        """
        Write every configured output.

        Returns:
            Written paths keyed by format

        Raises:
            IOError: If an output cannot be written
        """
        written: dict[str, list[Path]] = {
            "json": self._get_writer("json").write(
                dataset, Path(self.config.paths.output)
            )
        }

        if self.config.paths.tables:
            written["csv"] = self._get_writer("csv").write(
                dataset, Path(self.config.paths.tables)
            )

        logger.info(
            f"Export complete: {sum(len(paths) for paths in written.values())} files"
        )
        return written
