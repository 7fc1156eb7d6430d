"""
JSON document writer.

Writes the whole dataset as one indented document: nine top-level arrays in
table order, money as integer cents, dates as Year/Month/Day objects. The
output is byte-stable for a given dataset.
"""

import json
import logging
from pathlib import Path

from retail_fixtures.services.writers.base_writer import BaseWriter
from retail_fixtures.shared.models import FixtureDataset

logger = logging.getLogger(__name__)


class JSONWriter(BaseWriter):
    """Indented JSON document writer."""

    def __init__(self, indent: int = 4):
        self.indent = indent

    def render(self, dataset: FixtureDataset) -> str:
        """Serialize the dataset to document text, newline-terminated."""
        return json.dumps(dataset.to_document(), indent=self.indent) + "\n"

    def write(self, dataset: FixtureDataset, output_path: Path, **kwargs) -> list[Path]:
        """
        Write the dataset document to a single file.

        Raises:
            IOError: If file cannot be written
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with output_path.open("w", encoding="utf-8", newline="\n") as f:
                f.write(self.render(dataset))
        except OSError as e:
            logger.error(f"Failed to write JSON to {output_path}: {e}")
            raise OSError(f"Failed to write JSON document: {e}") from e

        logger.info(
            f"Wrote {sum(dataset.table_counts().values()):,} records to {output_path}"
        )
        return [output_path]
