"""
CSV table writer implementation.

Writes one CSV file per table through pandas. Nested values (the transaction
date) are flattened into underscore-joined columns.
"""

import logging
from pathlib import Path

import pandas as pd

from retail_fixtures.services.writers.base_writer import BaseWriter
from retail_fixtures.shared.models import TABLE_NAMES, FixtureDataset

logger = logging.getLogger(__name__)


def table_frame(dataset: FixtureDataset, table_name: str) -> pd.DataFrame:
    """One table as a flat DataFrame (``Date_Year``, ``Date_Month``, ...)."""
    records = [row.model_dump() for row in getattr(dataset, table_name)]
    return pd.json_normalize(records, sep="_")


class CSVWriter(BaseWriter):
    """
    CSV writer producing ``<output_dir>/<TableName>.csv`` per table.

    Empty tables are skipped.
    """

    def __init__(self, index: bool = False, **default_kwargs):
        """
        Initialize CSV writer.

        Args:
            index: Whether to write row indices (default: False)
            **default_kwargs: Default arguments passed to pandas to_csv()
        """
        self.index = index
        self.default_kwargs = default_kwargs

    def write_frame(self, df: pd.DataFrame, output_path: Path, **kwargs) -> None:
        """
        Write a DataFrame to a single CSV file.

        Raises:
            ValueError: If DataFrame is empty
            IOError: If file cannot be written
        """
        if df.empty:
            raise ValueError("Cannot write empty DataFrame")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        write_kwargs = {**self.default_kwargs, **kwargs}
        if "index" not in write_kwargs:
            write_kwargs["index"] = self.index

        try:
            df.to_csv(output_path, **write_kwargs)
            logger.info(f"Wrote {len(df):,} records to {output_path}")
        except Exception as e:
            logger.error(f"Failed to write CSV to {output_path}: {e}")
            raise OSError(f"Failed to write CSV file: {e}") from e

    def write(self, dataset: FixtureDataset, output_path: Path, **kwargs) -> list[Path]:
        """
        Write every non-empty table under ``output_path``.

        Returns:
            Paths of the CSV files written, in table order
        """
        output_dir = Path(output_path)
        created_files: list[Path] = []

        for table_name in TABLE_NAMES:
            df = table_frame(dataset, table_name)
            if df.empty:
                logger.info(f"Skipping empty table {table_name}")
                continue

            output_file = output_dir / f"{table_name}.csv"
            self.write_frame(df, output_file, **kwargs)
            created_files.append(output_file)

        logger.info(f"Created {len(created_files)} CSV files in {output_dir}")
        return created_files
