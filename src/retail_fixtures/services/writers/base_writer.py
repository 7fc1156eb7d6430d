"""
Abstract base class for dataset writers.

This module defines the interface that all format writers implement,
providing a consistent API for writing a generated dataset to disk.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from retail_fixtures.shared.models import FixtureDataset


class BaseWriter(ABC):
    """
    Abstract base class for dataset writers.

    Writers receive the whole dataset and a target path; whether the path is
    a single file or a directory of per-table files is up to the format.
    """

    @abstractmethod
    def write(self, dataset: FixtureDataset, output_path: Path, **kwargs) -> list[Path]:
        """
        Write a dataset.

        Args:
            dataset: Generated dataset
            output_path: File or directory to write to
            **kwargs: Additional format-specific options

        Returns:
            List of paths written

        Raises:
            IOError: If output cannot be written
        """
        pass
