"""
Dataset writers for export functionality.

This module provides a unified interface for writing a generated dataset
as a JSON document or as per-table CSV files.
"""

from retail_fixtures.services.writers.base_writer import BaseWriter
from retail_fixtures.services.writers.csv_writer import CSVWriter
from retail_fixtures.services.writers.json_writer import JSONWriter

__all__ = [
    "BaseWriter",
    "CSVWriter",
    "JSONWriter",
]
