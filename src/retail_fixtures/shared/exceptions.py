"""
Custom exceptions for the retail fixture generator.

This module contains specialized exception classes for seed loading problems
and for generation runs that produce no data.
"""

from pathlib import Path


class FixtureGenException(Exception):
    """Base exception for all retail fixture generator errors."""

    pass


class SeedLoadError(FixtureGenException):
    """Exception raised when a seed source cannot be loaded."""

    def __init__(
        self,
        message: str,
        file_path: Path | None = None,
        original_error: Exception | None = None,
    ):
        self.file_path = file_path
        self.original_error = original_error

        if file_path:
            message = f"Error loading seed file '{file_path}': {message}"

        if original_error:
            message = f"{message} (Original error: {original_error})"

        super().__init__(message)


class SeedFileNotFoundError(SeedLoadError):
    """Exception raised when a seed file is missing."""

    def __init__(self, file_path: Path, searched_paths: list[Path] | None = None):
        self.searched_paths = searched_paths or []

        message = f"Seed file not found: {file_path}"

        if searched_paths:
            searched_str = ", ".join([str(p) for p in searched_paths])
            message = f"{message}. Searched in: {searched_str}"

        super().__init__(message)
        self.file_path = file_path


class SeedEncodingError(SeedLoadError):
    """Exception raised when file encoding issues prevent reading."""

    def __init__(
        self,
        file_path: Path,
        attempted_encodings: list[str],
        original_error: Exception | None = None,
    ):
        self.attempted_encodings = attempted_encodings

        encodings_str = ", ".join(attempted_encodings)
        message = f"Unable to read file with encodings: {encodings_str}"

        super().__init__(message, file_path, original_error)


class EmptyDatasetError(FixtureGenException):
    """Exception raised in strict mode when seed inputs yield no entities."""

    def __init__(
        self,
        message: str = "Seed inputs produced an empty dataset",
        empty_sources: list[str] | None = None,
    ):
        self.empty_sources = empty_sources or []

        if empty_sources:
            message = f"{message} (empty sources: {', '.join(empty_sources)})"

        super().__init__(message)
