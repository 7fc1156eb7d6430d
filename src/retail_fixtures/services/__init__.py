"""Output services for generated datasets."""

from retail_fixtures.services.export_service import ExportService

__all__ = ["ExportService"]
