"""
Unit tests for dataset writers and the export service.
"""

import json

import pandas as pd
import pytest

from retail_fixtures.config.models import FixtureConfig
from retail_fixtures.services import ExportService
from retail_fixtures.services.writers import CSVWriter, JSONWriter
from retail_fixtures.services.writers.csv_writer import table_frame
from retail_fixtures.shared.models import (
    TABLE_NAMES,
    Brand,
    FixtureDataset,
    SimpleDate,
    StockTransaction,
)


@pytest.fixture
def small_dataset() -> FixtureDataset:
    return FixtureDataset(
        Brands=[Brand(ID=0, Name="Acme"), Brand(ID=1, Name="Globex")],
        StockTransactions=[
            StockTransaction(
                ID=0,
                StockUnitID=3,
                Count=2,
                TotalPriceCents=500,
                Date=SimpleDate(Year=2020, Month=1, Day=2),
            )
        ],
    )


class TestJSONWriter:
    """Document layout of the JSON output."""

    def test_top_level_tables_in_order(self, small_dataset):
        document = json.loads(JSONWriter().render(small_dataset))

        assert list(document.keys()) == TABLE_NAMES

    def test_empty_tables_are_lists(self):
        document = json.loads(JSONWriter().render(FixtureDataset()))

        assert all(document[name] == [] for name in TABLE_NAMES)

    def test_transaction_shape(self, small_dataset):
        document = json.loads(JSONWriter().render(small_dataset))

        assert document["StockTransactions"][0] == {
            "ID": 0,
            "StockUnitID": 3,
            "IsSale": True,
            "Count": 2,
            "TotalPriceCents": 500,
            "Date": {"Year": 2020, "Month": 1, "Day": 2},
        }

    def test_indent_and_trailing_newline(self, small_dataset):
        text = JSONWriter(indent=4).render(small_dataset)

        assert text.endswith("}\n")
        assert '\n    "Brands": [' in text

    def test_write_creates_parent_dirs(self, small_dataset, tmp_path):
        path = tmp_path / "a" / "b" / "generated.json"
        written = JSONWriter().write(small_dataset, path)

        assert written == [path]
        assert json.loads(path.read_text())["Brands"][1]["Name"] == "Globex"

    def test_write_failure_raises_oserror(self, small_dataset, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")

        with pytest.raises(OSError):
            JSONWriter().write(small_dataset, blocker / "generated.json")


class TestCSVWriter:
    """Per-table CSV output."""

    def test_table_frame_flattens_date(self, small_dataset):
        df = table_frame(small_dataset, "StockTransactions")

        assert list(df.columns) == [
            "ID",
            "StockUnitID",
            "IsSale",
            "Count",
            "TotalPriceCents",
            "Date_Year",
            "Date_Month",
            "Date_Day",
        ]
        assert df.loc[0, "Date_Day"] == 2

    def test_writes_non_empty_tables_only(self, small_dataset, tmp_path):
        written = CSVWriter().write(small_dataset, tmp_path / "tables")

        assert [p.name for p in written] == ["Brands.csv", "StockTransactions.csv"]
        brands = pd.read_csv(tmp_path / "tables" / "Brands.csv")
        assert brands["Name"].tolist() == ["Acme", "Globex"]

    def test_empty_frame_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="empty DataFrame"):
            CSVWriter().write_frame(pd.DataFrame(), tmp_path / "x.csv")

    def test_empty_dataset_writes_nothing(self, tmp_path):
        assert CSVWriter().write(FixtureDataset(), tmp_path / "tables") == []


class TestExportService:
    """Output selection from configuration."""

    def test_json_only_by_default(self, small_dataset, tmp_path):
        config = FixtureConfig(paths={"output": str(tmp_path / "generated.json")})

        written = ExportService(config).export(small_dataset)

        assert list(written.keys()) == ["json"]
        assert (tmp_path / "generated.json").exists()

    def test_tables_directory_adds_csv(self, small_dataset, tmp_path):
        config = FixtureConfig(
            paths={
                "output": str(tmp_path / "generated.json"),
                "tables": str(tmp_path / "tables"),
            }
        )

        written = ExportService(config).export(small_dataset)

        assert len(written["csv"]) == 2

    def test_configured_indent(self, small_dataset, tmp_path):
        config = FixtureConfig(
            paths={"output": str(tmp_path / "generated.json")},
            output={"indent": 2},
        )
        ExportService(config).export(small_dataset)

        assert '\n  "Brands": [' in (tmp_path / "generated.json").read_text()

    def test_unsupported_format(self):
        with pytest.raises(ValueError, match="Unsupported format"):
            ExportService(FixtureConfig())._get_writer("parquet")
