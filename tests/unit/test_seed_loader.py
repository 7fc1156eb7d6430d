"""
Unit tests for seed text parsing and SeedLoader.
"""

import pytest

from retail_fixtures.shared.exceptions import SeedFileNotFoundError, SeedLoadError
from retail_fixtures.shared.seed_loader import SeedLoader, parse_seed_text


class TestParseSeedText:
    """Tests for the blank-line grouped text format."""

    def test_groups_label_and_members(self):
        """First line of a group is the label, the rest are members."""
        groups = parse_seed_text("Beverages\nCola\nWater\n\nSnacks\nChips\n")

        assert [g.label for g in groups] == ["Beverages", "Snacks"]
        assert groups[0].members == ["Cola", "Water"]
        assert groups[1].members == ["Chips"]

    def test_lines_are_trimmed(self):
        groups = parse_seed_text("  Beverages  \n\tCola \n")

        assert groups[0].label == "Beverages"
        assert groups[0].members == ["Cola"]

    def test_whitespace_only_line_ends_group(self):
        groups = parse_seed_text("A\nx\n   \nB\ny\n")

        assert [g.label for g in groups] == ["A", "B"]

    def test_repeated_blank_lines_do_not_create_groups(self):
        groups = parse_seed_text("\n\nA\nx\n\n\n\nB\n\n")

        assert [g.label for g in groups] == ["A", "B"]
        assert groups[1].members == []

    def test_last_group_without_trailing_newline(self):
        groups = parse_seed_text("A\nx\ny")

        assert groups[0].members == ["x", "y"]

    def test_empty_text(self):
        assert parse_seed_text("") == []
        assert parse_seed_text("\n \n\t\n") == []

    def test_order_is_preserved(self):
        text = "C\n3\n1\n2\n\nA\nz\na\n"
        groups = parse_seed_text(text)

        assert [g.label for g in groups] == ["C", "A"]
        assert groups[0].members == ["3", "1", "2"]
        assert groups[1].members == ["z", "a"]

    def test_windows_line_endings(self):
        groups = parse_seed_text("A\r\nx\r\n\r\nB\r\ny\r\n")

        assert [g.label for g in groups] == ["A", "B"]
        assert groups[0].members == ["x"]


class TestSeedLoaderFiles:
    """Tests for loading seed sources from disk."""

    def test_load_all_sources(self, seed_dir):
        loader = SeedLoader(seed_dir)

        categories = loader.load_categories()
        countries = loader.load_countries()
        brands, franchises = loader.load_companies()

        assert [g.label for g in categories] == ["Beverages", "Snacks"]
        assert [g.label for g in countries] == ["Northland", "Westmarch"]
        assert brands == ["Acme", "Globex", "Initech", "Umbrella Foods"]
        assert franchises == ["QuickMart", "ValueBarn"]

    def test_load_result_counts(self, seed_dir):
        loader = SeedLoader(seed_dir)
        result = loader.load_source("categories")

        assert result.group_count == 2
        assert result.member_count == 5
        assert result.source.endswith("categories.txt")
        assert loader.get_load_result("categories") is result

    def test_custom_filenames(self, tmp_path):
        (tmp_path / "cats.txt").write_text("Tools\nHammer\n", encoding="utf-8")
        loader = SeedLoader(tmp_path, filenames={"categories": "cats.txt"})

        assert loader.load_categories()[0].members == ["Hammer"]

    def test_second_load_uses_cache(self, seed_dir):
        loader = SeedLoader(seed_dir)
        loader.load_source("countries")
        result = loader.load_source("countries")

        assert "Data loaded from cache" in result.warnings
        assert result.group_count == 2

    def test_force_reload_bypasses_cache(self, seed_dir):
        loader = SeedLoader(seed_dir)
        loader.load_source("countries")
        result = loader.load_source("countries", force_reload=True)

        assert "Data loaded from cache" not in result.warnings

    def test_latin1_fallback(self, tmp_path):
        (tmp_path / "countries.txt").write_bytes(b"Caf\xe9land\nZ\xfcrich\n")
        loader = SeedLoader(tmp_path)

        groups = loader.load_countries()
        assert groups[0].label == "Caféland"
        assert groups[0].members == ["Zürich"]

    def test_unknown_source_raises(self, seed_dir):
        loader = SeedLoader(seed_dir)

        with pytest.raises(SeedLoadError, match="Unknown seed source"):
            loader.load_source("customers")

    def test_get_load_result_before_load_raises(self, seed_dir):
        with pytest.raises(SeedLoadError, match="not loaded"):
            SeedLoader(seed_dir).get_load_result("categories")

    def test_summary(self, seed_dir):
        loader = SeedLoader(seed_dir)
        loader.load_categories()

        summary = loader.get_summary()
        assert summary["total_sources"] == 3
        assert summary["loaded_sources"] == 1
        assert summary["sources"]["categories"]["members"] == 5


class TestSeedLoaderMissingInput:
    """Missing or malformed input is permissive unless strict."""

    def test_missing_file_loads_empty_with_warning(self, tmp_path):
        loader = SeedLoader(tmp_path / "nowhere")
        result = loader.load_source("categories")

        assert result.groups == []
        assert any("not found" in w for w in result.warnings)

    def test_missing_file_strict_raises(self, tmp_path):
        loader = SeedLoader(tmp_path / "nowhere", strict=True)

        with pytest.raises(SeedFileNotFoundError) as exc_info:
            loader.load_source("categories")
        assert exc_info.value.searched_paths

    def test_empty_file_warns(self, tmp_path, make_seed_dir):
        make_seed_dir(tmp_path, categories="\n\n")
        result = SeedLoader(tmp_path).load_source("categories")

        assert result.groups == []
        assert any("contains no groups" in w for w in result.warnings)

    def test_companies_with_one_group(self, tmp_path, make_seed_dir):
        make_seed_dir(tmp_path, companies="Brands\nAcme\n")
        loader = SeedLoader(tmp_path)

        brands, franchises = loader.load_companies()
        assert brands == ["Acme"]
        assert franchises == []
        assert any(
            "expected brands then franchises" in w
            for w in loader.get_load_result("companies").warnings
        )

    def test_companies_missing_entirely(self, tmp_path):
        loader = SeedLoader(tmp_path / "nowhere")

        assert loader.load_companies() == ([], [])


class TestSeedLoaderProfiles:
    """Tests for packaged seed profiles."""

    def test_starter_profile(self, tmp_path):
        loader = SeedLoader(tmp_path / "ignored", profile="starter")

        categories = loader.load_categories()
        brands, franchises = loader.load_companies()

        assert categories[0].label == "Beverages"
        assert "Acme" in brands
        assert "QuickMart" in franchises
        assert loader.get_load_result("categories").source == "profile:starter"

    def test_default_profile_matches_starter(self):
        default = SeedLoader(profile="default").load_countries()
        starter = SeedLoader(profile="starter").load_countries()

        assert default == starter

    def test_unknown_profile_raises(self):
        with pytest.raises(SeedLoadError, match="Unknown seed profile"):
            SeedLoader(profile="boutique").load_categories()
