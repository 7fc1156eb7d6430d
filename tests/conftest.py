"""
Pytest configuration and fixtures for retail fixture generator tests.

Provides sample seed texts, seed directories on disk and configurations
pointing at them.
"""

import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for local test runs without installation
_SRC = Path(__file__).resolve().parents[1] / "src"
if _SRC.exists() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from retail_fixtures.config.models import FixtureConfig  # noqa: E402

CATEGORIES_TEXT = """\
Beverages
Cola
Sparkling Water
Orange Juice

Snacks
Potato Chips
Pretzels
"""

COUNTRIES_TEXT = """\
Northland
Frostford
Pinehaven

Westmarch
Harborview
Dunmore
"""

COMPANIES_TEXT = """\
Brands
Acme
Globex
Initech
Umbrella Foods

Franchises
QuickMart
ValueBarn
"""


def write_seed_files(
    directory: Path,
    categories: str = CATEGORIES_TEXT,
    countries: str = COUNTRIES_TEXT,
    companies: str = COMPANIES_TEXT,
) -> Path:
    """Write the three seed files into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "categories.txt").write_text(categories, encoding="utf-8")
    (directory / "countries.txt").write_text(countries, encoding="utf-8")
    (directory / "companies.txt").write_text(companies, encoding="utf-8")
    return directory


@pytest.fixture
def seed_dir(tmp_path) -> Path:
    """Seed directory with the sample categories, countries and companies."""
    return write_seed_files(tmp_path / "seeds")


@pytest.fixture
def fixture_config(seed_dir, tmp_path) -> FixtureConfig:
    """Default-probability configuration reading the sample seed files."""
    return FixtureConfig(
        paths={
            "seeds": str(seed_dir),
            "output": str(tmp_path / "out" / "generated.json"),
        }
    )


@pytest.fixture
def dense_config(seed_dir, tmp_path) -> FixtureConfig:
    """Configuration where every product and stock unit exists and every
    stock unit sells every day."""
    return FixtureConfig(
        paths={
            "seeds": str(seed_dir),
            "output": str(tmp_path / "out" / "generated.json"),
        },
        expansion={"product_probability": 1.0, "stock_unit_probability": 1.0},
        simulation={"skip_probability": 0.0},
    )


@pytest.fixture
def make_seed_dir():
    """Factory writing seed files with optional overrides."""
    return write_seed_files
