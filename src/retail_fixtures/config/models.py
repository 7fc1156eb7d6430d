"""
Configuration models for the retail fixture generator.

These models define the structure and validation for the config.json file.
Every default reproduces the reference fixture (seed pair 10/12, ten days
from 2020-01-01).
"""

import json
import logging
from datetime import date, datetime
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


class PathsConfig(BaseModel):
    """Configuration for seed input and output file paths."""

    seeds: str = Field(".", min_length=1, description="Directory holding seed files")
    categories: str = Field(
        "categories.txt", min_length=1, description="Categories seed file name"
    )
    countries: str = Field(
        "countries.txt", min_length=1, description="Countries seed file name"
    )
    companies: str = Field(
        "companies.txt", min_length=1, description="Companies seed file name"
    )
    output: str = Field(
        "generated.json", min_length=1, description="Output document path"
    )
    tables: str | None = Field(
        None, description="Optional directory for per-table CSV exports"
    )

    @field_validator("seeds", "categories", "countries", "companies", "output")
    @classmethod
    def validate_non_empty_paths(cls, v: str) -> str:
        """Validate that paths are not empty or whitespace only."""
        if not v or not v.strip():
            raise ValueError("Path cannot be empty or whitespace only")
        return v.strip()


class ExpansionConfig(BaseModel):
    """Inclusion probabilities for the cross-product expansions."""

    product_probability: float = Field(
        0.3, ge=0.0, le=1.0, description="Chance a category item is sold by a brand"
    )
    stock_unit_probability: float = Field(
        0.4, ge=0.0, le=1.0, description="Chance a store stocks a product"
    )


class PricingConfig(BaseModel):
    """Price model settings. All amounts are integer cents."""

    min_price_cents: int = Field(100, ge=0, description="Floor for every price")
    base_price_min_cents: int = Field(
        100, ge=0, description="Lowest product base price"
    )
    base_price_span_cents: int = Field(
        10000, gt=0, description="Width of the base price draw"
    )
    walk_threshold_cents: int = Field(
        2000, ge=0, description="Above this, steps scale with the price"
    )
    walk_fraction: float = Field(
        0.15, gt=0.0, lt=1.0, description="Step half-range as a fraction of price"
    )
    small_step_cents: int = Field(
        2, gt=0, description="Step half-range at or below the threshold"
    )

    @model_validator(mode="after")
    def validate_scaled_step(self):
        """Every price above the threshold must get a non-zero step half-range."""
        if int((self.walk_threshold_cents + 1) * self.walk_fraction) < 1:
            raise ValueError(
                "walk_threshold_cents and walk_fraction give a zero step "
                "half-range just above the threshold"
            )
        return self


class SimulationConfig(BaseModel):
    """Configuration for the daily transaction simulation."""

    start_date: str = Field(
        "2020-01-01", description="First simulated day (YYYY-MM-DD format)"
    )
    days: int = Field(10, ge=0, description="Number of simulated days")
    skip_probability: float = Field(
        0.9, ge=0.0, le=1.0, description="Chance a stock unit has no sale on a day"
    )
    price_change_probability: float = Field(
        0.05, ge=0.0, le=1.0, description="Chance of a price walk step per sale"
    )
    max_sale_count: int = Field(
        10, gt=0, description="Sale counts are drawn from [0, max_sale_count)"
    )

    @field_validator("start_date")
    @classmethod
    def validate_start_date(cls, v: str) -> str:
        """Validate start date format."""
        try:
            datetime.strptime(v, "%Y-%m-%d")
        except ValueError:
            raise ValueError("Start date must be in YYYY-MM-DD format")
        return v

    @property
    def start(self) -> date:
        return datetime.strptime(self.start_date, "%Y-%m-%d").date()


class OutputConfig(BaseModel):
    """Configuration for the serialized document."""

    indent: int = Field(4, ge=0, description="JSON indentation width")


class FixtureConfig(BaseModel):
    """Main configuration model for the retail fixture generator."""

    seed: list[int] = Field(
        default_factory=lambda: [10, 12],
        description="Seed pair for reproducible generation",
    )
    profile: str | None = Field(
        None, description="Packaged seed profile to use instead of seed files"
    )
    strict_inputs: bool = Field(
        False, description="Raise on missing seed files or an empty dataset"
    )
    paths: PathsConfig = Field(default_factory=PathsConfig)
    expansion: ExpansionConfig = Field(default_factory=ExpansionConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("seed")
    @classmethod
    def validate_seed_pair(cls, v: list[int]) -> list[int]:
        """Seeds are exactly two non-negative 64-bit integers."""
        if len(v) != 2:
            raise ValueError("seed must contain exactly two integers")
        for part in v:
            if part < 0 or part > 2**64 - 1:
                raise ValueError("seed values must be in [0, 2**64 - 1]")
        return v

    @model_validator(mode="after")
    def validate_base_price_floor(self):
        """Warn when base prices can fall below the price floor."""
        if self.pricing.base_price_min_cents < self.pricing.min_price_cents:
            logger.warning(
                "base_price_min_cents is below min_price_cents; "
                "first walk steps will clamp to the floor"
            )
        return self

    @classmethod
    def from_file(cls, file_path: str | Path) -> "FixtureConfig":
        """
        Load configuration from a JSON file.

        Args:
            file_path: Path to the configuration JSON file

        Returns:
            FixtureConfig instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the JSON is invalid or doesn't match the schema
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        try:
            with path.open("r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file: {e}")

        return cls(**data)

    def to_file(self, file_path: str | Path) -> None:
        """
        Save configuration to a JSON file.

        Args:
            file_path: Path where to save the configuration file
        """
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with path.open("w") as f:
            json.dump(self.model_dump(), f, indent=2)


# Alias used by tests and callers
Config = FixtureConfig
