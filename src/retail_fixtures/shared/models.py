"""
Core data models for the retail fixture generator.

This module contains the seed input model (parsed text groups), the dimension
models (brands through stock units) and the fact model (stock transactions),
plus the dataset container that is serialized as the output document.
"""

from datetime import date

from pydantic import BaseModel, Field

# ================================
# SEED MODELS (TEXT INPUTS)
# ================================


class SeedGroup(BaseModel):
    """A labelled group of member lines from a seed text source."""

    label: str = Field(..., min_length=1, description="First line of the group")
    members: list[str] = Field(
        default_factory=list, description="Remaining lines of the group, in order"
    )


# ================================
# DIMENSION MODELS
# ================================


class Brand(BaseModel):
    """Brand dimension table."""

    ID: int = Field(..., ge=0, description="Primary key")
    Name: str = Field(..., min_length=1, description="Brand name")


class Franchise(BaseModel):
    """Franchise dimension table."""

    ID: int = Field(..., ge=0, description="Primary key")
    Name: str = Field(..., min_length=1, description="Franchise name")


class Category(BaseModel):
    """Product category dimension table."""

    ID: int = Field(..., ge=0, description="Primary key")
    Name: str = Field(..., min_length=1, description="Category name")


class Product(BaseModel):
    """Product dimension table (category item offered by a brand)."""

    ID: int = Field(..., ge=0, description="Primary key")
    Name: str = Field(..., min_length=1, description="'<item> | <brand>'")
    CategoryID: int = Field(..., ge=0, description="Foreign key to Category")
    BrandID: int = Field(..., ge=0, description="Foreign key to Brand")


class Country(BaseModel):
    """Country dimension table."""

    ID: int = Field(..., ge=0, description="Primary key")
    Name: str = Field(..., min_length=1, description="Country name")


class City(BaseModel):
    """City dimension table."""

    ID: int = Field(..., ge=0, description="Primary key, global across countries")
    Name: str = Field(..., min_length=1, description="City name")
    CountryID: int = Field(..., ge=0, description="Foreign key to Country")


class Store(BaseModel):
    """Store dimension table."""

    ID: int = Field(..., ge=0, description="Primary key")
    FranchiseID: int = Field(..., ge=0, description="Foreign key to Franchise")
    CityID: int = Field(..., ge=0, description="Foreign key to City")
    Name: str = Field(..., min_length=1, description="Store display name")


class StockUnit(BaseModel):
    """A product stocked at a store."""

    ID: int = Field(..., ge=0, description="Primary key")
    ProductID: int = Field(..., ge=0, description="Foreign key to Product")
    StoreID: int = Field(..., ge=0, description="Foreign key to Store")


# ================================
# FACT MODELS
# ================================


class SimpleDate(BaseModel):
    """Calendar date serialized as separate year, month and day fields."""

    Year: int = Field(..., ge=1)
    Month: int = Field(..., ge=1, le=12)
    Day: int = Field(..., ge=1, le=31)

    @classmethod
    def from_date(cls, value: date) -> "SimpleDate":
        return cls(Year=value.year, Month=value.month, Day=value.day)

    def to_date(self) -> date:
        return date(self.Year, self.Month, self.Day)


class StockTransaction(BaseModel):
    """Stock movement fact. Every generated transaction is a sale."""

    ID: int = Field(..., ge=0, description="Primary key")
    StockUnitID: int = Field(..., ge=0, description="Foreign key to StockUnit")
    IsSale: bool = Field(True, description="Whether the movement is a sale")
    Count: int = Field(..., ge=0, description="Units sold")
    TotalPriceCents: int = Field(
        ..., ge=0, description="Count multiplied by the unit price, in cents"
    )
    Date: SimpleDate = Field(..., description="Transaction date")


# ================================
# DATASET CONTAINER
# ================================

TABLE_NAMES = [
    "Brands",
    "Franchises",
    "Categories",
    "Products",
    "Countries",
    "Cities",
    "Stores",
    "StockUnits",
    "StockTransactions",
]


class FixtureDataset(BaseModel):
    """All generated tables, each ordered by ID."""

    Brands: list[Brand] = Field(default_factory=list)
    Franchises: list[Franchise] = Field(default_factory=list)
    Categories: list[Category] = Field(default_factory=list)
    Products: list[Product] = Field(default_factory=list)
    Countries: list[Country] = Field(default_factory=list)
    Cities: list[City] = Field(default_factory=list)
    Stores: list[Store] = Field(default_factory=list)
    StockUnits: list[StockUnit] = Field(default_factory=list)
    StockTransactions: list[StockTransaction] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when every table is empty."""
        return not any(getattr(self, name) for name in TABLE_NAMES)

    def table_counts(self) -> dict[str, int]:
        """Row count per table, in document order."""
        return {name: len(getattr(self, name)) for name in TABLE_NAMES}

    def to_document(self) -> dict:
        """Plain-JSON representation with tables in document order."""
        return self.model_dump(mode="json")
