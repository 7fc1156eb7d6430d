"""
Dimension generators package.

Mixins for each dimension table; FixtureGenerator composes them.
"""

from .base_generator import BaseGenerator
from .catalog_generator import CatalogGeneratorMixin
from .geography_generator import GeographyGeneratorMixin
from .stock_unit_generator import StockUnitGeneratorMixin
from .store_generator import StoreGeneratorMixin, store_name

__all__ = [
    "BaseGenerator",
    "CatalogGeneratorMixin",
    "GeographyGeneratorMixin",
    "StoreGeneratorMixin",
    "StockUnitGeneratorMixin",
    "store_name",
]
