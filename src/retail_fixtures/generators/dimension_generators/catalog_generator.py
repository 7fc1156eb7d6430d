"""
Catalog dimension generation: brands, franchises, categories and products.
"""

import logging

from retail_fixtures.shared.models import (
    Brand,
    Category,
    Franchise,
    Product,
    SeedGroup,
)
from retail_fixtures.shared.rng import RandomStream

logger = logging.getLogger(__name__)


class CatalogGeneratorMixin:
    """Mixin for brand, franchise, category and product generation."""

    def generate_brands(self, brand_names: list[str]) -> list[Brand]:
        """Brands with IDs 0..n-1 in seed order."""
        brands = [Brand(ID=i, Name=name) for i, name in enumerate(brand_names)]
        logger.info(f"Generated {len(brands)} brands")
        return brands

    def generate_franchises(self, franchise_names: list[str]) -> list[Franchise]:
        """Franchises with IDs 0..n-1 in seed order."""
        franchises = [
            Franchise(ID=i, Name=name) for i, name in enumerate(franchise_names)
        ]
        logger.info(f"Generated {len(franchises)} franchises")
        return franchises

    def generate_categories(self, category_groups: list[SeedGroup]) -> list[Category]:
        """One category per seed group, named by the group label."""
        categories = [
            Category(ID=i, Name=group.label) for i, group in enumerate(category_groups)
        ]
        logger.info(f"Generated {len(categories)} categories")
        return categories

    def generate_products(
        self,
        category_groups: list[SeedGroup],
        categories: list[Category],
        brands: list[Brand],
        rng: RandomStream,
        probability: float = 0.3,
    ) -> list[Product]:
        """
        Cross category items with brands.

        Every (item, brand) pair consumes exactly one uniform draw, in
        category order, then item order, then brand ID order. Pairs whose
        draw falls below ``probability`` become products.

        Args:
            category_groups: Category seed groups (members are item names)
            categories: Category records built from the same groups
            brands: Brand records
            rng: Shared random stream
            probability: Inclusion probability per pair

        Returns:
            List of Product records
        """
        products: list[Product] = []
        pair_count = 0

        for category, group in zip(categories, category_groups):
            for item in group.members:
                for brand in brands:
                    pair_count += 1
                    if rng.uniform() < probability:
                        products.append(
                            Product(
                                ID=len(products),
                                Name=f"{item} | {brand.Name}",
                                CategoryID=category.ID,
                                BrandID=brand.ID,
                            )
                        )

        logger.info(
            f"Generated {len(products):,} products from {pair_count:,} item-brand pairs"
        )
        return products
