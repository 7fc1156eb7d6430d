"""
Stock unit generation: which products each store carries.
"""

import logging

from retail_fixtures.shared.models import Product, StockUnit, Store
from retail_fixtures.shared.rng import RandomStream

logger = logging.getLogger(__name__)


class StockUnitGeneratorMixin:
    """Mixin for stock unit generation."""

    def generate_stock_units(
        self,
        stores: list[Store],
        products: list[Product],
        rng: RandomStream,
        probability: float = 0.4,
    ) -> list[StockUnit]:
        """
        Cross stores with products.

        Every (store, product) pair consumes exactly one uniform draw,
        store-major then product-minor; draws below ``probability`` become
        stock units.

        Args:
            stores: Store records
            products: Product records
            rng: Shared random stream
            probability: Inclusion probability per pair

        Returns:
            List of StockUnit records
        """
        stock_units: list[StockUnit] = []

        for store in stores:
            for product in products:
                if rng.uniform() < probability:
                    stock_units.append(
                        StockUnit(
                            ID=len(stock_units),
                            ProductID=product.ID,
                            StoreID=store.ID,
                        )
                    )

        logger.info(
            f"Generated {len(stock_units):,} stock units from "
            f"{len(stores) * len(products):,} store-product pairs"
        )
        return stock_units
