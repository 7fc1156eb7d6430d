"""
Store dimension generation from franchise and city pairs.
"""

import logging

from retail_fixtures.shared.models import City, Franchise, Store
from retail_fixtures.shared.rng import RandomStream

logger = logging.getLogger(__name__)

# First draw: 0 = no store, 1 = one store, 2 = several stores
_STORE_COUNT_OUTCOMES = 3
_MULTI_STORE_OUTCOME = 2
# Second draw for several stores: 2 + [0, 3) gives 2..4
_MULTI_STORE_MIN = 2
_MULTI_STORE_EXTRA_OUTCOMES = 3


def store_name(franchise: Franchise, city: City, index: int, count: int) -> str:
    """'<franchise> <city>', with ' (#index)' when the pair has several stores."""
    suffix = f" (#{index})" if count > 1 else ""
    return f"{franchise.Name} {city.Name}{suffix}"


class StoreGeneratorMixin:
    """Mixin for store dimension generation."""

    def draw_store_count(self, rng: RandomStream) -> int:
        """Number of stores for one franchise-city pair (0 to 4)."""
        count = rng.below(_STORE_COUNT_OUTCOMES)
        if count == _MULTI_STORE_OUTCOME:
            count = _MULTI_STORE_MIN + rng.below(_MULTI_STORE_EXTRA_OUTCOMES)
        return count

    def generate_stores(
        self,
        franchises: list[Franchise],
        cities: list[City],
        rng: RandomStream,
    ) -> list[Store]:
        """
        Generate stores for every franchise-city pair.

        Pairs are visited franchise-major, city-minor. Each pair draws its
        store count (one draw, or two when it has several stores).

        Args:
            franchises: Franchise records
            cities: City records
            rng: Shared random stream

        Returns:
            List of Store records
        """
        stores: list[Store] = []

        for franchise in franchises:
            for city in cities:
                count = self.draw_store_count(rng)
                for index in range(1, count + 1):
                    stores.append(
                        Store(
                            ID=len(stores),
                            FranchiseID=franchise.ID,
                            CityID=city.ID,
                            Name=store_name(franchise, city, index, count),
                        )
                    )

        logger.info(
            f"Generated {len(stores):,} stores across "
            f"{len(franchises) * len(cities):,} franchise-city pairs"
        )
        return stores
