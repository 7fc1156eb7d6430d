"""
Stock transaction fact generation.

Simulates daily sales over a fixed date window. Each day visits every stock
unit in a fresh random order; roughly one in ten gets a sale whose unit price
follows a per-stock-unit random walk.
"""

import logging
from datetime import date, timedelta
from typing import Callable

from retail_fixtures.config.models import PricingConfig, SimulationConfig
from retail_fixtures.shared.models import (
    Product,
    SimpleDate,
    StockTransaction,
    StockUnit,
)
from retail_fixtures.shared.pricing import PriceWalk
from retail_fixtures.shared.rng import RandomStream

logger = logging.getLogger(__name__)


def simulation_days(start: date, days: int) -> list[date]:
    """Every day in [start, start + days), ascending."""
    return [start + timedelta(days=offset) for offset in range(days)]


class TransactionGeneratorMixin:
    """Mixin for stock transaction generation."""

    def generate_stock_transactions(
        self,
        stock_units: list[StockUnit],
        products: list[Product],
        rng: RandomStream,
        simulation: SimulationConfig | None = None,
        pricing: PricingConfig | None = None,
        on_day_complete: Callable[[int, int], None] | None = None,
    ) -> list[StockTransaction]:
        """
        Generate sale transactions for the simulation window.

        Draw order per run: one base price per product, then per day one
        permutation of stock unit indices, then per visited stock unit:
        the skip draw; the seeding walk step on its first sale; the
        price-change draw (plus a walk step when it hits); the sale count.

        Args:
            stock_units: Stock unit records (index == ID)
            products: Product records
            rng: Shared random stream
            simulation: Date window and sale probabilities
            pricing: Price model settings
            on_day_complete: Called with (days_done, total_days) after each day

        Returns:
            List of StockTransaction records
        """
        simulation = simulation or SimulationConfig()
        walk = PriceWalk(rng, pricing)
        walk.assign_base_prices(products)

        days = simulation_days(simulation.start, simulation.days)
        transactions: list[StockTransaction] = []

        for day_index, day in enumerate(days):
            sale_date = SimpleDate.from_date(day)
            day_start = len(transactions)

            for stock_unit_index in rng.permutation(len(stock_units)):
                if rng.uniform() < simulation.skip_probability:
                    continue

                stock_unit = stock_units[stock_unit_index]
                price = walk.current_price(stock_unit)

                if rng.uniform() < simulation.price_change_probability:
                    price = walk.step(stock_unit)

                count = rng.below(simulation.max_sale_count)

                transactions.append(
                    StockTransaction(
                        ID=len(transactions),
                        StockUnitID=stock_unit.ID,
                        IsSale=True,
                        Count=count,
                        TotalPriceCents=count * price,
                        Date=sale_date,
                    )
                )

            logger.debug(
                f"{day.isoformat()}: {len(transactions) - day_start:,} transactions"
            )
            if on_day_complete:
                on_day_complete(day_index + 1, len(days))

        logger.info(
            f"Generated {len(transactions):,} stock transactions over "
            f"{len(days)} days for {len(stock_units):,} stock units"
        )
        return transactions
