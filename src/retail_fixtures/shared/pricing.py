"""
Price model for stock transactions.

Prices are integer cents. Each product gets a base price once per run; each
stock unit starts from a walk step off its product's base price and then
drifts by further walk steps as the simulation advances.
"""

import logging

from retail_fixtures.config.models import PricingConfig

from .models import Product, StockUnit
from .rng import RandomStream

logger = logging.getLogger(__name__)


def adjusted_price(
    rng: RandomStream, price: int, pricing: PricingConfig | None = None
) -> int:
    """
    Apply one bounded random-walk step to a price.

    Above the walk threshold the step half-range is a fraction of the price
    (truncated); at or below it the half-range is a small fixed amount. The
    step is drawn from [-half, +half) and the result is clamped to the
    minimum price.

    Args:
        rng: Shared random stream (consumes one draw)
        price: Current price in cents
        pricing: Price settings (defaults to the reference model)

    Returns:
        New price in cents, never below ``pricing.min_price_cents``
    """
    pricing = pricing or PricingConfig()

    half_range = pricing.small_step_cents
    if price > pricing.walk_threshold_cents:
        half_range = int(price * pricing.walk_fraction)

    adjustment = rng.below(half_range + half_range) - half_range
    return max(price + adjustment, pricing.min_price_cents)


class PriceWalk:
    """
    Per-run price state: product base prices and stock unit current prices.

    Both lookups are keyed by integer ID and live only as long as the
    transaction pass that owns this object.
    """

    def __init__(self, rng: RandomStream, pricing: PricingConfig | None = None):
        self.rng = rng
        self.pricing = pricing or PricingConfig()
        self.base_prices: dict[int, int] = {}
        self.current_prices: dict[int, int] = {}

    def assign_base_prices(self, products: list[Product]) -> None:
        """Draw one base price per product, in product order."""
        for product in products:
            self.base_prices[product.ID] = (
                self.pricing.base_price_min_cents
                + self.rng.below(self.pricing.base_price_span_cents)
            )
        logger.debug(f"Assigned base prices for {len(products):,} products")

    def current_price(self, stock_unit: StockUnit) -> int:
        """Return the cached price, seeding it from the base price on first use."""
        price = self.current_prices.get(stock_unit.ID)
        if price is None:
            price = adjusted_price(
                self.rng, self.base_prices[stock_unit.ProductID], self.pricing
            )
            self.current_prices[stock_unit.ID] = price
        return price

    def step(self, stock_unit: StockUnit) -> int:
        """Walk the stock unit's cached price one step and store the result."""
        price = adjusted_price(
            self.rng, self.current_price(stock_unit), self.pricing
        )
        self.current_prices[stock_unit.ID] = price
        return price
