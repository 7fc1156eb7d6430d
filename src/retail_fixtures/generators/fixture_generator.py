"""
Fixture generation orchestrator.

Runs every table builder in dependency order against one random stream and
returns the populated dataset.
"""

import logging

from retail_fixtures.config.models import FixtureConfig
from retail_fixtures.shared.exceptions import EmptyDatasetError, FixtureGenException
from retail_fixtures.shared.logging_utils import get_run_logger
from retail_fixtures.shared.models import FixtureDataset, SeedGroup
from retail_fixtures.shared.rng import RandomStream
from retail_fixtures.shared.seed_loader import SeedLoader

from .dimension_generators import (
    BaseGenerator,
    CatalogGeneratorMixin,
    GeographyGeneratorMixin,
    StockUnitGeneratorMixin,
    StoreGeneratorMixin,
)
from .fact_generators import TransactionGeneratorMixin
from .progress_tracker import TableProgressTracker

logger = logging.getLogger(__name__)
run_logger = get_run_logger(f"{__name__}.run")

TABLE_KEYS = [
    "brands",
    "franchises",
    "categories",
    "products",
    "countries",
    "cities",
    "stores",
    "stock_units",
    "stock_transactions",
]


class FixtureGenerator(
    BaseGenerator,
    CatalogGeneratorMixin,
    GeographyGeneratorMixin,
    StoreGeneratorMixin,
    StockUnitGeneratorMixin,
    TransactionGeneratorMixin,
):
    """
    Main fixture generation engine.

    Generates, in order:
    - brands and franchises (companies source)
    - categories (categories source)
    - countries and cities (countries source)
    - products, stores, stock units (seeded cross products)
    - stock transactions (daily price-walk simulation)

    Only the last four steps draw random values; all of them share the
    stream created from ``config.seed``.
    """

    def __init__(self, config: FixtureConfig | None = None):
        super().__init__(config or FixtureConfig())

        self.seed_loader = SeedLoader(
            self.config.paths.seeds,
            filenames={
                "categories": self.config.paths.categories,
                "countries": self.config.paths.countries,
                "companies": self.config.paths.companies,
            },
            profile=self.config.profile,
            strict=self.config.strict_inputs,
        )

        self._brand_names: list[str] = []
        self._franchise_names: list[str] = []
        self._category_groups: list[SeedGroup] = []
        self._country_groups: list[SeedGroup] = []

        logger.info(f"FixtureGenerator initialized with seed {self.config.seed}")

    def _load_seed_data(self) -> None:
        """Load all three seed sources."""
        self._brand_names, self._franchise_names = self.seed_loader.load_companies()
        self._category_groups = self.seed_loader.load_categories()
        self._country_groups = self.seed_loader.load_countries()

        logger.info(
            f"Loaded {len(self._brand_names)} brands, "
            f"{len(self._franchise_names)} franchises, "
            f"{len(self._category_groups)} categories, "
            f"{len(self._country_groups)} countries"
        )

    def _finish_table(self, table_key: str, count: int) -> None:
        self._emit_progress(table_key, 1.0, f"Generated {count:,} {table_key}")
        run_logger.table_generated(table_key, count)

    def generate(self) -> FixtureDataset:
        """
        Generate the complete dataset.

        Returns:
            FixtureDataset with every table populated

        Raises:
            EmptyDatasetError: In strict mode, when nothing was generated
            SeedFileNotFoundError: In strict mode, when a seed file is missing
        """
        run_logger.start_run(self.config.seed)
        try:
            self._progress_tracker = TableProgressTracker(TABLE_KEYS)
            self._load_seed_data()

            rng = RandomStream(self.config.seed)
            dataset = self._generate_tables(rng)

            self._progress_tracker.mark_generation_complete()
            self._check_empty(dataset)

            run_logger.run_complete(dataset.table_counts(), rng.draws)
            return dataset
        except FixtureGenException as e:
            run_logger.run_failed(e)
            raise
        finally:
            run_logger.end_run()

    def _generate_tables(self, rng: RandomStream) -> FixtureDataset:
        """Build every table in draw order on the shared stream."""
        dataset = FixtureDataset()

        self._start_table("brands")
        dataset.Brands = self.generate_brands(self._brand_names)
        self._finish_table("brands", len(dataset.Brands))

        self._start_table("franchises")
        dataset.Franchises = self.generate_franchises(self._franchise_names)
        self._finish_table("franchises", len(dataset.Franchises))

        self._start_table("countries")
        self._start_table("cities")
        dataset.Countries, dataset.Cities = self.generate_geography(
            self._country_groups
        )
        self._finish_table("countries", len(dataset.Countries))
        self._finish_table("cities", len(dataset.Cities))

        self._start_table("categories")
        self._start_table("products")
        dataset.Categories = self.generate_categories(self._category_groups)
        self._finish_table("categories", len(dataset.Categories))
        dataset.Products = self.generate_products(
            self._category_groups,
            dataset.Categories,
            dataset.Brands,
            rng,
            self.config.expansion.product_probability,
        )
        self._finish_table("products", len(dataset.Products))

        self._start_table("stores")
        dataset.Stores = self.generate_stores(dataset.Franchises, dataset.Cities, rng)
        self._finish_table("stores", len(dataset.Stores))

        self._start_table("stock_units")
        dataset.StockUnits = self.generate_stock_units(
            dataset.Stores,
            dataset.Products,
            rng,
            self.config.expansion.stock_unit_probability,
        )
        self._finish_table("stock_units", len(dataset.StockUnits))

        self._start_table("stock_transactions", "Simulating daily sales")
        dataset.StockTransactions = self.generate_stock_transactions(
            dataset.StockUnits,
            dataset.Products,
            rng,
            self.config.simulation,
            self.config.pricing,
            on_day_complete=lambda done, total: self._emit_progress(
                "stock_transactions", done / total, f"Simulated day {done}/{total}"
            ),
        )
        self._finish_table("stock_transactions", len(dataset.StockTransactions))
        return dataset

    def _check_empty(self, dataset: FixtureDataset) -> None:
        """Surface an empty result: a warning, or an error in strict mode."""
        if not dataset.is_empty:
            return

        empty_sources = [
            name
            for name in SeedLoader.SOURCES
            if not self.seed_loader.get_load_result(name).groups
        ]
        if self.config.strict_inputs:
            raise EmptyDatasetError(empty_sources=empty_sources)

        logger.warning(
            f"Seed inputs produced an empty dataset (empty sources: {empty_sources})"
        )
