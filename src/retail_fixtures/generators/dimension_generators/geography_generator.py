"""
Geography dimension generation.

Handles creation of country and city dimension records.
"""

import logging

from retail_fixtures.shared.models import City, Country, SeedGroup

logger = logging.getLogger(__name__)


class GeographyGeneratorMixin:
    """Mixin for geography dimension generation."""

    def generate_geography(
        self, country_groups: list[SeedGroup]
    ) -> tuple[list[Country], list[City]]:
        """
        Generate countries and their cities.

        City IDs come from a single counter shared by all countries, so they
        run 0..n-1 in country-then-city order.

        Args:
            country_groups: Country seed groups (members are city names)

        Returns:
            Tuple of (countries, cities)
        """
        countries: list[Country] = []
        cities: list[City] = []

        for country_id, group in enumerate(country_groups):
            countries.append(Country(ID=country_id, Name=group.label))
            for city_name in group.members:
                cities.append(
                    City(ID=len(cities), Name=city_name, CountryID=country_id)
                )

        logger.info(f"Generated {len(countries)} countries and {len(cities)} cities")
        return countries, cities
