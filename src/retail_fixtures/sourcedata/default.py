"""
Default seed profile.

This module re-exports the active default profile's seed texts.
Change the import source to switch profiles.

Usage:
    from retail_fixtures.sourcedata.default import CATEGORIES, COUNTRIES
"""

# Default profile: starter
from retail_fixtures.sourcedata.starter import CATEGORIES, COMPANIES, COUNTRIES

__all__ = ["CATEGORIES", "COUNTRIES", "COMPANIES"]
