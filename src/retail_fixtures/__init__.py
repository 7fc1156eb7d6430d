"""
Retail Fixture Generator

A deterministic synthetic dataset generator for a multi-store retail chain:
- Brands, franchises, categories and geography from seed text lists
- Products, stores and stock units from seeded cross-product expansion
- Daily sale transactions priced by a bounded random walk
"""

__version__ = "1.0.0"
__author__ = "Retail Fixtures"
