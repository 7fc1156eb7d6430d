"""
Generators module for retail fixture generation.

This module contains the dimension builders, the stock transaction
simulation and the orchestrator that runs them in order.
"""

from .fixture_generator import TABLE_KEYS, FixtureGenerator
from .progress_tracker import TableProgressTracker

__all__ = [
    "FixtureGenerator",
    "TableProgressTracker",
    "TABLE_KEYS",
]
