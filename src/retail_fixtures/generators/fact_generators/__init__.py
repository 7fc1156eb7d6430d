"""
Fact generators package.
"""

from .transaction_generator import TransactionGeneratorMixin, simulation_days

__all__ = ["TransactionGeneratorMixin", "simulation_days"]
