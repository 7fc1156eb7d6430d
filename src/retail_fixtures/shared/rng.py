"""
Seeded random stream shared by every generation step.

One RandomStream is created per run from the configured seed pair and passed
explicitly to each builder. The draw order of a run is part of its output:
the same seed pair and seed inputs always give the same dataset.
"""

from collections.abc import Sequence

import numpy as np


class RandomStream:
    """
    Thin wrapper around a NumPy PCG64 generator seeded from a seed pair.

    Exposes only the three draw kinds the generators use and counts every
    call, so tests can check how many values each step consumed.

    Attributes:
        seed: The seed pair the stream was created from
        draws: Number of draw calls made so far
    """

    def __init__(self, seed: Sequence[int]):
        if len(seed) != 2:
            raise ValueError("seed must contain exactly two integers")
        self.seed = tuple(int(part) for part in seed)
        self._rng = np.random.default_rng(list(self.seed))
        self.draws = 0

    def uniform(self) -> float:
        """Float in [0, 1)."""
        self.draws += 1
        return float(self._rng.random())

    def below(self, n: int) -> int:
        """Integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        self.draws += 1
        return int(self._rng.integers(n))

    def permutation(self, n: int) -> list[int]:
        """Random ordering of range(n)."""
        self.draws += 1
        return [int(i) for i in self._rng.permutation(n)]
