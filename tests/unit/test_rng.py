"""
Unit tests for the shared random stream.
"""

import pytest

from retail_fixtures.shared.rng import RandomStream


class TestRandomStream:
    """Seeding, draw ranges and draw counting."""

    def test_same_seed_same_sequence(self):
        a = RandomStream([10, 12])
        b = RandomStream([10, 12])

        assert [a.uniform() for _ in range(5)] == [b.uniform() for _ in range(5)]
        assert [a.below(1000) for _ in range(5)] == [b.below(1000) for _ in range(5)]
        assert a.permutation(20) == b.permutation(20)

    def test_different_seed_different_sequence(self):
        a = RandomStream([10, 12])
        b = RandomStream([12, 10])

        assert [a.uniform() for _ in range(5)] != [b.uniform() for _ in range(5)]

    def test_ranges(self):
        rng = RandomStream([1, 2])

        for _ in range(200):
            assert 0.0 <= rng.uniform() < 1.0
            assert 0 <= rng.below(3) < 3

    def test_permutation_is_complete(self):
        rng = RandomStream([1, 2])

        assert sorted(rng.permutation(50)) == list(range(50))
        assert rng.permutation(0) == []

    def test_draws_counts_every_call(self):
        rng = RandomStream([1, 2])
        rng.uniform()
        rng.below(10)
        rng.permutation(5)
        rng.permutation(0)

        assert rng.draws == 4

    def test_below_requires_positive_bound(self):
        rng = RandomStream([1, 2])

        with pytest.raises(ValueError, match="must be positive"):
            rng.below(0)
        assert rng.draws == 0

    def test_seed_must_be_pair(self):
        with pytest.raises(ValueError, match="exactly two"):
            RandomStream([1])

    def test_large_seed_values(self):
        rng = RandomStream([2**64 - 1, 0])

        assert rng.seed == (2**64 - 1, 0)
        assert 0.0 <= rng.uniform() < 1.0
