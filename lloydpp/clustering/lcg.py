"""Deterministic 64-bit linear congruential generator.

Seeding must reproduce the same draws for the same seed on every
platform, so it does not use numpy's generators. The recurrence is

    s <- (a * s + c) mod 2^64

with Knuth's MMIX constants. Every derived draw (uniform float, bounded
integer, weighted index) is defined in terms of ``next_u64`` so that the
full sequence of choices is fixed by the seed alone.
"""

import numpy as np
from typing import Sequence


MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407
MODULUS_MASK = 2 ** 64 - 1

_INV_2_53 = 1.0 / (1 << 53)


class LinearCongruentialGenerator:
    """64-bit LCG with uniform, bounded and weighted draws.

    Example:
        >>> rng = LinearCongruentialGenerator(0)
        >>> rng.next_u64()
        1442695040888963407
    """

    def __init__(self, seed: int):
        if not 0 <= seed <= MODULUS_MASK:
            raise ValueError(f"seed must be an unsigned 64-bit integer, got {seed}")
        self.state = int(seed)

    def next_u64(self) -> int:
        """Advance the state once and return it."""
        self.state = (MULTIPLIER * self.state + INCREMENT) & MODULUS_MASK
        return self.state

    def uniform(self) -> float:
        """Uniform float in [0, 1) from the top 53 bits of one draw."""
        return (self.next_u64() >> 11) * _INV_2_53

    def randint(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        if n < 1:
            raise ValueError(f"randint needs a positive bound, got {n}")
        return min(int(self.uniform() * n), n - 1)

    def weighted_index(self, weights: Sequence[float]) -> int:
        """Sample an index with probability proportional to its weight.

        Falls back to a uniform draw when no weight is positive. Otherwise
        zero-weight entries are never returned.

        Args:
            weights: Non-negative weights, at least one entry.

        Returns:
            Chosen index.
        """
        weights = np.asarray(weights, dtype=np.float64)
        n = len(weights)
        if n == 0:
            raise ValueError("weighted_index needs at least one weight")
        if np.any(weights < 0):
            raise ValueError("weights must be non-negative")

        cumulative = np.cumsum(weights)
        total = cumulative[-1]
        if not total > 0:
            return self.randint(n)

        target = self.uniform() * total
        idx = int(np.searchsorted(cumulative, target, side="right"))
        if idx >= n:
            # Rounding can put target on the total; take the last real weight
            idx = int(np.flatnonzero(weights)[-1])
        return idx
