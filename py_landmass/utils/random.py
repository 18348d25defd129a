"""
Seed supply for map generation.

Generation itself is fully deterministic for a given seed. Randomness is
only used here, to pick a seed when the caller asks for one with the
RANDOM_SEED sentinel.
"""

from typing import Optional

import numpy as np

# Sentinel requesting a freshly drawn seed
RANDOM_SEED = 0

# Drawn seeds fall in [low, high)
SEED_RANGE = (100000, 999999)


class SeedProvider:
    """Resolves the configured seed, drawing a random one for the sentinel."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Args:
            rng: NumPy generator used for drawing seeds, a fresh entropy-seeded
                generator by default
        """
        self._rng = rng if rng is not None else np.random.default_rng()

    def resolve(self, seed: int) -> int:
        """Return seed unchanged unless it is RANDOM_SEED."""
        if seed != RANDOM_SEED:
            return int(seed)
        low, high = SEED_RANGE
        return int(self._rng.integers(low, high))
