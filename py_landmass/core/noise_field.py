"""
Noise field sampling.

Turns a smooth 2D noise function into a boolean land/no-land grid by
thresholding. The seed shifts the sampling window across the noise plane
so that different seeds produce different landmasses.
"""

from typing import Optional, Protocol, Tuple

import numpy as np
from opensimplex import OpenSimplex

from .exceptions import ConfigurationError

# Multipliers turning a seed into a sampling offset
OFFSET_X_FACTOR = 0.12345
OFFSET_Y_FACTOR = 0.54321


class NoiseSource(Protocol):
    """Continuous, deterministic 2D noise with values in [0, 1]."""

    def sample(self, x: float, y: float) -> float:
        ...


class OpenSimplexNoise:
    """OpenSimplex noise rescaled from [-1, 1] to [0, 1]."""

    def __init__(self, seed: int = 0):
        self.seed = seed
        self._simplex = OpenSimplex(seed=seed)

    def sample(self, x: float, y: float) -> float:
        value = (self._simplex.noise2(x, y) + 1.0) / 2.0
        return min(max(value, 0.0), 1.0)

    def sample_grid(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """Sample every (x, y) combination; result has shape (len(ys), len(xs))."""
        values = (self._simplex.noise2array(xs, ys) + 1.0) / 2.0
        return np.clip(values, 0.0, 1.0)


def seed_offsets(seed: int) -> Tuple[float, float]:
    """Noise plane offset for a seed."""
    return seed * OFFSET_X_FACTOR, seed * OFFSET_Y_FACTOR


class NoiseFieldSampler:
    """Thresholds a noise source into land cells."""

    def __init__(
        self,
        noise_scale: float,
        threshold: float,
        seed: int,
        noise: Optional[NoiseSource] = None,
    ):
        """
        Args:
            noise_scale: Distance on the noise plane between adjacent cells, in [0, 1]
            threshold: Cells whose noise value exceeds this are land, in [0, 1]
            seed: Map seed, used for the sampling offset
            noise: Noise source, OpenSimplex seeded with ``seed`` by default
        """
        if not 0.0 <= noise_scale <= 1.0:
            raise ConfigurationError(f"noise_scale must be within [0, 1], got {noise_scale}")
        if not 0.0 <= threshold <= 1.0:
            raise ConfigurationError(f"threshold must be within [0, 1], got {threshold}")

        self.noise_scale = noise_scale
        self.threshold = threshold
        self.seed = seed
        self.noise = noise if noise is not None else OpenSimplexNoise(seed)
        self.offset_x, self.offset_y = seed_offsets(seed)

    def is_land(self, x: int, y: int) -> bool:
        """Land test for a single cell."""
        value = self.noise.sample(
            x * self.noise_scale + self.offset_x,
            y * self.noise_scale + self.offset_y,
        )
        return value > self.threshold

    def sample_land_map(self, width: int, height: int) -> np.ndarray:
        """
        Sample the whole grid.

        Returns:
            Boolean array of shape (height, width) indexed ``[y, x]``
        """
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"grid must be non-empty, got {width}x{height}")

        sample_grid = getattr(self.noise, "sample_grid", None)
        if sample_grid is not None:
            xs = np.arange(width) * self.noise_scale + self.offset_x
            ys = np.arange(height) * self.noise_scale + self.offset_y
            return np.asarray(sample_grid(xs, ys)) > self.threshold

        land = np.zeros((height, width), dtype=bool)
        for y in range(height):
            for x in range(width):
                land[y, x] = self.is_land(x, y)
        return land
