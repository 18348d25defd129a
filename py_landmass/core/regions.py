"""
Connected land region labeling.

Land cells are grouped into regions by 4-connectivity (up, down, left,
right). Diagonal contact does not join two regions.
"""

from collections import deque
from typing import Tuple

import numpy as np

from .exceptions import ConfigurationError

UNLABELED = 0

# 4-connected neighbor offsets as (dx, dy)
ORTHOGONAL_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def validate_land_map(land: np.ndarray) -> None:
    """Reject anything that is not a 2D boolean grid."""
    if not isinstance(land, np.ndarray) or land.ndim != 2:
        raise ConfigurationError("land map must be a 2D numpy array")
    if land.dtype != np.bool_:
        raise ConfigurationError(f"land map must be boolean, got {land.dtype}")


def label_regions(land: np.ndarray) -> Tuple[np.ndarray, int]:
    """
    Label 4-connected land regions with a breadth-first flood fill.

    Cells are scanned row by row (y outer, x inner); each unlabeled land
    cell starts a new region whose id is the next integer from 1.

    Args:
        land: Boolean land map indexed ``[y, x]``

    Returns:
        Tuple of (region id grid, number of regions). Non-land cells are 0.
    """
    validate_land_map(land)
    height, width = land.shape
    region_ids = np.zeros((height, width), dtype=np.int32)
    region_count = 0

    for y in range(height):
        for x in range(width):
            if not land[y, x] or region_ids[y, x] != UNLABELED:
                continue

            region_count += 1
            region_ids[y, x] = region_count
            queue = deque([(x, y)])

            while queue:
                cx, cy = queue.popleft()
                for dx, dy in ORTHOGONAL_OFFSETS:
                    nx, ny = cx + dx, cy + dy
                    if not (0 <= nx < width and 0 <= ny < height):
                        continue
                    if land[ny, nx] and region_ids[ny, nx] == UNLABELED:
                        region_ids[ny, nx] = region_count
                        queue.append((nx, ny))

    return region_ids, region_count


def region_sizes(region_ids: np.ndarray, region_count: int) -> np.ndarray:
    """Cell count per region; index 0 holds the non-land count."""
    return np.bincount(region_ids.ravel(), minlength=region_count + 1)
