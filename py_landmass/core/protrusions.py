"""
Protrusion removal.

A worklist cellular automaton that erodes one-cell-wide spurs, diagonal
bridges and weakly attached corners until the land map stops changing.

Neighbor flags are always ordered (E, W, N, S, NE, NW, SE, SW). North is
+y, so row ``y + 1`` of the array lies above row ``y``. Cells outside the
grid count as water.
"""

from collections import deque
from typing import Sequence, Tuple

import numpy as np
import structlog

from .regions import validate_land_map

logger = structlog.get_logger()

# Re-enqueue order after a removal, as (dx, dy): N, S, E, W, NE, NW, SE, SW
NEIGHBOR_OFFSETS = (
    (0, 1), (0, -1), (1, 0), (-1, 0),
    (1, 1), (-1, 1), (1, -1), (-1, -1),
)

# Flag order used by neighbor_flags and the pattern table, as (dx, dy)
FLAG_OFFSETS = (
    (1, 0),    # E
    (-1, 0),   # W
    (0, 1),    # N
    (0, -1),   # S
    (1, 1),    # NE
    (-1, 1),   # NW
    (1, -1),   # SE
    (-1, -1),  # SW
)

# Cells with fewer land neighbors than this are removed outright
MIN_SUPPORTING_NEIGHBORS = 3

# Full neighbor configurations that mark a cell for removal.
#   E  W  N  S  NE NW SE SW
PROTRUSION_PATTERNS: Tuple[Tuple[int, ...], ...] = (
    (1, 0, 0, 0, 1, 0, 1, 0),
    (0, 1, 0, 0, 0, 0, 0, 1),
    (0, 1, 0, 0, 0, 1, 0, 0),
    (0, 0, 0, 1, 0, 0, 1, 1),
    (0, 0, 1, 0, 1, 1, 0, 0),
    (0, 0, 0, 1, 1, 0, 1, 1),
    (0, 0, 0, 1, 0, 0, 1, 1),  # same as the fourth entry
    (0, 0, 1, 1, 0, 0, 0, 0),
    (0, 1, 0, 0, 0, 1, 0, 1),
    (0, 0, 1, 1, 1, 0, 0, 1),
    (1, 1, 0, 0, 1, 0, 1, 1),
    (0, 0, 1, 1, 0, 1, 1, 0),
    (1, 1, 0, 0, 1, 0, 0, 1),
    (0, 0, 1, 1, 1, 0, 1, 0),
    (1, 1, 0, 0, 0, 1, 1, 0),
    (1, 1, 0, 0, 1, 0, 1, 0),
    (0, 0, 1, 1, 0, 1, 0, 0),
    (0, 0, 1, 1, 0, 0, 0, 1),
    (1, 1, 0, 0, 0, 1, 0, 0),
    (1, 1, 0, 0, 1, 0, 0, 0),
    (1, 1, 0, 0, 0, 0, 0, 1),
    (1, 1, 0, 0, 0, 0, 1, 0),
)

_PATTERN_SET = frozenset(PROTRUSION_PATTERNS)


def neighbor_flags(land: np.ndarray, x: int, y: int) -> Tuple[bool, ...]:
    """Land flags of the 8 neighbors of (x, y) in (E, W, N, S, NE, NW, SE, SW) order."""
    height, width = land.shape
    flags = []
    for dx, dy in FLAG_OFFSETS:
        nx, ny = x + dx, y + dy
        flags.append(bool(0 <= nx < width and 0 <= ny < height and land[ny, nx]))
    return tuple(flags)


def matches_protrusion_pattern(flags: Sequence[bool]) -> bool:
    """True if the flags equal one of the protrusion patterns."""
    return tuple(int(flag) for flag in flags) in _PATTERN_SET


def should_remove(flags: Sequence[bool]) -> bool:
    """Removal rule for a land cell with the given neighbor flags."""
    if sum(bool(flag) for flag in flags) < MIN_SUPPORTING_NEIGHBORS:
        return True
    return matches_protrusion_pattern(flags)


def remove_protrusions(land: np.ndarray) -> int:
    """
    Erode protrusions in place until a fixed point is reached.

    Every land cell is queued once up front, column by column (x outer,
    y inner). A removed cell queues its in-bounds neighbors again, unless
    they are already waiting, since its removal can expose new protrusions
    next to it.

    Args:
        land: Boolean land map indexed ``[y, x]``, modified in place

    Returns:
        Number of cells turned into water
    """
    validate_land_map(land)
    height, width = land.shape
    pending = np.zeros((height, width), dtype=bool)
    queue = deque()

    for x in range(width):
        for y in range(height):
            if land[y, x]:
                queue.append((x, y))
                pending[y, x] = True

    removed = 0
    while queue:
        x, y = queue.popleft()
        pending[y, x] = False

        if not land[y, x]:
            continue

        if not should_remove(neighbor_flags(land, x, y)):
            continue

        land[y, x] = False
        removed += 1

        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            if not pending[ny, nx]:
                queue.append((nx, ny))
                pending[ny, nx] = True

    logger.debug("Removed protrusions", removed=removed, remaining=int(land.sum()))
    return removed
