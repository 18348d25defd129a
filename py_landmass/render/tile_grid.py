"""
Tile painting of land maps.

A render target is anything that accepts tile writes at integer
coordinates. The map is painted inside a one cell wide border of empty
tiles so that edge tiles never pick up stale neighbors.
"""

from typing import Dict, Hashable, Optional, Protocol, Tuple

import numpy as np

LAND_TILE = "grass_cliff"


class RenderTarget(Protocol):
    """Tile surface receiving the generated map."""

    def clear_all(self) -> None:
        ...

    def set_tile(self, x: int, y: int, tile: Optional[Hashable]) -> None:
        ...

    def refresh(self) -> None:
        ...


def paint_padding(target: RenderTarget, width: int, height: int) -> None:
    """Write empty tiles on the ring just outside the width x height area."""
    for x in range(-1, width + 1):
        target.set_tile(x, -1, None)
        target.set_tile(x, height, None)
    for y in range(-1, height + 1):
        target.set_tile(-1, y, None)
        target.set_tile(width, y, None)


def paint_land_map(target: RenderTarget, land: np.ndarray, tile: Hashable = LAND_TILE) -> None:
    """
    Clear the target and paint every cell of the land map onto it.

    Args:
        target: Render target
        land: Boolean land map indexed ``[y, x]``
        tile: Tile written for land cells; water cells get None
    """
    height, width = land.shape
    target.clear_all()
    paint_padding(target, width, height)

    for x in range(width):
        for y in range(height):
            target.set_tile(x, y, tile if land[y, x] else None)


class TileGrid:
    """In-memory render target."""

    def __init__(self):
        self.tiles: Dict[Tuple[int, int], Optional[Hashable]] = {}
        self.refresh_count = 0
        self.clear_count = 0

    def clear_all(self) -> None:
        self.tiles.clear()
        self.clear_count += 1

    def set_tile(self, x: int, y: int, tile: Optional[Hashable]) -> None:
        self.tiles[(x, y)] = tile

    def refresh(self) -> None:
        self.refresh_count += 1

    def get_tile(self, x: int, y: int) -> Optional[Hashable]:
        return self.tiles.get((x, y))

    def to_land_map(self, width: int, height: int) -> np.ndarray:
        """Read painted cells back into a boolean grid indexed ``[y, x]``."""
        land = np.zeros((height, width), dtype=bool)
        for y in range(height):
            for x in range(width):
                land[y, x] = self.tiles.get((x, y)) is not None
        return land
