"""
Output collaborators for generated land maps: tile painting and diagnostics.
"""

from .tile_grid import LAND_TILE, RenderTarget, TileGrid, paint_land_map
from .diagnostics import Diagnostics, LogDiagnostics, MemoryDiagnostics, format_land_map

__all__ = ['LAND_TILE', 'RenderTarget', 'TileGrid', 'paint_land_map',
           'Diagnostics', 'LogDiagnostics', 'MemoryDiagnostics', 'format_land_map']
