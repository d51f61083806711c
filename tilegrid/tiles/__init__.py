"""Tile positions and the tile handle storage."""

from tilegrid.tiles.storage import TileStorage
from tilegrid.tiles.tile_pos import TilePos

__all__ = [
    "TilePos",
    "TileStorage",
]
