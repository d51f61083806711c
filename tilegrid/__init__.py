"""tilegrid: exact geometry for square, hexagonal and isometric tilemaps.

Core Objects: TilePos, TilemapType, TilemapAnchor, TilemapGeometry, TileStorage
"""

__title__ = "tilegrid"
__version__ = "0.3.0"
__license__ = "Apache 2.0"

from tilegrid.anchor import TilemapAnchor
from tilegrid.geometry import TilemapGeometry
from tilegrid.map import (
    HexCoordSystem,
    Hexagon,
    IsoCoordSystem,
    Isometric,
    Square,
    TilemapGridSize,
    TilemapSize,
    TilemapTileSize,
    TilemapType,
)
from tilegrid.neighborhood import get_neighboring_positions
from tilegrid.projection import (
    center_in_world,
    coord_to_world,
    from_world_pos,
    world_to_coord,
)
from tilegrid.tiles import TilePos, TileStorage
from tilegrid.transform import Aabb, chunk_aabb

__all__ = [
    "Aabb",
    "HexCoordSystem",
    "Hexagon",
    "IsoCoordSystem",
    "Isometric",
    "Square",
    "TilePos",
    "TileStorage",
    "TilemapAnchor",
    "TilemapGeometry",
    "TilemapGridSize",
    "TilemapSize",
    "TilemapTileSize",
    "TilemapType",
    "center_in_world",
    "chunk_aabb",
    "coord_to_world",
    "from_world_pos",
    "get_neighboring_positions",
    "world_to_coord",
]
