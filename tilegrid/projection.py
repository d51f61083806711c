"""Dispatch between tile positions and world space for every tilemap type.

``center_in_world`` places a tile: the layout specific projection of the tile
plus the anchor offset of the map. ``from_world_pos`` inverts it: the anchor
offset is subtracted, the layout specific inverse finds the containing tile,
and the result is bounds-checked against the map size.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from tilegrid.hex_grid.axial import AxialPos
from tilegrid.hex_grid.offset import OFFSET_TYPES
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
from tilegrid.square_grid.diamond import DiamondPos
from tilegrid.square_grid.square import SquarePos
from tilegrid.square_grid.staggered import StaggeredPos
from tilegrid.tilegrid_logging import create_module_logger
from tilegrid.tiles.tile_pos import TilePos

if TYPE_CHECKING:
    from tilegrid.anchor import TilemapAnchor

__all__ = [
    "center_in_world",
    "center_in_world_unanchored",
    "coord_to_world",
    "from_world_pos",
    "from_world_pos_unanchored",
    "world_to_coord",
]

_tilegrid_logger = create_module_logger()


def center_in_world_unanchored(
    tile_pos: TilePos, grid_size: TilemapGridSize, map_type: TilemapType
) -> np.ndarray:
    """Center of a tile in world space, relative to the center of tile (0, 0)."""
    match map_type:
        case Square():
            return SquarePos.from_tile_pos(tile_pos).center_in_world(grid_size)
        case Hexagon(HexCoordSystem.ROW):
            return AxialPos.from_tile_pos(tile_pos).center_in_world_row(grid_size)
        case Hexagon(HexCoordSystem.COLUMN):
            return AxialPos.from_tile_pos(tile_pos).center_in_world_col(grid_size)
        case Hexagon(coord_system):
            offset_type = OFFSET_TYPES[coord_system]
            return offset_type.from_tile_pos(tile_pos).center_in_world(grid_size)
        case Isometric(IsoCoordSystem.DIAMOND):
            return DiamondPos.from_tile_pos(tile_pos).center_in_world(grid_size)
        case Isometric(IsoCoordSystem.STAGGERED):
            return StaggeredPos.from_tile_pos(tile_pos).center_in_world(grid_size)
    raise TypeError(f"Unknown tilemap type {map_type!r}")


def from_world_pos_unanchored(
    world_pos: ArrayLike,
    map_size: TilemapSize,
    grid_size: TilemapGridSize,
    map_type: TilemapType,
) -> TilePos | None:
    """The tile containing an unanchored world position, None if it lies off the map."""
    match map_type:
        case Square():
            return SquarePos.from_world_pos(world_pos, grid_size).as_tile_pos(map_size)
        case Hexagon(HexCoordSystem.ROW):
            axial_pos = AxialPos.from_world_pos_row(world_pos, grid_size)
            return axial_pos.as_tile_pos_given_map_size(map_size)
        case Hexagon(HexCoordSystem.COLUMN):
            axial_pos = AxialPos.from_world_pos_col(world_pos, grid_size)
            return axial_pos.as_tile_pos_given_map_size(map_size)
        case Hexagon(coord_system):
            offset_pos = OFFSET_TYPES[coord_system].from_world_pos(world_pos, grid_size)
            return offset_pos.as_tile_pos_given_map_size(map_size)
        case Isometric(IsoCoordSystem.DIAMOND):
            return DiamondPos.from_world_pos(world_pos, grid_size).as_tile_pos(map_size)
        case Isometric(IsoCoordSystem.STAGGERED):
            return StaggeredPos.from_world_pos(world_pos, grid_size).as_tile_pos(map_size)
    raise TypeError(f"Unknown tilemap type {map_type!r}")


def center_in_world(
    tile_pos: TilePos,
    map_size: TilemapSize,
    grid_size: TilemapGridSize,
    tile_size: TilemapTileSize,
    map_type: TilemapType,
    anchor: TilemapAnchor,
) -> np.ndarray:
    """Get the center of a tile in world space.

    The center is well defined for all tilemap types.

    Args:
        tile_pos: the tile
        map_size: size of the map, needed to resolve the anchor
        grid_size: size of a grid cell
        tile_size: drawn size of a tile, needed to resolve the anchor
        map_type: layout of the map
        anchor: where the map's origin sits

    Returns:
        np.ndarray: the world position, shape ``(2,)``
    """
    offset = anchor.as_offset(map_size, grid_size, tile_size, map_type)
    return offset + center_in_world_unanchored(tile_pos, grid_size, map_type)


def from_world_pos(
    world_pos: ArrayLike,
    map_size: TilemapSize,
    grid_size: TilemapGridSize,
    tile_size: TilemapTileSize,
    map_type: TilemapType,
    anchor: TilemapAnchor,
) -> TilePos | None:
    """Get the tile containing a world position.

    Returns None if the position lies outside of the map. Positions exactly
    on the boundary between two tiles resolve towards positive x and y.
    """
    offset = anchor.as_offset(map_size, grid_size, tile_size, map_type)
    pos = np.asarray(world_pos, dtype=float) - offset
    tile_pos = from_world_pos_unanchored(pos, map_size, grid_size, map_type)
    if tile_pos is None:
        _tilegrid_logger.debug(f"world position {pos} lies outside of {map_size}")
    return tile_pos


coord_to_world = center_in_world
world_to_coord = from_world_pos
