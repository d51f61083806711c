"""Neighbor lookup for any tilemap type."""

from __future__ import annotations

from tilegrid.hex_grid.neighbors import HexNeighbors
from tilegrid.map import Hexagon, IsoCoordSystem, Isometric, Square, TilemapSize, TilemapType
from tilegrid.square_grid.neighbors import Neighbors
from tilegrid.tiles.tile_pos import TilePos


def get_neighboring_positions(
    tile_pos: TilePos,
    map_size: TilemapSize,
    map_type: TilemapType,
    include_diagonals: bool = False,
) -> Neighbors[TilePos] | HexNeighbors[TilePos]:
    """The neighbors of a tile, for the layout of the map.

    Square and isometric maps give a :class:`Neighbors` with four or eight
    directions; hexagonal maps give a :class:`HexNeighbors` with six, and
    ignore ``include_diagonals``.
    """
    match map_type:
        case Square():
            return Neighbors.get_square_neighboring_positions(
                tile_pos, map_size, include_diagonals
            )
        case Hexagon(coord_system):
            return HexNeighbors.get_neighboring_positions(tile_pos, map_size, coord_system)
        case Isometric(IsoCoordSystem.DIAMOND):
            return Neighbors.get_diamond_neighboring_positions(
                tile_pos, map_size, include_diagonals
            )
        case Isometric(IsoCoordSystem.STAGGERED):
            return Neighbors.get_staggered_neighboring_positions(
                tile_pos, map_size, include_diagonals
            )
    raise TypeError(f"Unknown tilemap type {map_type!r}")
