"""Hexagonal grids: axial, cube and offset coordinates.

- AxialPos: the working coordinate of all hex math, projected with a row or column basis
- CubePos: axial plus the redundant ``s`` axis, used for distances, rotation and rounding
- RowOddPos, RowEvenPos, ColOddPos, ColEvenPos: offset addressing of the same hexes
- HexNeighbors: the six neighbors of a hex, for any coordinate system
"""

from tilegrid.hex_grid.axial import (
    COL_BASIS,
    INV_COL_BASIS,
    INV_ROW_BASIS,
    ROW_BASIS,
    SQRT_3,
    AxialPos,
    FractionalAxialPos,
)
from tilegrid.hex_grid.cube import CubePos, FractionalCubePos
from tilegrid.hex_grid.direction import (
    HEX_DIRECTIONS,
    HEX_OFFSETS,
    HexColDirection,
    HexDirection,
    HexRowDirection,
)
from tilegrid.hex_grid.neighbors import HexNeighbors
from tilegrid.hex_grid.offset import (
    OFFSET_TYPES,
    ColEvenPos,
    ColOddPos,
    OffsetPos,
    RowEvenPos,
    RowOddPos,
    axial_from_tile_pos,
    axial_to_tile_pos,
    axial_to_tile_pos_given_map_size,
    hex_offset,
)

__all__ = [
    "COL_BASIS",
    "HEX_DIRECTIONS",
    "HEX_OFFSETS",
    "INV_COL_BASIS",
    "INV_ROW_BASIS",
    "OFFSET_TYPES",
    "ROW_BASIS",
    "SQRT_3",
    "AxialPos",
    "ColEvenPos",
    "ColOddPos",
    "CubePos",
    "FractionalAxialPos",
    "FractionalCubePos",
    "HexColDirection",
    "HexDirection",
    "HexNeighbors",
    "HexRowDirection",
    "OffsetPos",
    "RowEvenPos",
    "RowOddPos",
    "axial_from_tile_pos",
    "axial_to_tile_pos",
    "axial_to_tile_pos_given_map_size",
    "hex_offset",
]
