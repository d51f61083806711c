"""Offset coordinates for hexagonal grids.

Offset coordinates address hexes by column and row, shoving every other row
(or column) by half a hex. Each flavour is an exact integer bijection with
axial coordinates, for negative values too:

- RowOddPos (odd-r): ``q = x - (y - (y & 1)) // 2``, ``r = y``
- RowEvenPos (even-r): ``q = x - (y + (y & 1)) // 2``, ``r = y``
- ColOddPos (odd-q): ``q = x``, ``r = y - (x - (x & 1)) // 2``
- ColEvenPos (even-q): ``q = x``, ``r = y - (x + (x & 1)) // 2``

World placement is delegated to the axial projection of the matching
orientation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self

import numpy as np
from numpy.typing import ArrayLike

from tilegrid.errors import OutOfBoundsError
from tilegrid.hex_grid.axial import AxialPos
from tilegrid.hex_grid.direction import HexDirection
from tilegrid.map import HexCoordSystem, TilemapGridSize, TilemapSize
from tilegrid.tiles.tile_pos import TilePos


@dataclass(frozen=True, slots=True, order=True)
class OffsetPos:
    """Base class for the four offset coordinate flavours.

    Subclasses name their :class:`HexCoordSystem` and provide :meth:`from_axial`
    and :meth:`to_axial`; everything else is expressed through them.
    """

    x: int
    y: int

    coord_system: ClassVar[HexCoordSystem]

    @classmethod
    def from_axial(cls, axial_pos: AxialPos) -> Self:
        """The offset position of ``axial_pos``."""
        raise NotImplementedError

    def to_axial(self) -> AxialPos:
        """The axial position of this hex."""
        raise NotImplementedError

    @classmethod
    def from_tile_pos(cls, tile_pos: TilePos) -> Self:
        """Read a tile position as offset coordinates."""
        return cls(tile_pos.x, tile_pos.y)

    def as_tile_pos_given_map_size(self, map_size: TilemapSize) -> TilePos | None:
        """Try converting into a TilePos, None if it lies off the map."""
        return TilePos.from_i32_pair(self.x, self.y, map_size)

    def center_in_world(self, grid_size: TilemapGridSize) -> np.ndarray:
        """Center of this hex in world space."""
        axial_pos = self.to_axial()
        if self.coord_system.is_row_oriented:
            return axial_pos.center_in_world_row(grid_size)
        return axial_pos.center_in_world_col(grid_size)

    @classmethod
    def from_world_pos(cls, world_pos: ArrayLike, grid_size: TilemapGridSize) -> Self:
        """The hex containing ``world_pos``."""
        if cls.coord_system.is_row_oriented:
            return cls.from_axial(AxialPos.from_world_pos_row(world_pos, grid_size))
        return cls.from_axial(AxialPos.from_world_pos_col(world_pos, grid_size))

    def offset(self, direction: HexDirection) -> Self:
        """The adjacent hex in ``direction``."""
        return self.from_axial(self.to_axial().offset(direction))


@dataclass(frozen=True, slots=True, order=True)
class RowOddPos(OffsetPos):
    """Row oriented hexes where odd rows are shoved right."""

    coord_system: ClassVar[HexCoordSystem] = HexCoordSystem.ROW_ODD

    @classmethod
    def from_axial(cls, axial_pos: AxialPos) -> RowOddPos:
        """The odd-r position of ``axial_pos``."""
        q, r = axial_pos.q, axial_pos.r
        return cls(q + (r - (r & 1)) // 2, r)

    def to_axial(self) -> AxialPos:
        """Undo the odd-r shove."""
        return AxialPos(self.x - (self.y - (self.y & 1)) // 2, self.y)


@dataclass(frozen=True, slots=True, order=True)
class RowEvenPos(OffsetPos):
    """Row oriented hexes where even rows are shoved right."""

    coord_system: ClassVar[HexCoordSystem] = HexCoordSystem.ROW_EVEN

    @classmethod
    def from_axial(cls, axial_pos: AxialPos) -> RowEvenPos:
        """The even-r position of ``axial_pos``."""
        q, r = axial_pos.q, axial_pos.r
        return cls(q + (r + (r & 1)) // 2, r)

    def to_axial(self) -> AxialPos:
        """Undo the even-r shove."""
        return AxialPos(self.x - (self.y + (self.y & 1)) // 2, self.y)


@dataclass(frozen=True, slots=True, order=True)
class ColOddPos(OffsetPos):
    """Column oriented hexes where odd columns are shoved up."""

    coord_system: ClassVar[HexCoordSystem] = HexCoordSystem.COLUMN_ODD

    @classmethod
    def from_axial(cls, axial_pos: AxialPos) -> ColOddPos:
        """The odd-q position of ``axial_pos``."""
        q, r = axial_pos.q, axial_pos.r
        return cls(q, r + (q - (q & 1)) // 2)

    def to_axial(self) -> AxialPos:
        """Undo the odd-q shove."""
        return AxialPos(self.x, self.y - (self.x - (self.x & 1)) // 2)


@dataclass(frozen=True, slots=True, order=True)
class ColEvenPos(OffsetPos):
    """Column oriented hexes where even columns are shoved up."""

    coord_system: ClassVar[HexCoordSystem] = HexCoordSystem.COLUMN_EVEN

    @classmethod
    def from_axial(cls, axial_pos: AxialPos) -> ColEvenPos:
        """The even-q position of ``axial_pos``."""
        q, r = axial_pos.q, axial_pos.r
        return cls(q, r + (q + (q & 1)) // 2)

    def to_axial(self) -> AxialPos:
        """Undo the even-q shove."""
        return AxialPos(self.x, self.y - (self.x + (self.x & 1)) // 2)


OFFSET_TYPES: dict[HexCoordSystem, type[OffsetPos]] = {
    offset_type.coord_system: offset_type
    for offset_type in (RowEvenPos, RowOddPos, ColEvenPos, ColOddPos)
}


def axial_from_tile_pos(
    tile_pos: TilePos, hex_coord_system: HexCoordSystem
) -> AxialPos:
    """The axial coordinate of ``tile_pos`` under ``hex_coord_system``."""
    match hex_coord_system:
        case HexCoordSystem.ROW | HexCoordSystem.COLUMN:
            return AxialPos.from_tile_pos(tile_pos)
        case _:
            return OFFSET_TYPES[hex_coord_system].from_tile_pos(tile_pos).to_axial()


def _axial_to_pair(
    axial_pos: AxialPos, hex_coord_system: HexCoordSystem
) -> tuple[int, int]:
    match hex_coord_system:
        case HexCoordSystem.ROW | HexCoordSystem.COLUMN:
            return axial_pos.q, axial_pos.r
        case _:
            offset_pos = OFFSET_TYPES[hex_coord_system].from_axial(axial_pos)
            return offset_pos.x, offset_pos.y


def axial_to_tile_pos(
    axial_pos: AxialPos, hex_coord_system: HexCoordSystem
) -> TilePos:
    """The tile position of ``axial_pos`` under ``hex_coord_system``, unchecked.

    Raises:
        OutOfBoundsError: if the tile position would have a negative component
    """
    x, y = _axial_to_pair(axial_pos, hex_coord_system)
    if x < 0 or y < 0:
        raise OutOfBoundsError((x, y))
    return TilePos(x, y)


def axial_to_tile_pos_given_map_size(
    axial_pos: AxialPos, hex_coord_system: HexCoordSystem, map_size: TilemapSize
) -> TilePos | None:
    """The tile position of ``axial_pos`` under ``hex_coord_system``, None if off the map."""
    x, y = _axial_to_pair(axial_pos, hex_coord_system)
    return TilePos.from_i32_pair(x, y, map_size)


def hex_offset(
    tile_pos: TilePos,
    direction: HexDirection,
    map_size: TilemapSize,
    hex_coord_system: HexCoordSystem,
) -> TilePos | None:
    """Get the neighbor of ``tile_pos`` in ``direction`` on a hex map, if it fits on the map."""
    axial_pos = axial_from_tile_pos(tile_pos, hex_coord_system).offset(direction)
    return axial_to_tile_pos_given_map_size(axial_pos, hex_coord_system, map_size)
