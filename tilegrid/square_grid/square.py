"""Signed positions on an orthogonal square grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from tilegrid.map import TilemapGridSize, TilemapSize
from tilegrid.square_grid.direction import SQUARE_OFFSETS, SquareDirection
from tilegrid.tiles.tile_pos import TilePos

if TYPE_CHECKING:
    from tilegrid.square_grid.diamond import DiamondPos
    from tilegrid.square_grid.staggered import StaggeredPos


@dataclass(frozen=True, slots=True, order=True)
class SquarePos:
    """Position for tiles arranged in a square coordinate system.

    It is vector-like: two SquarePos can be added and subtracted, and a
    SquarePos can be scaled by an integer. The operators ``+``, ``-`` and
    ``int * pos`` are shorthands for :meth:`add`, :meth:`sub` and :meth:`scale`.

    A SquarePos can be mapped to world space, and a world position can be
    mapped to the SquarePos of the tile containing it.
    """

    x: int
    y: int

    def add(self, other: SquarePos) -> SquarePos:
        """Componentwise sum."""
        return SquarePos(self.x + other.x, self.y + other.y)

    def sub(self, other: SquarePos) -> SquarePos:
        """Componentwise difference."""
        return SquarePos(self.x - other.x, self.y - other.y)

    def scale(self, factor: int) -> SquarePos:
        """Both components multiplied by ``factor``."""
        factor = int(factor)
        return SquarePos(factor * self.x, factor * self.y)

    def __add__(self, other: SquarePos) -> SquarePos:
        """Same as :meth:`add`."""
        return self.add(other)

    def __sub__(self, other: SquarePos) -> SquarePos:
        """Same as :meth:`sub`."""
        return self.sub(other)

    def __mul__(self, factor: int) -> SquarePos:
        """Same as :meth:`scale`, for integer factors only."""
        if not isinstance(factor, int | np.integer):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self) -> SquarePos:
        """The position mirrored through the origin."""
        return SquarePos(-self.x, -self.y)

    @classmethod
    def from_tile_pos(cls, tile_pos: TilePos) -> SquarePos:
        """Read a tile position as square coordinates."""
        return cls(tile_pos.x, tile_pos.y)

    @classmethod
    def from_diamond(cls, diamond_pos: DiamondPos) -> SquarePos:
        """Diamond coordinates are square coordinates seen through a rotation."""
        return cls(diamond_pos.x, diamond_pos.y)

    @classmethod
    def from_staggered(cls, staggered_pos: StaggeredPos) -> SquarePos:
        """Undo the shear of a staggered position: ``y = y' + x``."""
        return cls(staggered_pos.x, staggered_pos.y + staggered_pos.x)

    @classmethod
    def from_direction(cls, direction: SquareDirection) -> SquarePos:
        """The unit step in ``direction``."""
        return cls(*SQUARE_OFFSETS[direction])

    @staticmethod
    def project(pos: ArrayLike, grid_size: TilemapGridSize) -> np.ndarray:
        """Project a fractional tile position into world space.

        This is a helper for :meth:`center_in_world`,
        :meth:`corner_offset_in_world` and :meth:`corner_in_world`.
        """
        pos = np.asarray(pos, dtype=float)
        return np.array([grid_size.x * pos[0], grid_size.y * pos[1]])

    def center_in_world(self, grid_size: TilemapGridSize) -> np.ndarray:
        """Returns the position of this tile's center, in world space."""
        return self.project((self.x, self.y), grid_size)

    @classmethod
    def corner_offset_in_world(
        cls, corner_direction: SquareDirection, grid_size: TilemapGridSize
    ) -> np.ndarray:
        """Offset from a tile's center to its corner in ``corner_direction``, in world space."""
        dx, dy = SQUARE_OFFSETS[corner_direction]
        return cls.project((0.5 * dx, 0.5 * dy), grid_size)

    def corner_in_world(
        self, corner_direction: SquareDirection, grid_size: TilemapGridSize
    ) -> np.ndarray:
        """Returns the corner of this tile in ``corner_direction``, in world space."""
        dx, dy = SQUARE_OFFSETS[corner_direction]
        return self.project((self.x + 0.5 * dx, self.y + 0.5 * dy), grid_size)

    @classmethod
    def from_world_pos(cls, world_pos: ArrayLike, grid_size: TilemapGridSize) -> SquarePos:
        """Returns the tile containing the given world position.

        Positions exactly on a cell boundary belong to the tile above/right of
        it (``floor(v + 0.5)``).
        """
        world_pos = np.asarray(world_pos, dtype=float)
        x = world_pos[0] / grid_size.x
        y = world_pos[1] / grid_size.y
        return cls(int(np.floor(x + 0.5)), int(np.floor(y + 0.5)))

    def as_tile_pos(self, map_size: TilemapSize) -> TilePos | None:
        """Try converting into a TilePos.

        Returns None if a component is negative or lies outside of ``map_size``.
        """
        return TilePos.from_i32_pair(self.x, self.y, map_size)

    def offset(self, direction: SquareDirection) -> SquarePos:
        """Calculate the adjacent position in the given direction."""
        return self + SquarePos.from_direction(direction)


def square_offset(
    tile_pos: TilePos, direction: SquareDirection, map_size: TilemapSize
) -> TilePos | None:
    """Get the neighbor of ``tile_pos`` in ``direction`` on a square map, if it fits on the map."""
    return SquarePos.from_tile_pos(tile_pos).offset(direction).as_tile_pos(map_size)
