"""Positions on an isometric diamond grid.

A diamond grid is a square grid rotated by 45 degrees and squashed by the
grid cell aspect ratio. Coordinates are identical to :class:`SquarePos`;
only the projection into world space differs.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from tilegrid.map import TilemapGridSize, TilemapSize
from tilegrid.square_grid.direction import SQUARE_OFFSETS, SquareDirection
from tilegrid.square_grid.square import SquarePos
from tilegrid.tiles.tile_pos import TilePos

# columns are the world images of the unit x and unit y steps
DIAMOND_BASIS = np.array([[0.5, 0.5], [-0.5, 0.5]])
INV_DIAMOND_BASIS = np.array([[1.0, -1.0], [1.0, 1.0]])


@dataclass(frozen=True, slots=True, order=True)
class DiamondPos:
    """Position for tiles arranged in an isometric diamond coordinate system."""

    x: int
    y: int

    def add(self, other: DiamondPos) -> DiamondPos:
        """Componentwise sum."""
        return DiamondPos(self.x + other.x, self.y + other.y)

    def sub(self, other: DiamondPos) -> DiamondPos:
        """Componentwise difference."""
        return DiamondPos(self.x - other.x, self.y - other.y)

    def scale(self, factor: int) -> DiamondPos:
        """Both components multiplied by ``factor``."""
        factor = int(factor)
        return DiamondPos(factor * self.x, factor * self.y)

    def __add__(self, other: DiamondPos) -> DiamondPos:
        """Same as :meth:`add`."""
        return self.add(other)

    def __sub__(self, other: DiamondPos) -> DiamondPos:
        """Same as :meth:`sub`."""
        return self.sub(other)

    def __mul__(self, factor: int) -> DiamondPos:
        """Same as :meth:`scale`, for integer factors only."""
        if not isinstance(factor, int | np.integer):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    @classmethod
    def from_tile_pos(cls, tile_pos: TilePos) -> DiamondPos:
        """Read a tile position as diamond coordinates."""
        return cls(tile_pos.x, tile_pos.y)

    @classmethod
    def from_square(cls, square_pos: SquarePos) -> DiamondPos:
        """Reinterpret square coordinates as diamond ones."""
        return cls(square_pos.x, square_pos.y)

    def to_square(self) -> SquarePos:
        """Reinterpret as square coordinates."""
        return SquarePos.from_diamond(self)

    @staticmethod
    def project(pos: ArrayLike, grid_size: TilemapGridSize) -> np.ndarray:
        """Project a fractional diamond position into world space.

        ``world = (gx * (x + y) / 2, gy * (y - x) / 2)``
        """
        unscaled = DIAMOND_BASIS @ np.asarray(pos, dtype=float)
        return np.array([grid_size.x * unscaled[0], grid_size.y * unscaled[1]])

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

    @staticmethod
    def unproject(world_pos: ArrayLike, grid_size: TilemapGridSize) -> np.ndarray:
        """Map a world position back to a fractional diamond position."""
        world_pos = np.asarray(world_pos, dtype=float)
        normalized = np.array([world_pos[0] / grid_size.x, world_pos[1] / grid_size.y])
        return INV_DIAMOND_BASIS @ normalized

    @classmethod
    def from_world_pos(
        cls, world_pos: ArrayLike, grid_size: TilemapGridSize
    ) -> DiamondPos:
        """Returns the tile containing the given world position."""
        frac = cls.unproject(world_pos, grid_size)
        x, y = np.floor(frac + 0.5)
        return cls(int(x), int(y))

    def as_tile_pos(self, map_size: TilemapSize) -> TilePos | None:
        """Try converting into a TilePos, None if it lies off the map."""
        return TilePos.from_i32_pair(self.x, self.y, map_size)

    def offset(self, direction: SquareDirection) -> DiamondPos:
        """Calculate the adjacent position in the given direction."""
        return DiamondPos.from_square(self.to_square().offset(direction))


def diamond_offset(
    tile_pos: TilePos, direction: SquareDirection, map_size: TilemapSize
) -> TilePos | None:
    """Get the neighbor of ``tile_pos`` in ``direction`` on a diamond map, if it fits on the map."""
    return DiamondPos.from_tile_pos(tile_pos).offset(direction).as_tile_pos(map_size)
