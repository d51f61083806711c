"""Positions on a staggered isometric grid.

A staggered position is a square position with a shear applied along y:
``staggered = (x, y - x)`` and ``square = (x, y + x)``. World placement goes
through the diamond projection of the equivalent square position, so every
row of a staggered map runs horizontally across the screen.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from tilegrid.map import TilemapGridSize, TilemapSize
from tilegrid.square_grid.diamond import DiamondPos
from tilegrid.square_grid.direction import SquareDirection
from tilegrid.square_grid.square import SquarePos
from tilegrid.tiles.tile_pos import TilePos


@dataclass(frozen=True, slots=True, order=True)
class StaggeredPos:
    """Position for tiles arranged in a staggered isometric coordinate system."""

    x: int
    y: int

    def add(self, other: StaggeredPos) -> StaggeredPos:
        """Componentwise sum."""
        return StaggeredPos(self.x + other.x, self.y + other.y)

    def sub(self, other: StaggeredPos) -> StaggeredPos:
        """Componentwise difference."""
        return StaggeredPos(self.x - other.x, self.y - other.y)

    def __add__(self, other: StaggeredPos) -> StaggeredPos:
        """Same as :meth:`add`."""
        return self.add(other)

    def __sub__(self, other: StaggeredPos) -> StaggeredPos:
        """Same as :meth:`sub`."""
        return self.sub(other)

    @classmethod
    def from_tile_pos(cls, tile_pos: TilePos) -> StaggeredPos:
        """Read a tile position as staggered coordinates."""
        return cls(tile_pos.x, tile_pos.y)

    @classmethod
    def from_square(cls, square_pos: SquarePos) -> StaggeredPos:
        """Apply the shear ``y' = y - x``."""
        return cls(square_pos.x, square_pos.y - square_pos.x)

    def to_square(self) -> SquarePos:
        """The sheared square position of this tile."""
        return SquarePos.from_staggered(self)

    @staticmethod
    def project(pos: ArrayLike, grid_size: TilemapGridSize) -> np.ndarray:
        """Project a fractional staggered position into world space."""
        x, y = np.asarray(pos, dtype=float)
        return DiamondPos.project((x, y + x), grid_size)

    def center_in_world(self, grid_size: TilemapGridSize) -> np.ndarray:
        """Returns the position of this tile's center, in world space."""
        return self.project((self.x, self.y), grid_size)

    @classmethod
    def from_world_pos(
        cls, world_pos: ArrayLike, grid_size: TilemapGridSize
    ) -> StaggeredPos:
        """Returns the tile containing the given world position.

        Rounding happens in diamond space, where tiles are unit squares.
        """
        diamond = DiamondPos.from_world_pos(world_pos, grid_size)
        return cls.from_square(diamond.to_square())

    def as_tile_pos(self, map_size: TilemapSize) -> TilePos | None:
        """Try converting into a TilePos, None if it lies off the map."""
        return TilePos.from_i32_pair(self.x, self.y, map_size)

    def offset(self, direction: SquareDirection) -> StaggeredPos:
        """Calculate the adjacent position in the given direction.

        Adjacency is that of the underlying square grid.
        """
        return StaggeredPos.from_square(self.to_square().offset(direction))


def staggered_offset(
    tile_pos: TilePos, direction: SquareDirection, map_size: TilemapSize
) -> TilePos | None:
    """Get the neighbor of ``tile_pos`` in ``direction`` on a staggered map, if it fits on the map."""
    return StaggeredPos.from_tile_pos(tile_pos).offset(direction).as_tile_pos(map_size)
