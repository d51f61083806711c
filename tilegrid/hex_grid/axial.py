"""Axial coordinates for hexagonal grids, and their projection into world space.

Hexes are placed by a 2x2 basis matrix whose columns are the world images of
the unit q and unit r steps. Two orientations are supported:

- row oriented (pointy top): ``x = gx * (q + r / 2)``, ``y = gy * 3/4 * r``
- column oriented (flat top): ``x = gx * 3/4 * q``, ``y = gy * (q / 2 + r)``

When the grid size has the natural hex aspect ratio (``gy = 2 / sqrt(3) * gx``
for rows, the transpose for columns), the six unit directions map to world
vectors of equal length, 60 degrees apart.

Going back from world space applies the exact inverse of the basis and then
cube-rounds the fractional result.

Refer https://www.redblobgames.com/grids/hexagons/#hex-to-pixel for more detail
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from tilegrid.hex_grid.cube import CubePos, FractionalCubePos
from tilegrid.hex_grid.direction import HEX_OFFSETS, HexDirection
from tilegrid.map import TilemapGridSize, TilemapSize
from tilegrid.tiles.tile_pos import TilePos

SQRT_3 = math.sqrt(3.0)

# fmt: off
ROW_BASIS = np.array([
    [1.0, 0.5],
    [0.0, SQRT_3 / 2.0],
])
COL_BASIS = np.array([
    [SQRT_3 / 2.0, 0.0],
    [0.5,          1.0],
])
# fmt: on
INV_ROW_BASIS = np.linalg.inv(ROW_BASIS)
INV_COL_BASIS = np.linalg.inv(COL_BASIS)


@dataclass(frozen=True, slots=True, order=True)
class AxialPos:
    """Integer axial coordinate ``(q, r)`` of a hex.

    It is vector-like: axial positions can be added, subtracted and scaled by
    an integer, through :meth:`add`, :meth:`sub`, :meth:`scale` or the
    matching operators.
    """

    q: int
    r: int

    def add(self, other: AxialPos) -> AxialPos:
        """Componentwise sum."""
        return AxialPos(self.q + other.q, self.r + other.r)

    def sub(self, other: AxialPos) -> AxialPos:
        """Componentwise difference."""
        return AxialPos(self.q - other.q, self.r - other.r)

    def scale(self, factor: int) -> AxialPos:
        """The position ``factor`` times as far from the origin."""
        factor = int(factor)
        return AxialPos(factor * self.q, factor * self.r)

    def __add__(self, other: AxialPos) -> AxialPos:
        """Same as :meth:`add`."""
        return self.add(other)

    def __sub__(self, other: AxialPos) -> AxialPos:
        """Same as :meth:`sub`."""
        return self.sub(other)

    def __mul__(self, factor: int) -> AxialPos:
        """Scale by an integer factor, from either side."""
        if not isinstance(factor, int | np.integer):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self) -> AxialPos:
        """The position mirrored through the origin."""
        return AxialPos(-self.q, -self.r)

    @property
    def s(self) -> int:
        """The redundant third cube axis."""
        return -self.q - self.r

    @classmethod
    def from_tile_pos(cls, tile_pos: TilePos) -> AxialPos:
        """Interpret a tile position directly as axial coordinates.

        This is the addressing of the ``ROW`` and ``COLUMN`` hex systems.
        """
        return cls(tile_pos.x, tile_pos.y)

    @classmethod
    def from_cube(cls, cube_pos: CubePos) -> AxialPos:
        """Drop the redundant ``s`` component."""
        return cls(cube_pos.q, cube_pos.r)

    def to_cube(self) -> CubePos:
        """Add the ``s`` component."""
        return CubePos(self.q, self.r, self.s)

    @classmethod
    def from_direction(cls, direction: HexDirection) -> AxialPos:
        """The unit step in ``direction``."""
        return cls(*HEX_OFFSETS[direction])

    def offset(self, direction: HexDirection) -> AxialPos:
        """The adjacent hex in ``direction``."""
        return self + AxialPos.from_direction(direction)

    def magnitude(self) -> int:
        """Number of hex steps from the origin."""
        return self.to_cube().magnitude()

    def distance_from(self, other: AxialPos) -> int:
        """Number of hex steps between ``self`` and ``other``."""
        return (self - other).magnitude()

    def rotate_left(self) -> AxialPos:
        """Rotate 60 degrees counter-clockwise around the origin."""
        return AxialPos.from_cube(self.to_cube().rotate_left())

    def rotate_right(self) -> AxialPos:
        """Rotate 60 degrees clockwise around the origin."""
        return AxialPos.from_cube(self.to_cube().rotate_right())

    @staticmethod
    def project_row(axial_pos: ArrayLike, grid_size: TilemapGridSize) -> np.ndarray:
        """Project a fractional axial position into world space, row orientation."""
        unscaled = ROW_BASIS @ np.asarray(axial_pos, dtype=float)
        return np.array(
            [grid_size.x * unscaled[0], ROW_BASIS[1, 1] * grid_size.y * unscaled[1]]
        )

    @staticmethod
    def project_col(axial_pos: ArrayLike, grid_size: TilemapGridSize) -> np.ndarray:
        """Project a fractional axial position into world space, column orientation."""
        unscaled = COL_BASIS @ np.asarray(axial_pos, dtype=float)
        return np.array(
            [COL_BASIS[0, 0] * grid_size.x * unscaled[0], grid_size.y * unscaled[1]]
        )

    def center_in_world_row(self, grid_size: TilemapGridSize) -> np.ndarray:
        """Center of this hex in world space, on a row oriented grid."""
        return self.project_row((self.q, self.r), grid_size)

    def center_in_world_col(self, grid_size: TilemapGridSize) -> np.ndarray:
        """Center of this hex in world space, on a column oriented grid."""
        return self.project_col((self.q, self.r), grid_size)

    @staticmethod
    def _corner(corner: HexDirection) -> np.ndarray:
        # the corner between two neighboring directions sits at a third of their sum
        a = HEX_OFFSETS[corner]
        b = HEX_OFFSETS[(int(corner) + 1) % 6]
        return np.array([a[0] + b[0], a[1] + b[1]], dtype=float) / 3.0

    @classmethod
    def corner_offset_in_world_row(
        cls, corner: HexDirection, grid_size: TilemapGridSize
    ) -> np.ndarray:
        """Offset from a hex center to one of its corners, row orientation.

        Corner ``k`` lies counter-clockwise after direction ``k``.
        """
        return cls.project_row(cls._corner(corner), grid_size)

    @classmethod
    def corner_offset_in_world_col(
        cls, corner: HexDirection, grid_size: TilemapGridSize
    ) -> np.ndarray:
        """Offset from a hex center to one of its corners, column orientation."""
        return cls.project_col(cls._corner(corner), grid_size)

    def corner_in_world_row(
        self, corner: HexDirection, grid_size: TilemapGridSize
    ) -> np.ndarray:
        """A corner of this hex in world space, row orientation."""
        return self.project_row(np.array([self.q, self.r]) + self._corner(corner), grid_size)

    def corner_in_world_col(
        self, corner: HexDirection, grid_size: TilemapGridSize
    ) -> np.ndarray:
        """A corner of this hex in world space, column orientation."""
        return self.project_col(np.array([self.q, self.r]) + self._corner(corner), grid_size)

    @classmethod
    def from_world_pos_row(
        cls, world_pos: ArrayLike, grid_size: TilemapGridSize
    ) -> AxialPos:
        """The hex containing ``world_pos`` on a row oriented grid."""
        world_pos = np.asarray(world_pos, dtype=float)
        normalized = np.array(
            [world_pos[0] / grid_size.x, world_pos[1] / (ROW_BASIS[1, 1] * grid_size.y)]
        )
        q, r = INV_ROW_BASIS @ normalized
        return FractionalAxialPos(q, r).round()

    @classmethod
    def from_world_pos_col(
        cls, world_pos: ArrayLike, grid_size: TilemapGridSize
    ) -> AxialPos:
        """The hex containing ``world_pos`` on a column oriented grid."""
        world_pos = np.asarray(world_pos, dtype=float)
        normalized = np.array(
            [world_pos[0] / (COL_BASIS[0, 0] * grid_size.x), world_pos[1] / grid_size.y]
        )
        q, r = INV_COL_BASIS @ normalized
        return FractionalAxialPos(q, r).round()

    def as_tile_pos_given_map_size(self, map_size: TilemapSize) -> TilePos | None:
        """Read ``(q, r)`` directly as a tile position, None if off the map."""
        return TilePos.from_i32_pair(self.q, self.r, map_size)


@dataclass(frozen=True, slots=True)
class FractionalAxialPos:
    """Continuous axial coordinate."""

    q: float
    r: float

    def round(self) -> AxialPos:
        """Snap to the nearest hex using cube rounding."""
        return AxialPos.from_cube(FractionalCubePos.from_axial(self.q, self.r).round())
