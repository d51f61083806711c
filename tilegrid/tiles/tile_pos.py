"""The universal address of a tile: a non-negative grid coordinate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from tilegrid.map import TilemapSize

if TYPE_CHECKING:
    from tilegrid.anchor import TilemapAnchor
    from tilegrid.map import TilemapGridSize, TilemapTileSize, TilemapType


@dataclass(frozen=True, slots=True, order=True)
class TilePos:
    """A tile position in the tilemap grid.

    Attributes:
        x: column of the tile, counted from the left
        y: row of the tile, counted from the bottom

    Notes:
        Both components are non-negative. Layout specific coordinates that can
        become negative (axial, offset, square, ...) convert back to a TilePos
        through ``as_tile_pos`` style helpers, which return None instead of an
        invalid position.
    """

    x: int = 0
    y: int = 0

    def __post_init__(self):  # noqa: D105
        if self.x < 0 or self.y < 0:
            raise ValueError(f"TilePos components must be non-negative, got {self}")

    def to_index(self, tilemap_size: TilemapSize) -> int:
        """Converts this position into an index of a flattened, row-major vector.

        Assumes the position lies in a tilemap of the given size.
        """
        return self.y * tilemap_size.x + self.x

    def within_map_bounds(self, map_size: TilemapSize) -> bool:
        """Checks whether this position lies within a tilemap of the given size."""
        return self.x < map_size.x and self.y < map_size.y

    @classmethod
    def from_i32_pair(cls, x: int, y: int, map_size: TilemapSize) -> TilePos | None:
        """Try converting a pair of signed integers into a TilePos.

        Returns None if either ``x`` or ``y`` is negative, or lies outside of
        the bounds of ``map_size``.
        """
        if x < 0 or y < 0:
            return None
        tile_pos = cls(int(x), int(y))
        if tile_pos.within_map_bounds(map_size):
            return tile_pos
        return None

    def as_array(self) -> np.ndarray:
        """Return the position as a float vector."""
        return np.array([self.x, self.y], dtype=float)

    def center_in_world(
        self,
        map_size: TilemapSize,
        grid_size: TilemapGridSize,
        tile_size: TilemapTileSize,
        map_type: TilemapType,
        anchor: TilemapAnchor,
    ) -> np.ndarray:
        """Get the center of this tile in world space.

        See :func:`tilegrid.projection.center_in_world`.
        """
        from tilegrid.projection import center_in_world

        return center_in_world(
            self, map_size, grid_size, tile_size, map_type, anchor
        )

    @classmethod
    def from_world_pos(
        cls,
        world_pos,
        map_size: TilemapSize,
        grid_size: TilemapGridSize,
        tile_size: TilemapTileSize,
        map_type: TilemapType,
        anchor: TilemapAnchor,
    ) -> TilePos | None:
        """Get the tile containing a world position, if it lies on the map.

        See :func:`tilegrid.projection.from_world_pos`.
        """
        from tilegrid.projection import from_world_pos

        return from_world_pos(
            world_pos, map_size, grid_size, tile_size, map_type, anchor
        )
