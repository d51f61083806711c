"""World space extents of chunks and maps."""

from __future__ import annotations

import warnings
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from tilegrid.map import TilemapGridSize, TilemapSize, TilemapTileSize, TilemapType
from tilegrid.projection import center_in_world_unanchored
from tilegrid.tiles.tile_pos import TilePos

__all__ = [
    "Aabb",
    "chunk_aabb",
    "chunk_index_to_world_space",
    "get_tilemap_center_transform",
]


@dataclass(frozen=True, eq=False)
class Aabb:
    """An axis-aligned bounding box in world space.

    Attributes:
        min: the minimum corner, shape ``(3,)``
        max: the maximum corner, shape ``(3,)``
    """

    min: np.ndarray
    max: np.ndarray

    @classmethod
    def from_min_max(cls, minimum: ArrayLike, maximum: ArrayLike) -> Aabb:
        """A box spanning the two corners."""
        return cls(np.asarray(minimum, dtype=float), np.asarray(maximum, dtype=float))

    @property
    def center(self) -> np.ndarray:
        """Midpoint of the box."""
        return (self.min + self.max) / 2.0

    @property
    def half_extents(self) -> np.ndarray:
        """Half the size of the box along each axis."""
        return (self.max - self.min) / 2.0

    def translated(self, offset: ArrayLike) -> Aabb:
        """Move the box, e.g. by a chunk's placement. A 2D offset leaves z untouched."""
        offset = np.asarray(offset, dtype=float)
        if offset.shape == (2,):
            offset = np.append(offset, 0.0)
        return Aabb(self.min + offset, self.max + offset)

    def contains_point(self, point: ArrayLike) -> bool:
        """Whether a 2D or 3D point lies inside the box (bounds included)."""
        point = np.asarray(point, dtype=float)
        n = point.shape[0]
        return bool(np.all(self.min[:n] <= point) and np.all(point <= self.max[:n]))


def chunk_index_to_world_space(
    chunk_index: Sequence[int],
    chunk_size: Sequence[int],
    grid_size: TilemapGridSize,
    map_type: TilemapType,
) -> np.ndarray:
    """Calculates the world position of the bottom-left tile of a chunk.

    Args:
        chunk_index: the index of the chunk, in chunks
        chunk_size: the size of a chunk, in tiles
        grid_size: size of a grid cell
        map_type: layout of the map

    Returns:
        np.ndarray: the unanchored center of the chunk's first tile
    """
    # the "anchor tile" of the chunk
    anchor_tile_pos = TilePos(
        chunk_index[0] * chunk_size[0], chunk_index[1] * chunk_size[1]
    )
    return center_in_world_unanchored(anchor_tile_pos, grid_size, map_type)


def chunk_aabb(
    chunk_size: Sequence[int],
    grid_size: TilemapGridSize,
    tile_size: TilemapTileSize,
    map_type: TilemapType,
) -> Aabb:
    """Calculates the bounding box of a generic chunk.

    The box depends on the grid size, tile size and map type. It is built
    around the chunk placed at the origin, so it has to be translated by a
    chunk's actual position before it is useful.

    Args:
        chunk_size: the size of the chunk, in tiles
        grid_size: size of a grid cell
        tile_size: drawn size of a tile
        map_type: layout of the map

    Returns:
        Aabb: the bounding box, with z ranging over [0, 1]

    Notes:
        For most map types the first and last corner would suffice. For an
        isometric diamond the projection is not monotonic along the axes, so
        all four corners are projected and the extremes are taken.
    """
    # tiles may be drawn larger than their grid cell
    border = np.maximum(grid_size.as_array(), tile_size.as_array()) / 2.0

    corners = np.array(
        [
            chunk_index_to_world_space(index, chunk_size, grid_size, map_type)
            for index in ((0, 0), (1, 0), (0, 1), (1, 1))
        ]
    )

    minimum = np.append(corners.min(axis=0) - border, 0.0)
    maximum = np.append(corners.max(axis=0) + border, 1.0)
    return Aabb.from_min_max(minimum, maximum)


def get_tilemap_center_transform(
    map_size: TilemapSize,
    grid_size: TilemapGridSize,
    map_type: TilemapType,
    z: float,
) -> np.ndarray:
    """Translation that puts the center of a map at ``(0, 0, z)``.

    Deprecated: use ``TilemapAnchor.CENTER`` instead. Unlike the anchor, this
    ignores tile size and measures from tile center to tile center.
    """
    warnings.warn(
        "get_tilemap_center_transform is deprecated, use TilemapAnchor.CENTER instead.",
        FutureWarning,
        stacklevel=2,
    )
    low = center_in_world_unanchored(TilePos(0, 0), grid_size, map_type)
    high = center_in_world_unanchored(
        TilePos(map_size.x - 1, map_size.y - 1), grid_size, map_type
    )
    diff = high - low
    return np.array([-diff[0] / 2.0, -diff[1] / 2.0, z])
