"""Positioning of a whole tilemap relative to its origin.

Without an anchor, the origin of a map is the center of its bottom-left tile.
An anchor picks another point of the map's bounding box to act as origin:
the box is measured with :func:`~tilegrid.transform.chunk_aabb` over the
whole map, and the anchor translates it so that the chosen point lands on
``(0, 0)``.

Every named anchor is a fractional point of the bounding box, ranging from
``(-0.5, -0.5)`` (bottom-left) to ``(0.5, 0.5)`` (top-right), with
``(0, 0)`` its center. ``TilemapAnchor.custom`` accepts any such point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from tilegrid.map import TilemapGridSize, TilemapSize, TilemapTileSize, TilemapType
from tilegrid.transform import chunk_aabb


@dataclass(frozen=True, slots=True)
class TilemapAnchor:
    """How a tilemap is positioned relative to its origin.

    Attributes:
        fraction: the fractional point of the map's bounding box that becomes
            the origin, or None to keep the center of the bottom-left tile

    Notes:
        ``BOTTOM_LEFT`` refers to the bottom-left corner of the whole map,
        not to the center of its bottom-left tile; that is ``NONE``.
    """

    fraction: tuple[float, float] | None = None

    NONE: ClassVar[TilemapAnchor]
    CENTER: ClassVar[TilemapAnchor]
    BOTTOM_LEFT: ClassVar[TilemapAnchor]
    BOTTOM_CENTER: ClassVar[TilemapAnchor]
    BOTTOM_RIGHT: ClassVar[TilemapAnchor]
    CENTER_LEFT: ClassVar[TilemapAnchor]
    CENTER_RIGHT: ClassVar[TilemapAnchor]
    TOP_LEFT: ClassVar[TilemapAnchor]
    TOP_CENTER: ClassVar[TilemapAnchor]
    TOP_RIGHT: ClassVar[TilemapAnchor]

    @classmethod
    def custom(cls, x: float, y: float) -> TilemapAnchor:
        """An anchor at a fractional point, top left is ``(-0.5, 0.5)``."""
        return cls((float(x), float(y)))

    def as_offset(
        self,
        map_size: TilemapSize,
        grid_size: TilemapGridSize,
        tile_size: TilemapTileSize,
        map_type: TilemapType,
    ) -> np.ndarray:
        """The translation that moves the map to this anchor.

        Args:
            map_size: size of the map
            grid_size: size of a grid cell
            tile_size: drawn size of a tile
            map_type: layout of the map

        Returns:
            np.ndarray: offset to add to every unanchored world position

        Examples:
            ``NONE`` has an offset of zero, while ``BOTTOM_LEFT`` on a square
            map with equal grid and tile sizes moves the map by half a cell up
            and right, from the center of the bottom-left tile to its corner.
        """
        if self.fraction is None:
            return np.zeros(2)

        aabb = chunk_aabb(
            (map_size.x - 1, map_size.y - 1), grid_size, tile_size, map_type
        )
        minimum = aabb.min[:2]
        maximum = aabb.max[:2]
        fraction = np.asarray(self.fraction, dtype=float)
        return (-0.5 - fraction) * (maximum - minimum) - minimum


TilemapAnchor.NONE = TilemapAnchor()
TilemapAnchor.CENTER = TilemapAnchor.custom(0.0, 0.0)
TilemapAnchor.BOTTOM_LEFT = TilemapAnchor.custom(-0.5, -0.5)
TilemapAnchor.BOTTOM_CENTER = TilemapAnchor.custom(0.0, -0.5)
TilemapAnchor.BOTTOM_RIGHT = TilemapAnchor.custom(0.5, -0.5)
TilemapAnchor.CENTER_LEFT = TilemapAnchor.custom(-0.5, 0.0)
TilemapAnchor.CENTER_RIGHT = TilemapAnchor.custom(0.5, 0.0)
TilemapAnchor.TOP_LEFT = TilemapAnchor.custom(-0.5, 0.5)
TilemapAnchor.TOP_CENTER = TilemapAnchor.custom(0.0, 0.5)
TilemapAnchor.TOP_RIGHT = TilemapAnchor.custom(0.5, 0.5)
