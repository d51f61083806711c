"""Map level value types: sizes and the closed set of tilemap layouts.

Provides:
- TilemapSize: the extent of a map, counted in tiles
- TilemapGridSize: the size of a grid cell, in world units
- TilemapTileSize: the visual size of a tile, in world units
- HexCoordSystem / IsoCoordSystem: the supported hexagonal and isometric conventions
- TilemapType: Square, Hexagon or Isometric, dispatched with ``match``

The grid size controls where tiles are placed; the tile size only controls
how large they are drawn, so tiles may overlap their neighbours.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

__all__ = [
    "HexCoordSystem",
    "Hexagon",
    "IsoCoordSystem",
    "Isometric",
    "Square",
    "TilemapGridSize",
    "TilemapSize",
    "TilemapTileSize",
    "TilemapType",
]


@dataclass(frozen=True, slots=True)
class TilemapSize:
    """Size of a tilemap, in tiles."""

    x: int
    y: int

    def count(self) -> int:
        """Number of tiles in the map."""
        return self.x * self.y

    def as_array(self) -> np.ndarray:
        """The size as an integer ``[x, y]`` array."""
        return np.array([self.x, self.y], dtype=np.int64)


@dataclass(frozen=True, slots=True)
class TilemapGridSize:
    """Size of a grid cell, in world units.

    For hexagonal maps this is the size of the bounding rectangle of a single
    hex: width is the flat-to-flat distance for row oriented grids.
    """

    x: float
    y: float

    def as_array(self) -> np.ndarray:
        """The size as a float ``[x, y]`` array."""
        return np.array([self.x, self.y], dtype=float)


@dataclass(frozen=True, slots=True)
class TilemapTileSize:
    """Size of a tile as drawn, in world units."""

    x: float
    y: float

    def as_array(self) -> np.ndarray:
        """The size as a float ``[x, y]`` array."""
        return np.array([self.x, self.y], dtype=float)


class HexCoordSystem(Enum):
    """Coordinate systems available for hexagonal maps.

    ``ROW`` and ``COLUMN`` address tiles directly by axial coordinates, with
    hexes lined up in rows (pointy top) or columns (flat top). The four offset
    systems shift every other row or column by half a hex:

    - ``ROW_EVEN`` / ``ROW_ODD``: even or odd rows are shoved right
    - ``COLUMN_EVEN`` / ``COLUMN_ODD``: even or odd columns are shoved up
    """

    ROW = "row"
    COLUMN = "column"
    ROW_EVEN = "row_even"
    ROW_ODD = "row_odd"
    COLUMN_EVEN = "column_even"
    COLUMN_ODD = "column_odd"

    @property
    def is_row_oriented(self) -> bool:
        """Whether hexes of this system are lined up in rows."""
        return self in (
            HexCoordSystem.ROW,
            HexCoordSystem.ROW_EVEN,
            HexCoordSystem.ROW_ODD,
        )


class IsoCoordSystem(Enum):
    """Coordinate systems available for isometric maps."""

    DIAMOND = "diamond"
    STAGGERED = "staggered"


@dataclass(frozen=True, slots=True)
class Square:
    """Plain orthogonal layout."""


@dataclass(frozen=True, slots=True)
class Hexagon:
    """Hexagonal layout in one of the :class:`HexCoordSystem` conventions."""

    coord_system: HexCoordSystem


@dataclass(frozen=True, slots=True)
class Isometric:
    """Isometric layout in one of the :class:`IsoCoordSystem` conventions."""

    coord_system: IsoCoordSystem


TilemapType = Square | Hexagon | Isometric
