"""A validated bundle of the parameters that fix a tilemap's geometry.

All geometric functions of the library are free functions taking the map
size, grid size, tile size, map type and anchor. TilemapGeometry bundles
them, checks them once on construction, and forwards to those functions.
It is also the place where a geometry is read from or written to plain
dictionaries, e.g. from a settings file.

Examples:
    >>> geometry = TilemapGeometry.from_dict(
    ...     {"map_size": [10, 10], "grid_size": [32, 28], "map_type": "hexagon:row_odd"}
    ... )
    >>> geometry.from_world_pos(geometry.center_in_world(TilePos(3, 4)))
    TilePos(x=3, y=4)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from operator import index
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from tilegrid.anchor import TilemapAnchor
from tilegrid.errors import ConfigurationError
from tilegrid.filling import rect_positions
from tilegrid.hex_grid.neighbors import HexNeighbors
from tilegrid.map import (
    HexCoordSystem,
    Hexagon,
    IsoCoordSystem,
    Isometric,
    Square,
    TilemapGridSize,
    TilemapSize,
    TilemapTileSize,
    TilemapType,
)
from tilegrid.neighborhood import get_neighboring_positions
from tilegrid.projection import center_in_world, from_world_pos
from tilegrid.square_grid.neighbors import Neighbors
from tilegrid.tilegrid_logging import method_logger
from tilegrid.tiles.tile_pos import TilePos
from tilegrid.transform import Aabb, chunk_aabb

__all__ = [
    "TilemapGeometry",
    "parse_anchor",
    "parse_map_type",
]

_ANCHOR_NAMES = {
    "none": TilemapAnchor.NONE,
    "center": TilemapAnchor.CENTER,
    "bottom_left": TilemapAnchor.BOTTOM_LEFT,
    "bottom_center": TilemapAnchor.BOTTOM_CENTER,
    "bottom_right": TilemapAnchor.BOTTOM_RIGHT,
    "center_left": TilemapAnchor.CENTER_LEFT,
    "center_right": TilemapAnchor.CENTER_RIGHT,
    "top_left": TilemapAnchor.TOP_LEFT,
    "top_center": TilemapAnchor.TOP_CENTER,
    "top_right": TilemapAnchor.TOP_RIGHT,
}


def parse_map_type(value: str | TilemapType) -> TilemapType:
    """Read a map type such as ``"square"``, ``"hexagon:row_even"`` or ``"isometric:diamond"``."""
    if isinstance(value, Square | Hexagon | Isometric):
        return value
    kind, _, system = str(value).lower().partition(":")
    try:
        match kind:
            case "square" if not system:
                return Square()
            case "hexagon":
                return Hexagon(HexCoordSystem(system))
            case "isometric":
                return Isometric(IsoCoordSystem(system))
    except ValueError as e:
        raise ConfigurationError("map_type", f"unknown coordinate system '{system}'") from e
    raise ConfigurationError("map_type", f"unknown map type '{value}'")


def parse_anchor(value: str | ArrayLike | TilemapAnchor | None) -> TilemapAnchor:
    """Read an anchor from a preset name, a fractional ``[x, y]`` point, or None."""
    if value is None:
        return TilemapAnchor.NONE
    if isinstance(value, TilemapAnchor):
        return value
    if isinstance(value, str):
        try:
            return _ANCHOR_NAMES[value.lower()]
        except KeyError as e:
            raise ConfigurationError("anchor", f"unknown anchor '{value}'") from e
    try:
        x, y = value
        return TilemapAnchor.custom(x, y)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            "anchor", f"expected a preset name or an [x, y] point, got {value!r}"
        ) from e


def _parse_pair(
    config: Mapping[str, Any], key: str, size_type: type, convert: Callable[[Any], Any]
):
    try:
        return size_type(*(convert(v) for v in config[key]))
    except KeyError as e:
        raise ConfigurationError(key, "is required") from e
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            key, f"expected a pair of numbers, got {config[key]!r}"
        ) from e


def _map_type_to_str(map_type: TilemapType) -> str:
    match map_type:
        case Square():
            return "square"
        case Hexagon(coord_system):
            return f"hexagon:{coord_system.value}"
        case Isometric(coord_system):
            return f"isometric:{coord_system.value}"
    raise TypeError(f"Unknown tilemap type {map_type!r}")


@dataclass(frozen=True)
class TilemapGeometry:
    """Geometry parameters of one tilemap.

    Attributes:
        map_size: size of the map, in tiles
        grid_size: size of a grid cell, in world units
        tile_size: drawn size of a tile, defaults to the grid size
        map_type: layout of the map
        anchor: where the map's origin sits

    Raises:
        ConfigurationError: on a map without tiles or a non-positive cell size
    """

    map_size: TilemapSize
    grid_size: TilemapGridSize
    tile_size: TilemapTileSize | None = None
    map_type: TilemapType = field(default_factory=Square)
    anchor: TilemapAnchor = TilemapAnchor.NONE

    @method_logger(__name__)
    def __post_init__(self) -> None:  # noqa: D105
        if self.tile_size is None:
            object.__setattr__(
                self, "tile_size", TilemapTileSize(self.grid_size.x, self.grid_size.y)
            )
        self._validate_parameters()

    def _validate_parameters(self) -> None:
        size = self.map_size
        if not all(isinstance(d, int | np.integer) and d > 0 for d in (size.x, size.y)):
            raise ConfigurationError("map_size", "must be two positive integers")
        for name in ("grid_size", "tile_size"):
            value = getattr(self, name)
            if not all(np.isfinite(d) and d > 0 for d in (value.x, value.y)):
                raise ConfigurationError(name, "must be two positive, finite numbers")
        if not isinstance(self.map_type, Square | Hexagon | Isometric):
            raise ConfigurationError("map_type", f"unknown map type {self.map_type!r}")

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> TilemapGeometry:
        """Build a geometry from plain values.

        Recognised keys are ``map_size``, ``grid_size``, ``tile_size`` (pairs
        of numbers), ``map_type`` (see :func:`parse_map_type`) and ``anchor``
        (see :func:`parse_anchor`). Only ``map_size`` and ``grid_size`` are
        required.

        Raises:
            ConfigurationError: naming the key that is missing or malformed
        """
        return cls(
            map_size=_parse_pair(config, "map_size", TilemapSize, index),
            grid_size=_parse_pair(config, "grid_size", TilemapGridSize, float),
            tile_size=None
            if config.get("tile_size") is None
            else _parse_pair(config, "tile_size", TilemapTileSize, float),
            map_type=parse_map_type(config.get("map_type", "square")),
            anchor=parse_anchor(config.get("anchor")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a dict representation that :meth:`from_dict` reads back."""
        return {
            "map_size": [self.map_size.x, self.map_size.y],
            "grid_size": [self.grid_size.x, self.grid_size.y],
            "tile_size": [self.tile_size.x, self.tile_size.y],
            "map_type": _map_type_to_str(self.map_type),
            "anchor": None
            if self.anchor.fraction is None
            else list(self.anchor.fraction),
        }

    def anchor_offset(self) -> np.ndarray:
        """The translation applied to every tile by the anchor."""
        return self.anchor.as_offset(
            self.map_size, self.grid_size, self.tile_size, self.map_type
        )

    def center_in_world(self, tile_pos: TilePos) -> np.ndarray:
        """World position of a tile's center."""
        return center_in_world(
            tile_pos,
            self.map_size,
            self.grid_size,
            self.tile_size,
            self.map_type,
            self.anchor,
        )

    def from_world_pos(self, world_pos: ArrayLike) -> TilePos | None:
        """The tile containing a world position, None if off the map."""
        return from_world_pos(
            world_pos,
            self.map_size,
            self.grid_size,
            self.tile_size,
            self.map_type,
            self.anchor,
        )

    def neighbors(
        self, tile_pos: TilePos, include_diagonals: bool = False
    ) -> Neighbors[TilePos] | HexNeighbors[TilePos]:
        """Neighbors of a tile on this map."""
        return get_neighboring_positions(
            tile_pos, self.map_size, self.map_type, include_diagonals
        )

    def chunk_aabb(self, chunk_size: tuple[int, int]) -> Aabb:
        """Bounding box of a chunk of this map, placed at the origin."""
        return chunk_aabb(chunk_size, self.grid_size, self.tile_size, self.map_type)

    def map_aabb(self) -> Aabb:
        """Bounding box of the whole map, including the anchor offset."""
        aabb = self.chunk_aabb((self.map_size.x - 1, self.map_size.y - 1))
        return aabb.translated(self.anchor_offset())

    def tile_positions(self) -> Iterator[TilePos]:
        """Every tile position of the map."""
        return rect_positions(TilePos(0, 0), self.map_size)
