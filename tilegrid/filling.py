"""Region enumeration: rectangles, hex rings and hexagons.

The ``generate_*`` and ``*_positions`` functions only enumerate coordinates.
The ``fill_*`` functions drive a :class:`~tilegrid.tiles.TileStorage` with
handles produced by a caller supplied factory, one call per tile.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

from tilegrid.hex_grid.axial import AxialPos
from tilegrid.hex_grid.direction import HEX_DIRECTIONS, HexDirection
from tilegrid.hex_grid.offset import (
    axial_from_tile_pos,
    axial_to_tile_pos_given_map_size,
)
from tilegrid.map import HexCoordSystem, TilemapSize
from tilegrid.tilegrid_logging import function_logger
from tilegrid.tiles.storage import TileStorage
from tilegrid.tiles.tile_pos import TilePos

__all__ = [
    "fill_tilemap",
    "fill_tilemap_hexagon",
    "fill_tilemap_rect",
    "generate_hex_ring",
    "generate_hexagon",
    "hexagon_tile_positions",
    "rect_positions",
]


T = TypeVar("T")


def generate_hex_ring(origin: AxialPos, radius: int) -> list[AxialPos]:
    """Hexes forming a ring of ``radius`` around ``origin``.

    The ring starts at the corner in direction zero and walks counter-clockwise,
    ``radius`` steps per edge. If ``radius`` is zero, ``origin`` is the only
    element.
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")
    if radius == 0:
        return [origin]

    ring: list[AxialPos] = []
    for direction in HEX_DIRECTIONS:
        corner = origin + radius * AxialPos.from_direction(direction)
        # the "tangent" is the direction we must travel in to reach the next corner
        tangent = AxialPos.from_direction(HexDirection((direction + 2) % 6))
        ring.extend(corner + k * tangent for k in range(radius))
    return ring


def generate_hexagon(origin: AxialPos, radius: int) -> list[AxialPos]:
    """Hexes forming a filled hexagon of ``radius`` around ``origin``, ring by ring."""
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")
    hexagon: list[AxialPos] = []
    for r in range(radius + 1):
        hexagon.extend(generate_hex_ring(origin, r))
    return hexagon


def rect_positions(origin: TilePos, size: TilemapSize) -> Iterator[TilePos]:
    """Tile positions of the rectangle starting at ``origin`` with ``size`` tiles."""
    for x in range(size.x):
        for y in range(size.y):
            yield TilePos(origin.x + x, origin.y + y)


def hexagon_tile_positions(
    origin: TilePos,
    radius: int,
    hex_coord_system: HexCoordSystem,
    map_size: TilemapSize,
) -> list[TilePos]:
    """Tile positions of a hexagon around ``origin`` that fit on the map."""
    hexagon = generate_hexagon(axial_from_tile_pos(origin, hex_coord_system), radius)
    positions = (
        axial_to_tile_pos_given_map_size(axial_pos, hex_coord_system, map_size)
        for axial_pos in hexagon
    )
    return [tile_pos for tile_pos in positions if tile_pos is not None]


@function_logger(__name__)
def fill_tilemap(
    factory: Callable[[TilePos], T], tile_storage: TileStorage[T]
) -> None:
    """Fills an entire tile storage with handles made by ``factory``."""
    fill_tilemap_rect(factory, TilePos(0, 0), tile_storage.size, tile_storage)


@function_logger(__name__)
def fill_tilemap_rect(
    factory: Callable[[TilePos], T],
    origin: TilePos,
    size: TilemapSize,
    tile_storage: TileStorage[T],
) -> None:
    """Fills a rectangular region with handles made by ``factory``.

    Raises:
        OutOfBoundsError: if the rectangle does not fit in the storage
    """
    for tile_pos in rect_positions(origin, size):
        tile_storage.set(tile_pos, factory(tile_pos))


@function_logger(__name__)
def fill_tilemap_hexagon(
    factory: Callable[[TilePos], T],
    origin: TilePos,
    radius: int,
    hex_coord_system: HexCoordSystem,
    tile_storage: TileStorage[T],
) -> None:
    """Fills a hexagonal region with handles made by ``factory``.

    Tiles that do not fit on the map are skipped.
    """
    for tile_pos in hexagon_tile_positions(
        origin, radius, hex_coord_system, tile_storage.size
    ):
        tile_storage.checked_set(tile_pos, factory(tile_pos))
