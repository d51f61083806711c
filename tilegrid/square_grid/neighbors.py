"""Neighborhoods on square, diamond and staggered grids.

A :class:`Neighbors` holds one optional value per :class:`SquareDirection`.
Directions whose neighbor falls off the map (or diagonals that were not
requested) hold None; a missing neighbor never invalidates the others.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from tilegrid.map import TilemapSize
from tilegrid.square_grid.diamond import DiamondPos
from tilegrid.square_grid.direction import (
    CARDINAL_SQUARE_DIRECTIONS,
    SQUARE_DIRECTIONS,
    SquareDirection,
)
from tilegrid.square_grid.square import SquarePos
from tilegrid.square_grid.staggered import StaggeredPos
from tilegrid.tiles.tile_pos import TilePos

if TYPE_CHECKING:
    from tilegrid.tiles.storage import TileStorage


T = TypeVar("T")
U = TypeVar("U")
H = TypeVar("H")


class Neighbors(Generic[T]):
    """Values associated with the eight neighbors of a tile.

    Attributes are named after the directions (``east``, ``north_east``, ...)
    and are None where there is no neighbor.
    """

    __slots__ = (
        "east",
        "north",
        "north_east",
        "north_west",
        "south",
        "south_east",
        "south_west",
        "west",
    )

    def __init__(
        self,
        east: T | None = None,
        north_east: T | None = None,
        north: T | None = None,
        north_west: T | None = None,
        west: T | None = None,
        south_west: T | None = None,
        south: T | None = None,
        south_east: T | None = None,
    ) -> None:
        """Create a neighborhood from per-direction values."""
        self.east = east
        self.north_east = north_east
        self.north = north
        self.north_west = north_west
        self.west = west
        self.south_west = south_west
        self.south = south
        self.south_east = south_east

    @classmethod
    def from_directional_closure(
        cls, f: Callable[[SquareDirection], T | None]
    ) -> Neighbors[T]:
        """Build a neighborhood by calling ``f`` once per direction."""
        return cls(*(f(direction) for direction in SQUARE_DIRECTIONS))

    def get(self, direction: SquareDirection) -> T | None:
        """Get the value in ``direction``, None if absent."""
        return getattr(self, direction.name.lower())

    def set(self, direction: SquareDirection, value: T | None) -> None:
        """Store ``value`` for ``direction``, None clears it."""
        setattr(self, direction.name.lower(), value)

    def iter(self) -> Iterator[T]:
        """Iterate over present values, counter-clockwise from east."""
        for _, value in self.iter_with_direction():
            yield value

    def iter_with_direction(self) -> Iterator[tuple[SquareDirection, T]]:
        """Iterate over ``(direction, value)`` pairs for present values."""
        for direction in SQUARE_DIRECTIONS:
            value = self.get(direction)
            if value is not None:
                yield direction, value

    def __iter__(self):
        """Iterate over the occupied directions and their values."""
        return self.iter()

    def __len__(self) -> int:
        """Number of directions holding a value."""
        return sum(1 for _ in self.iter())

    def __eq__(self, other) -> bool:  # noqa: D105
        if not isinstance(other, Neighbors):
            return NotImplemented
        return all(self.get(d) == other.get(d) for d in SQUARE_DIRECTIONS)

    def __repr__(self) -> str:  # noqa: D105
        inner = ", ".join(f"{d.name.lower()}={self.get(d)!r}" for d in SQUARE_DIRECTIONS)
        return f"Neighbors({inner})"

    def map_ref(self, f: Callable[[T], U]) -> Neighbors[U]:
        """Apply ``f`` to every present value."""
        return Neighbors.from_directional_closure(
            lambda d: None if (v := self.get(d)) is None else f(v)
        )

    def and_then(self, f: Callable[[T], U | None]) -> Neighbors[U]:
        """Apply ``f`` to every present value; ``f`` may itself return None."""
        return self.map_ref(f)

    def entities(self: Neighbors[TilePos], storage: TileStorage[H]) -> Neighbors[H]:
        """Look up the handle stored for every neighbor position."""
        return self.and_then(storage.checked_get)

    @classmethod
    def _from_offsets(
        cls,
        offset: Callable[[SquareDirection], TilePos | None],
        include_diagonals: bool,
    ) -> Neighbors[TilePos]:
        directions = SQUARE_DIRECTIONS if include_diagonals else CARDINAL_SQUARE_DIRECTIONS
        neighbors = cls()
        for direction in directions:
            neighbors.set(direction, offset(direction))
        return neighbors

    @classmethod
    def get_square_neighboring_positions(
        cls, tile_pos: TilePos, map_size: TilemapSize, include_diagonals: bool
    ) -> Neighbors[TilePos]:
        """Returns the neighbors of ``tile_pos`` on a square map.

        Args:
            tile_pos: the center tile
            map_size: size of the map, neighbors outside of it are None
            include_diagonals: whether diagonal directions are filled in
        """
        square_pos = SquarePos.from_tile_pos(tile_pos)
        return cls._from_offsets(
            lambda d: square_pos.offset(d).as_tile_pos(map_size), include_diagonals
        )

    @classmethod
    def get_diamond_neighboring_positions(
        cls, tile_pos: TilePos, map_size: TilemapSize, include_diagonals: bool
    ) -> Neighbors[TilePos]:
        """Returns the neighbors of ``tile_pos`` on an isometric diamond map."""
        diamond_pos = DiamondPos.from_tile_pos(tile_pos)
        return cls._from_offsets(
            lambda d: diamond_pos.offset(d).as_tile_pos(map_size), include_diagonals
        )

    @classmethod
    def get_staggered_neighboring_positions(
        cls, tile_pos: TilePos, map_size: TilemapSize, include_diagonals: bool
    ) -> Neighbors[TilePos]:
        """Returns the neighbors of ``tile_pos`` on an isometric staggered map.

        Adjacency is computed in square space and sheared back.
        """
        staggered_pos = StaggeredPos.from_tile_pos(tile_pos)
        return cls._from_offsets(
            lambda d: staggered_pos.offset(d).as_tile_pos(map_size), include_diagonals
        )
