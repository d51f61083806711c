"""Neighborhoods on hexagonal grids."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from tilegrid.hex_grid.direction import HEX_DIRECTIONS, HexDirection
from tilegrid.hex_grid.offset import hex_offset
from tilegrid.map import HexCoordSystem, TilemapSize
from tilegrid.tiles.tile_pos import TilePos

if TYPE_CHECKING:
    from tilegrid.tiles.storage import TileStorage


T = TypeVar("T")
U = TypeVar("U")
H = TypeVar("H")


class HexNeighbors(Generic[T]):
    """Values associated with the six neighbors of a hex.

    Attributes ``zero`` to ``five`` follow :class:`HexDirection`; absent
    neighbors are None.
    """

    __slots__ = ("five", "four", "one", "three", "two", "zero")

    def __init__(
        self,
        zero: T | None = None,
        one: T | None = None,
        two: T | None = None,
        three: T | None = None,
        four: T | None = None,
        five: T | None = None,
    ) -> None:
        """Create a neighborhood from per-direction values."""
        self.zero = zero
        self.one = one
        self.two = two
        self.three = three
        self.four = four
        self.five = five

    @classmethod
    def from_directional_closure(
        cls, f: Callable[[HexDirection], T | None]
    ) -> HexNeighbors[T]:
        """Build a neighborhood by calling ``f`` once per direction."""
        return cls(*(f(direction) for direction in HEX_DIRECTIONS))

    def get(self, direction: HexDirection | int) -> T | None:
        """Get the value in ``direction``, None if absent.

        Accepts :class:`HexRowDirection` and :class:`HexColDirection` members
        as well, since they share the numbering.
        """
        return getattr(self, HexDirection(int(direction)).name.lower())

    def iter(self) -> Iterator[T]:
        """Iterate over present values, counter-clockwise from direction zero."""
        for _, value in self.iter_with_direction():
            yield value

    def iter_with_direction(self) -> Iterator[tuple[HexDirection, T]]:
        """Iterate over ``(direction, value)`` pairs for present values."""
        for direction in HEX_DIRECTIONS:
            value = self.get(direction)
            if value is not None:
                yield direction, value

    def __iter__(self):
        """Iterate over the directions that hold a value, with the value."""
        return self.iter()

    def __len__(self) -> int:
        """Number of directions holding a value."""
        return sum(1 for _ in self.iter())

    def __eq__(self, other) -> bool:  # noqa: D105
        if not isinstance(other, HexNeighbors):
            return NotImplemented
        return all(self.get(d) == other.get(d) for d in HEX_DIRECTIONS)

    def __repr__(self) -> str:  # noqa: D105
        inner = ", ".join(f"{d.name.lower()}={self.get(d)!r}" for d in HEX_DIRECTIONS)
        return f"HexNeighbors({inner})"

    def map_ref(self, f: Callable[[T], U | None]) -> HexNeighbors[U]:
        """Apply ``f`` to every present value."""
        return HexNeighbors.from_directional_closure(
            lambda d: None if (v := self.get(d)) is None else f(v)
        )

    def entities(self: HexNeighbors[TilePos], storage: TileStorage[H]) -> HexNeighbors[H]:
        """Look up the handle stored for every neighbor position."""
        return self.map_ref(storage.checked_get)

    @classmethod
    def get_neighboring_positions(
        cls,
        tile_pos: TilePos,
        map_size: TilemapSize,
        hex_coord_system: HexCoordSystem,
    ) -> HexNeighbors[TilePos]:
        """Returns the neighbors of ``tile_pos`` on a hex map.

        Adjacency is computed in axial space, so every coordinate system gets
        the same six neighbors of a hex; only their tile addresses differ.

        Args:
            tile_pos: the center tile
            map_size: size of the map, neighbors outside of it are None
            hex_coord_system: how tile positions map to hexes
        """
        return cls.from_directional_closure(
            lambda d: hex_offset(tile_pos, d, map_size, hex_coord_system)
        )
