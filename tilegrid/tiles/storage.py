"""Fixed-size lookup from tile positions to opaque tile handles.

The storage is the only mutable object in the library. Geometry functions
never touch it; region helpers only enumerate the positions a caller fills.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

import numpy as np

from tilegrid.errors import GridDimensionError, OutOfBoundsError
from tilegrid.map import TilemapSize
from tilegrid.tiles.tile_pos import TilePos


T = TypeVar("T")


class TileStorage(Generic[T]):
    """Used to store tile handles for fast look up.

    Handles are stored in a flat, row-major list with one slot per tile of the
    map. Every slot starts out as None.

    Attributes:
        size (TilemapSize): the size of the map this storage belongs to

    Notes:
        ``get``, ``set`` and ``remove`` are the fast path and expect a position
        inside the map; they raise :class:`OutOfBoundsError` otherwise. The
        ``checked_`` variants quietly return None (or do nothing) instead.
    """

    __slots__ = ("_tiles", "size")

    def __init__(self, size: TilemapSize) -> None:
        """Creates a new, empty tile storage.

        Args:
            size: the size of the map

        Raises:
            GridDimensionError: if either dimension is not a positive integer
        """
        if not all(isinstance(d, int | np.integer) and d > 0 for d in (size.x, size.y)):
            raise GridDimensionError(
                f"Tile storage needs positive integer dimensions, got ({size.x}, {size.y})"
            )
        self.size = size
        self._tiles: list[T | None] = [None] * size.count()

    @classmethod
    def empty(cls, size: TilemapSize) -> TileStorage[T]:
        """Creates a new tile storage that is empty."""
        return cls(size)

    def _index(self, tile_pos: TilePos) -> int:
        if not tile_pos.within_map_bounds(self.size):
            raise OutOfBoundsError((tile_pos.x, tile_pos.y), (self.size.x, self.size.y))
        return tile_pos.to_index(self.size)

    def get(self, tile_pos: TilePos) -> T | None:
        """Gets the handle stored at ``tile_pos``, if any.

        Raises:
            OutOfBoundsError: if ``tile_pos`` lies outside of the map
        """
        return self._tiles[self._index(tile_pos)]

    def checked_get(self, tile_pos: TilePos) -> T | None:
        """Gets the handle stored at ``tile_pos``.

        Returns None if the position lies outside of the map, or if nothing is
        stored there.
        """
        if tile_pos.within_map_bounds(self.size):
            return self._tiles[tile_pos.to_index(self.size)]
        return None

    def set(self, tile_pos: TilePos, handle: T) -> None:
        """Sets the handle for ``tile_pos``, replacing any previous one.

        Raises:
            OutOfBoundsError: if ``tile_pos`` lies outside of the map
        """
        self._tiles[self._index(tile_pos)] = handle

    def checked_set(self, tile_pos: TilePos, handle: T) -> None:
        """Sets the handle for ``tile_pos`` if it lies within the map."""
        if tile_pos.within_map_bounds(self.size):
            self._tiles[tile_pos.to_index(self.size)] = handle

    def remove(self, tile_pos: TilePos) -> T | None:
        """Removes and returns the handle at ``tile_pos``, leaving None in its place.

        Raises:
            OutOfBoundsError: if ``tile_pos`` lies outside of the map
        """
        index = self._index(tile_pos)
        handle, self._tiles[index] = self._tiles[index], None
        return handle

    def checked_remove(self, tile_pos: TilePos) -> T | None:
        """Removes and returns the handle at ``tile_pos`` if it lies within the map."""
        if not tile_pos.within_map_bounds(self.size):
            return None
        return self.remove(tile_pos)

    def iter(self) -> Iterator[T | None]:
        """Returns an iterator over every slot, in row-major order."""
        return iter(self._tiles)

    def items(self) -> Iterator[tuple[TilePos, T]]:
        """Yields ``(tile_pos, handle)`` for every occupied slot."""
        width = self.size.x
        for index, handle in enumerate(self._tiles):
            if handle is not None:
                yield TilePos(index % width, index // width), handle

    def drain(self) -> Iterator[T]:
        """Removes all stored handles, yielding each of them.

        The storage is emptied as the iterator advances.
        """
        for index, handle in enumerate(self._tiles):
            if handle is not None:
                self._tiles[index] = None
                yield handle

    def map_handles(self, mapper: Callable[[T], T]) -> None:
        """Replace every stored handle ``h`` with ``mapper(h)``."""
        self._tiles = [None if h is None else mapper(h) for h in self._tiles]

    def __len__(self) -> int:  # noqa: D105
        return len(self._tiles)

    def __iter__(self):  # noqa: D105
        return iter(self._tiles)

    def __getitem__(self, tile_pos: TilePos) -> T | None:
        """Same as :meth:`get`."""
        return self.get(tile_pos)

    def __setitem__(self, tile_pos: TilePos, handle: T) -> None:
        """Same as :meth:`set`."""
        self.set(tile_pos, handle)

    def __repr__(self) -> str:  # noqa: D105
        occupied = sum(h is not None for h in self._tiles)
        return f"TileStorage(size={self.size}, occupied={occupied})"
