"""The six directions of a hexagonal grid."""

from __future__ import annotations

from enum import IntEnum


class HexDirection(IntEnum):
    """Directions on a hex grid, 60 degrees apart and counter-clockwise.

    ``ZERO`` points along the positive q axis. Which compass direction that is
    depends on the orientation of the grid; see :class:`HexRowDirection` and
    :class:`HexColDirection`.
    """

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5

    def opposite(self) -> HexDirection:
        """The direction pointing the other way."""
        return HexDirection((self.value + 3) % 6)

    def rotate(self, steps: int) -> HexDirection:
        """Rotate counter-clockwise by ``steps`` multiples of 60 degrees."""
        return HexDirection((self.value + steps) % 6)


class HexRowDirection(IntEnum):
    """Compass names of the hex directions on row oriented (pointy top) grids."""

    EAST = 0
    NORTH_EAST = 1
    NORTH_WEST = 2
    WEST = 3
    SOUTH_WEST = 4
    SOUTH_EAST = 5


class HexColDirection(IntEnum):
    """Compass names of the hex directions on column oriented (flat top) grids."""

    NORTH_EAST = 0
    NORTH = 1
    NORTH_WEST = 2
    SOUTH_WEST = 3
    SOUTH = 4
    SOUTH_EAST = 5


# unit steps in axial (q, r) coordinates, indexed by HexDirection
# fmt: off
HEX_OFFSETS: tuple[tuple[int, int], ...] = (
    ( 1,  0),
    ( 0,  1),
    (-1,  1),
    (-1,  0),
    ( 0, -1),
    ( 1, -1),
)
# fmt: on

HEX_DIRECTIONS: tuple[HexDirection, ...] = tuple(HexDirection)
