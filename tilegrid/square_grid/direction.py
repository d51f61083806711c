"""The eight directions of a square grid."""

from __future__ import annotations

from enum import IntEnum


class SquareDirection(IntEnum):
    """Directions on a square grid, counter-clockwise starting east.

    Diagonal directions double as the corners of a tile.
    """

    EAST = 0
    NORTH_EAST = 1
    NORTH = 2
    NORTH_WEST = 3
    WEST = 4
    SOUTH_WEST = 5
    SOUTH = 6
    SOUTH_EAST = 7

    @property
    def is_cardinal(self) -> bool:
        """Whether this is one of the four orthogonal directions."""
        return self.value % 2 == 0

    def opposite(self) -> SquareDirection:
        """The direction pointing the other way."""
        return SquareDirection((self.value + 4) % 8)

    def rotate(self, steps: int) -> SquareDirection:
        """Rotate counter-clockwise by ``steps`` multiples of 45 degrees."""
        return SquareDirection((self.value + steps) % 8)


# fmt: off
SQUARE_OFFSETS: tuple[tuple[int, int], ...] = (
    ( 1,  0),   # EAST
    ( 1,  1),   # NORTH_EAST
    ( 0,  1),   # NORTH
    (-1,  1),   # NORTH_WEST
    (-1,  0),   # WEST
    (-1, -1),   # SOUTH_WEST
    ( 0, -1),   # SOUTH
    ( 1, -1),   # SOUTH_EAST
)
# fmt: on

SQUARE_DIRECTIONS: tuple[SquareDirection, ...] = tuple(SquareDirection)
CARDINAL_SQUARE_DIRECTIONS: tuple[SquareDirection, ...] = tuple(
    d for d in SquareDirection if d.is_cardinal
)
DIAGONAL_SQUARE_DIRECTIONS: tuple[SquareDirection, ...] = tuple(
    d for d in SquareDirection if not d.is_cardinal
)
