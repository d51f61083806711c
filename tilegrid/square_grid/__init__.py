"""Square grids and the two isometric layouts built on top of them.

- SquarePos: orthogonal grid, world = (gx * x, gy * y)
- DiamondPos: the same coordinates rotated by 45 degrees
- StaggeredPos: square coordinates with a shear along y, placed like a diamond grid
- Neighbors: 4/8-connected neighborhoods for all three
"""

from tilegrid.square_grid.diamond import DiamondPos, diamond_offset
from tilegrid.square_grid.direction import (
    CARDINAL_SQUARE_DIRECTIONS,
    DIAGONAL_SQUARE_DIRECTIONS,
    SQUARE_DIRECTIONS,
    SQUARE_OFFSETS,
    SquareDirection,
)
from tilegrid.square_grid.neighbors import Neighbors
from tilegrid.square_grid.square import SquarePos, square_offset
from tilegrid.square_grid.staggered import StaggeredPos, staggered_offset

__all__ = [
    "CARDINAL_SQUARE_DIRECTIONS",
    "DIAGONAL_SQUARE_DIRECTIONS",
    "SQUARE_DIRECTIONS",
    "SQUARE_OFFSETS",
    "DiamondPos",
    "Neighbors",
    "SquareDirection",
    "SquarePos",
    "StaggeredPos",
    "diamond_offset",
    "square_offset",
    "staggered_offset",
]
