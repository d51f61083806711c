"""Tests for square, diamond and staggered positions."""

import numpy as np
import pytest

from tilegrid.map import TilemapGridSize, TilemapSize
from tilegrid.square_grid import (
    CARDINAL_SQUARE_DIRECTIONS,
    DIAGONAL_SQUARE_DIRECTIONS,
    SQUARE_DIRECTIONS,
    DiamondPos,
    SquareDirection,
    SquarePos,
    StaggeredPos,
    diamond_offset,
    square_offset,
    staggered_offset,
)
from tilegrid.tiles import TilePos


class TestSquareDirection:
    """Tests for SquareDirection."""

    def test_cardinal_and_diagonal(self):
        """Test the split into cardinal and diagonal directions."""
        assert CARDINAL_SQUARE_DIRECTIONS == (
            SquareDirection.EAST,
            SquareDirection.NORTH,
            SquareDirection.WEST,
            SquareDirection.SOUTH,
        )
        assert len(DIAGONAL_SQUARE_DIRECTIONS) == 4
        assert set(CARDINAL_SQUARE_DIRECTIONS) | set(DIAGONAL_SQUARE_DIRECTIONS) == set(
            SQUARE_DIRECTIONS
        )

    def test_opposite(self):
        """Test opposite directions."""
        assert SquareDirection.EAST.opposite() == SquareDirection.WEST
        assert SquareDirection.NORTH_EAST.opposite() == SquareDirection.SOUTH_WEST
        for direction in SQUARE_DIRECTIONS:
            assert direction.opposite().opposite() == direction

    def test_rotate(self):
        """Test rotation counter-clockwise in steps of 45 degrees."""
        assert SquareDirection.EAST.rotate(2) == SquareDirection.NORTH
        assert SquareDirection.NORTH_EAST.rotate(2) == SquareDirection.NORTH_WEST
        assert SquareDirection.EAST.rotate(-1) == SquareDirection.SOUTH_EAST


class TestSquarePos:
    """Tests for SquarePos."""

    def test_arithmetic(self):
        """Test vector-like arithmetic."""
        a = SquarePos(1, 2)
        b = SquarePos(3, -1)
        assert a + b == SquarePos(4, 1)
        assert a - b == SquarePos(-2, 3)
        assert a.add(b) == a + b
        assert a.sub(b) == a - b
        assert 3 * SquarePos(1, -2) == SquarePos(3, -6)
        assert SquarePos(1, -2) * 3 == SquarePos(1, -2).scale(3)
        assert -a == SquarePos(-1, -2)

    def test_center_in_world(self):
        """Test world placement of tile centers."""
        grid_size = TilemapGridSize(10.0, 20.0)
        np.testing.assert_allclose(SquarePos(3, 4).center_in_world(grid_size), [30, 80])
        np.testing.assert_allclose(SquarePos(0, 0).center_in_world(grid_size), [0, 0])

    def test_corners(self):
        """Test corner positions around a tile."""
        grid_size = TilemapGridSize(10.0, 20.0)
        np.testing.assert_allclose(
            SquarePos.corner_offset_in_world(SquareDirection.NORTH_EAST, grid_size),
            [5, 10],
        )
        np.testing.assert_allclose(
            SquarePos(1, 1).corner_in_world(SquareDirection.SOUTH_WEST, grid_size),
            [5, 10],
        )

    def test_from_world_pos_tie_break(self):
        """Test positions on a cell boundary resolve towards positive axes."""
        grid_size = TilemapGridSize(10.0, 10.0)
        assert SquarePos.from_world_pos([5.0, 0.0], grid_size) == SquarePos(1, 0)
        assert SquarePos.from_world_pos([4.99, 0.0], grid_size) == SquarePos(0, 0)
        assert SquarePos.from_world_pos([-5.0, 0.0], grid_size) == SquarePos(0, 0)
        assert SquarePos.from_world_pos([-5.01, 0.0], grid_size) == SquarePos(-1, 0)

    def test_as_tile_pos(self):
        """Test conversion into tile positions."""
        size = TilemapSize(3, 3)
        assert SquarePos(2, 1).as_tile_pos(size) == TilePos(2, 1)
        assert SquarePos(-1, 1).as_tile_pos(size) is None
        assert SquarePos(3, 1).as_tile_pos(size) is None

    def test_offset(self):
        """Test single steps."""
        assert SquarePos(1, 1).offset(SquareDirection.NORTH_WEST) == SquarePos(0, 2)
        size = TilemapSize(2, 2)
        assert square_offset(TilePos(0, 0), SquareDirection.EAST, size) == TilePos(1, 0)
        assert square_offset(TilePos(0, 0), SquareDirection.WEST, size) is None


class TestDiamondPos:
    """Tests for DiamondPos."""

    def test_unit_steps(self):
        """Test the world images of the unit steps."""
        grid_size = TilemapGridSize(2.0, 2.0)
        np.testing.assert_allclose(DiamondPos(1, 0).center_in_world(grid_size), [1, -1])
        np.testing.assert_allclose(DiamondPos(0, 1).center_in_world(grid_size), [1, 1])

    def test_projection_formula(self):
        """Test the projection against its closed form."""
        rng = np.random.default_rng(42)
        for _ in range(50):
            x, y = rng.integers(-20, 20, size=2)
            gx, gy = rng.uniform(0.5, 64.0, size=2)
            grid_size = TilemapGridSize(gx, gy)
            np.testing.assert_allclose(
                DiamondPos(int(x), int(y)).center_in_world(grid_size),
                [gx * (x + y) / 2, gy * (y - x) / 2],
                atol=1e-6,
            )

    def test_world_round_trip(self):
        """Test every center maps back to its own tile."""
        rng = np.random.default_rng(7)
        for _ in range(200):
            x, y = (int(v) for v in rng.integers(-50, 50, size=2))
            grid_size = TilemapGridSize(*rng.uniform(0.5, 64.0, size=2))
            pos = DiamondPos(x, y)
            assert DiamondPos.from_world_pos(pos.center_in_world(grid_size), grid_size) == pos

    def test_same_coordinates_as_square(self):
        """Test diamond and square coordinates convert one to one."""
        assert DiamondPos(3, -2).to_square() == SquarePos(3, -2)
        assert DiamondPos.from_square(SquarePos(3, -2)) == DiamondPos(3, -2)

    def test_corners_are_tile_corners(self):
        """Test a corner lies halfway to the diagonal neighbor."""
        grid_size = TilemapGridSize(64.0, 32.0)
        pos = DiamondPos(2, 3)
        corner = pos.corner_in_world(SquareDirection.NORTH_EAST, grid_size)
        neighbor = pos.offset(SquareDirection.NORTH_EAST).center_in_world(grid_size)
        np.testing.assert_allclose(
            corner, (pos.center_in_world(grid_size) + neighbor) / 2
        )
        np.testing.assert_allclose(
            DiamondPos.corner_offset_in_world(SquareDirection.NORTH_EAST, grid_size),
            corner - pos.center_in_world(grid_size),
        )

    def test_offset(self):
        """Test single steps on a diamond map."""
        size = TilemapSize(3, 3)
        assert diamond_offset(TilePos(1, 1), SquareDirection.NORTH, size) == TilePos(1, 2)
        assert diamond_offset(TilePos(0, 1), SquareDirection.WEST, size) is None


class TestStaggeredPos:
    """Tests for StaggeredPos."""

    def test_square_round_trip(self):
        """Test the shear between staggered and square coordinates is exact."""
        for x in range(-8, 9):
            for y in range(-8, 9):
                pos = StaggeredPos(x, y)
                assert pos.to_square() == SquarePos(x, y + x)
                assert StaggeredPos.from_square(pos.to_square()) == pos
                assert SquarePos.from_staggered(pos) == pos.to_square()

    def test_arithmetic(self):
        """Test addition and subtraction."""
        assert StaggeredPos(1, 2) + StaggeredPos(2, -1) == StaggeredPos(3, 1)
        assert StaggeredPos(1, 2) - StaggeredPos(2, -1) == StaggeredPos(-1, 3)

    def test_projection_goes_through_diamond(self):
        """Test staggered tiles are placed like their sheared diamond tiles."""
        grid_size = TilemapGridSize(64.0, 32.0)
        for x in range(5):
            for y in range(5):
                np.testing.assert_allclose(
                    StaggeredPos(x, y).center_in_world(grid_size),
                    DiamondPos(x, y + x).center_in_world(grid_size),
                )

    def test_world_round_trip(self):
        """Test every center maps back to its own tile."""
        rng = np.random.default_rng(11)
        for _ in range(200):
            x, y = (int(v) for v in rng.integers(-50, 50, size=2))
            grid_size = TilemapGridSize(*rng.uniform(0.5, 64.0, size=2))
            pos = StaggeredPos(x, y)
            world = pos.center_in_world(grid_size)
            assert StaggeredPos.from_world_pos(world, grid_size) == pos

    @pytest.mark.parametrize(
        "direction,expected",
        [
            (SquareDirection.NORTH, TilePos(1, 2)),
            (SquareDirection.EAST, TilePos(2, 0)),
            (SquareDirection.SOUTH, TilePos(1, 0)),
            (SquareDirection.WEST, TilePos(0, 2)),
        ],
    )
    def test_offset(self, direction, expected):
        """Test single steps follow square adjacency."""
        size = TilemapSize(3, 3)
        assert staggered_offset(TilePos(1, 1), direction, size) == expected
