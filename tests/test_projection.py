"""Tests for the projection between tile positions and world space."""

import logging

import numpy as np
import pytest

from tilegrid.anchor import TilemapAnchor
from tilegrid.map import (
    HexCoordSystem,
    Hexagon,
    IsoCoordSystem,
    Isometric,
    Square,
    TilemapGridSize,
    TilemapSize,
    TilemapTileSize,
)
from tilegrid.projection import (
    center_in_world,
    center_in_world_unanchored,
    coord_to_world,
    from_world_pos,
    from_world_pos_unanchored,
    world_to_coord,
)
from tilegrid.tiles import TilePos

MAP_TYPES = [
    Square(),
    *(Hexagon(coord_system) for coord_system in HexCoordSystem),
    Isometric(IsoCoordSystem.DIAMOND),
    Isometric(IsoCoordSystem.STAGGERED),
]

ANCHORS = [
    TilemapAnchor.NONE,
    TilemapAnchor.CENTER,
    TilemapAnchor.BOTTOM_LEFT,
    TilemapAnchor.TOP_RIGHT,
    TilemapAnchor.custom(0.3, -0.1),
]

MAP_SIZE = TilemapSize(10, 10)


@pytest.mark.parametrize(
    "tile_pos,grid_size,tile_size,map_type",
    [
        (TilePos(4, 6), TilemapGridSize(16, 16), TilemapTileSize(16, 16), Square()),
        (
            TilePos(2, 5),
            TilemapGridSize(30, 26),
            TilemapTileSize(30, 34),
            Hexagon(HexCoordSystem.ROW_EVEN),
        ),
        (
            TilePos(1, 8),
            TilemapGridSize(32, 16),
            TilemapTileSize(32, 32),
            Isometric(IsoCoordSystem.DIAMOND),
        ),
    ],
)
def test_round_trip_bottom_left(tile_pos, grid_size, tile_size, map_type):
    """Test known tiles survive a trip through world space."""
    anchor = TilemapAnchor.BOTTOM_LEFT
    world = center_in_world(tile_pos, MAP_SIZE, grid_size, tile_size, map_type, anchor)
    found = from_world_pos(world, MAP_SIZE, grid_size, tile_size, map_type, anchor)
    assert found == tile_pos


@pytest.mark.parametrize("map_type", MAP_TYPES)
@pytest.mark.parametrize("anchor", ANCHORS)
def test_round_trip_every_tile(map_type, anchor):
    """Test every tile of a map survives a trip through world space."""
    grid_size = TilemapGridSize(30.0, 26.0)
    tile_size = TilemapTileSize(32.0, 32.0)
    for x in range(MAP_SIZE.x):
        for y in range(MAP_SIZE.y):
            tile_pos = TilePos(x, y)
            world = center_in_world(
                tile_pos, MAP_SIZE, grid_size, tile_size, map_type, anchor
            )
            assert (
                from_world_pos(world, MAP_SIZE, grid_size, tile_size, map_type, anchor)
                == tile_pos
            )


@pytest.mark.parametrize("map_type", MAP_TYPES)
def test_round_trip_random_sizes(map_type):
    """Test round trips for random map, grid and tile sizes."""
    rng = np.random.default_rng(42)
    for _ in range(20):
        map_size = TilemapSize(*(int(v) for v in rng.integers(1, 21, size=2)))
        grid_size = TilemapGridSize(*rng.uniform(0.5, 4.0, size=2))
        tile_size = TilemapTileSize(*rng.uniform(0.5, 4.0, size=2))
        anchor = TilemapAnchor.custom(*rng.uniform(-0.5, 0.5, size=2))
        tile_pos = TilePos(
            int(rng.integers(0, map_size.x)), int(rng.integers(0, map_size.y))
        )
        world = center_in_world(
            tile_pos, map_size, grid_size, tile_size, map_type, anchor
        )
        assert (
            from_world_pos(world, map_size, grid_size, tile_size, map_type, anchor)
            == tile_pos
        )


def test_square_positions():
    """Test concrete world positions on a square map."""
    grid_size = TilemapGridSize(16, 16)
    tile_size = TilemapTileSize(16, 16)

    def world(tile_pos, anchor):
        return center_in_world(
            tile_pos, MAP_SIZE, grid_size, tile_size, Square(), anchor
        )

    np.testing.assert_allclose(world(TilePos(0, 0), TilemapAnchor.NONE), [0, 0])
    np.testing.assert_allclose(world(TilePos(0, 0), TilemapAnchor.BOTTOM_LEFT), [8, 8])
    np.testing.assert_allclose(world(TilePos(0, 0), TilemapAnchor.CENTER), [-72, -72])
    np.testing.assert_allclose(world(TilePos(9, 9), TilemapAnchor.TOP_RIGHT), [-8, -8])


def test_unanchored_matches_none_anchor():
    """Test the unanchored projection is the projection without an anchor."""
    grid_size = TilemapGridSize(30.0, 26.0)
    tile_size = TilemapTileSize(30.0, 26.0)
    for map_type in MAP_TYPES:
        tile_pos = TilePos(3, 7)
        np.testing.assert_allclose(
            center_in_world_unanchored(tile_pos, grid_size, map_type),
            center_in_world(
                tile_pos, MAP_SIZE, grid_size, tile_size, map_type, TilemapAnchor.NONE
            ),
        )


def test_boundary_tie_break():
    """Test a world position on a cell boundary belongs to the next tile."""
    grid_size = TilemapGridSize(16, 16)
    assert from_world_pos_unanchored([8.0, 0.0], MAP_SIZE, grid_size, Square()) == TilePos(1, 0)
    assert from_world_pos_unanchored([7.9, 0.0], MAP_SIZE, grid_size, Square()) == TilePos(0, 0)


@pytest.mark.parametrize("map_type", MAP_TYPES)
def test_off_map_is_none(map_type):
    """Test positions far outside of the map resolve to None."""
    grid_size = TilemapGridSize(16, 16)
    tile_size = TilemapTileSize(16, 16)
    for world in ([-1000.0, -1000.0], [1000.0, 1000.0], [-1000.0, 1000.0]):
        assert (
            from_world_pos(
                world, MAP_SIZE, grid_size, tile_size, map_type, TilemapAnchor.NONE
            )
            is None
        )


def test_off_map_is_logged(caplog):
    """Test an off-map lookup is logged at debug level."""
    caplog.set_level(logging.DEBUG, logger="TILEGRID")
    grid_size = TilemapGridSize(16, 16)
    tile_size = TilemapTileSize(16, 16)
    result = from_world_pos(
        [-100.0, 0.0], MAP_SIZE, grid_size, tile_size, Square(), TilemapAnchor.NONE
    )
    assert result is None
    assert any("outside of" in record.getMessage() for record in caplog.records)


def test_aliases():
    """Test the coord/world aliases are the projection functions."""
    assert coord_to_world is center_in_world
    assert world_to_coord is from_world_pos


def test_unknown_map_type():
    """Test an unknown map type is rejected."""
    grid_size = TilemapGridSize(16, 16)
    with pytest.raises(TypeError):
        center_in_world_unanchored(TilePos(0, 0), grid_size, "square")
    with pytest.raises(TypeError):
        from_world_pos_unanchored([0, 0], MAP_SIZE, grid_size, "square")
