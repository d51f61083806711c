"""Tests for TileStorage."""

import pytest

from tilegrid.errors import GridDimensionError, OutOfBoundsError
from tilegrid.map import TilemapSize
from tilegrid.tiles import TilePos, TileStorage


@pytest.fixture
def storage():
    """A 3x2 storage with nothing in it."""
    return TileStorage.empty(TilemapSize(3, 2))


def test_empty_storage(storage):
    """Test a new storage has one empty slot per tile."""
    assert len(storage) == 6
    assert list(storage.iter()) == [None] * 6
    assert list(storage.items()) == []
    assert storage.size == TilemapSize(3, 2)


@pytest.mark.parametrize(
    "size", [TilemapSize(-2, 3), TilemapSize(0, 4), TilemapSize(3, 0), TilemapSize(2.5, 2)]
)
def test_invalid_dimensions(size):
    """Test a storage needs positive integer dimensions."""
    with pytest.raises(GridDimensionError):
        TileStorage(size)


def test_set_and_get(storage):
    """Test handles are stored by position."""
    storage.set(TilePos(2, 1), "a")
    storage[TilePos(0, 1)] = "b"
    assert storage.get(TilePos(2, 1)) == "a"
    assert storage[TilePos(0, 1)] == "b"
    assert storage.get(TilePos(0, 0)) is None
    assert list(storage.iter()) == [None, None, None, "b", None, "a"]


def test_set_replaces(storage):
    """Test setting a position twice keeps the last handle."""
    storage.set(TilePos(1, 1), "a")
    storage.set(TilePos(1, 1), "b")
    assert storage.get(TilePos(1, 1)) == "b"


def test_unchecked_access_out_of_bounds(storage):
    """Test unchecked access outside of the map raises."""
    with pytest.raises(OutOfBoundsError):
        storage.get(TilePos(3, 0))
    with pytest.raises(OutOfBoundsError):
        storage.set(TilePos(0, 2), "a")
    with pytest.raises(OutOfBoundsError):
        storage.remove(TilePos(5, 5))
    with pytest.raises(OutOfBoundsError):
        _ = storage[TilePos(3, 2)]


def test_checked_access_out_of_bounds(storage):
    """Test checked access outside of the map is quiet."""
    assert storage.checked_get(TilePos(3, 0)) is None
    storage.checked_set(TilePos(3, 0), "a")
    assert list(storage.items()) == []
    assert storage.checked_remove(TilePos(0, 2)) is None


def test_checked_access_in_bounds(storage):
    """Test checked access inside the map behaves like unchecked access."""
    storage.checked_set(TilePos(1, 0), "a")
    assert storage.checked_get(TilePos(1, 0)) == "a"
    assert storage.checked_remove(TilePos(1, 0)) == "a"
    assert storage.checked_get(TilePos(1, 0)) is None


def test_remove(storage):
    """Test removing returns the handle and empties the slot."""
    storage.set(TilePos(0, 0), "a")
    assert storage.remove(TilePos(0, 0)) == "a"
    assert storage.get(TilePos(0, 0)) is None
    assert storage.remove(TilePos(0, 0)) is None


def test_items(storage):
    """Test items yields occupied positions in row-major order."""
    storage.set(TilePos(2, 1), "c")
    storage.set(TilePos(1, 0), "a")
    storage.set(TilePos(0, 1), "b")
    assert list(storage.items()) == [
        (TilePos(1, 0), "a"),
        (TilePos(0, 1), "b"),
        (TilePos(2, 1), "c"),
    ]


def test_drain(storage):
    """Test drain yields every handle and leaves the storage empty."""
    storage.set(TilePos(0, 0), "a")
    storage.set(TilePos(2, 1), "b")
    assert list(storage.drain()) == ["a", "b"]
    assert list(storage.iter()) == [None] * 6


def test_drain_clears_as_it_goes(storage):
    """Test drain only clears the slots it has yielded so far."""
    storage.set(TilePos(0, 0), "a")
    storage.set(TilePos(2, 1), "b")
    drain = storage.drain()
    assert next(drain) == "a"
    assert storage.get(TilePos(0, 0)) is None
    assert storage.get(TilePos(2, 1)) == "b"


def test_map_handles(storage):
    """Test every stored handle is remapped and empty slots stay empty."""
    storage.set(TilePos(0, 0), 1)
    storage.set(TilePos(1, 1), 2)
    storage.map_handles(lambda h: h * 10)
    assert storage.get(TilePos(0, 0)) == 10
    assert storage.get(TilePos(1, 1)) == 20
    assert storage.get(TilePos(2, 0)) is None


def test_repr(storage):
    """Test the repr shows size and occupancy."""
    storage.set(TilePos(0, 0), "a")
    assert "occupied=1" in repr(storage)
