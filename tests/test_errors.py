"""Tests for the tilegrid exception hierarchy."""

import pytest

import tilegrid
from tilegrid.errors import (
    ConfigurationError,
    GridDimensionError,
    GridError,
    InvalidCoordinateError,
    OutOfBoundsError,
    TileGridError,
)


def test_version_prefix():
    """Test messages carry the library version."""
    error = TileGridError("something broke")
    assert str(error) == f"[tilegrid {tilegrid.__version__}] something broke"
    assert error.original_message == "something broke"
    assert error.tilegrid_version == tilegrid.__version__


@pytest.mark.parametrize(
    "error_type",
    [ConfigurationError, GridError, GridDimensionError, OutOfBoundsError, InvalidCoordinateError],
)
def test_hierarchy(error_type):
    """Test every error derives from TileGridError."""
    assert issubclass(error_type, TileGridError)


def test_configuration_error_forms():
    """Test the generic and the parameter specific form."""
    error = ConfigurationError("grid_size", "must be positive")
    assert error.param_name == "grid_size"
    assert "Invalid configuration for 'grid_size': must be positive" in str(error)

    error = ConfigurationError("map is empty")
    assert error.param_name is None
    assert error.original_message == "map is empty"

    assert ConfigurationError().original_message == "Invalid configuration"


def test_out_of_bounds_messages():
    """Test out of bounds errors with and without dimensions."""
    error = OutOfBoundsError((3, 0), (2, 2))
    assert error.pos == (3, 0)
    assert error.dimensions == (2, 2)
    assert "out of bounds for grid dimensions (2, 2)" in str(error)

    error = OutOfBoundsError((-1, 0))
    assert error.dimensions is None
    assert "negative component" in str(error)
    assert isinstance(error, GridError)


def test_invalid_coordinate():
    """Test the cube coordinate is kept on the error."""
    error = InvalidCoordinateError(1, 1, 1)
    assert (error.q, error.r, error.s) == (1, 1, 1)
    assert "does not sum to zero" in str(error)
