import tilegrid


class TileGridError(Exception):
    """Base class for all tilegrid-specific exceptions.
    It automatically appends the tilegrid version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.tilegrid_version = getattr(tilegrid, "__version__", "unknown")
        # Store the original message cleanly for programmatic access
        self.original_message = message
        full_message = f"[tilegrid {self.tilegrid_version}] {message}"
        super().__init__(full_message)


# Configuration Errors
class ConfigurationError(TileGridError):
    """Raised when map parameters are invalid or missing.

    Examples: a zero or negative grid cell size, or a map size with no cells.
    """

    def __init__(self, param_name: str = None, reason: str = None):
        # Allow flexible usage: raise ConfigurationError("Generic message")
        # OR: raise ConfigurationError("grid_size", "must be positive")
        if param_name and reason:
            message = f"Invalid configuration for '{param_name}': {reason}"
            self.param_name = param_name
        else:
            message = param_name if param_name else "Invalid configuration"
            self.param_name = None

        super().__init__(message)


# Grid Errors
class GridError(TileGridError):
    """Generic errors related to grids and coordinates."""


class GridDimensionError(GridError):
    """Raised when grid dimensions are invalid.
    Examples: non-positive width/height, or a storage whose size does not
    match the map it is used with.
    """


class OutOfBoundsError(GridError):
    """Raised when a coordinate is used unchecked outside of the map."""

    def __init__(self, pos, dimensions=None):
        self.pos = pos
        self.dimensions = dimensions
        if dimensions is None:
            message = f"Position {pos} has a negative component."
        else:
            message = f"Position {pos} is out of bounds for grid dimensions {dimensions}."
        super().__init__(message)


class InvalidCoordinateError(GridError):
    """Raised when a cube coordinate does not satisfy ``q + r + s == 0``."""

    def __init__(self, q, r, s):
        self.q, self.r, self.s = q, r, s
        message = f"Cube coordinate ({q}, {r}, {s}) does not sum to zero."
        super().__init__(message)
