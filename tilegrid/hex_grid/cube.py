"""Cube coordinates for hexagonal grids.

Cube coordinates carry a redundant third axis, ``s = -q - r``. The symmetry
between the three axes makes distances, rotations and rounding simple.

Refer https://www.redblobgames.com/grids/hexagons/#coordinates-cube for more detail
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tilegrid.errors import InvalidCoordinateError


@dataclass(frozen=True, slots=True, order=True)
class CubePos:
    """Integer cube coordinate, ``q + r + s == 0``.

    Raises:
        InvalidCoordinateError: if the components do not sum to zero
    """

    q: int
    r: int
    s: int

    def __post_init__(self):  # noqa: D105
        if self.q + self.r + self.s != 0:
            raise InvalidCoordinateError(self.q, self.r, self.s)

    def add(self, other: CubePos) -> CubePos:
        """Componentwise sum."""
        return CubePos(self.q + other.q, self.r + other.r, self.s + other.s)

    def sub(self, other: CubePos) -> CubePos:
        """Componentwise difference."""
        return CubePos(self.q - other.q, self.r - other.r, self.s - other.s)

    def scale(self, factor: int) -> CubePos:
        """All components multiplied by ``factor``."""
        factor = int(factor)
        return CubePos(factor * self.q, factor * self.r, factor * self.s)

    def __add__(self, other: CubePos) -> CubePos:
        """Same as :meth:`add`."""
        return self.add(other)

    def __sub__(self, other: CubePos) -> CubePos:
        """Same as :meth:`sub`."""
        return self.sub(other)

    def __mul__(self, factor: int) -> CubePos:
        """Same as :meth:`scale`."""
        if not isinstance(factor, int):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def magnitude(self) -> int:
        """Number of hex steps from the origin."""
        return max(abs(self.q), abs(self.r), abs(self.s))

    def distance_from(self, other: CubePos) -> int:
        """Number of hex steps between ``self`` and ``other``."""
        return (self - other).magnitude()

    def rotate_left(self) -> CubePos:
        """Rotate 60 degrees counter-clockwise around the origin."""
        return CubePos(-self.r, -self.s, -self.q)

    def rotate_right(self) -> CubePos:
        """Rotate 60 degrees clockwise around the origin."""
        return CubePos(-self.s, -self.q, -self.r)


@dataclass(frozen=True, slots=True)
class FractionalCubePos:
    """Continuous cube coordinate, typically the result of an inverse projection."""

    q: float
    r: float
    s: float

    @classmethod
    def from_axial(cls, q: float, r: float) -> FractionalCubePos:
        """Fractional cube coordinates of a fractional axial point."""
        return cls(q, r, -q - r)

    def round(self) -> CubePos:
        """Snap to the nearest hex.

        Each component is rounded on its own, then the one that moved the
        most is recomputed from the other two so the sum is zero again.
        """
        q = math.floor(self.q + 0.5)
        r = math.floor(self.r + 0.5)
        s = math.floor(self.s + 0.5)

        q_diff = abs(q - self.q)
        r_diff = abs(r - self.r)
        s_diff = abs(s - self.s)

        if q_diff > r_diff and q_diff > s_diff:
            q = -r - s
        elif r_diff > s_diff:
            r = -q - s
        else:
            s = -q - r

        return CubePos(q, r, s)
