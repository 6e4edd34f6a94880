"""Free 2D vectors with exact integer arithmetic.

The cross product sign convention is shared by every orientation test in
the package: ``u.cross(v) > 0`` when ``v`` is counter-clockwise from ``u``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .point import Point


@dataclass(frozen=True)
class Vector:
    """Free vector (no position) with integer components."""

    x: int = 0
    y: int = 0

    @classmethod
    def between(cls, begin: Point, end: Point) -> Vector:
        """Vector pointing from ``begin`` to ``end``."""
        return cls(end.x - begin.x, end.y - begin.y)

    @classmethod
    def from_point(cls, point: Point) -> Vector:
        """Radius vector of a point (from the origin)."""
        return cls(point.x, point.y)

    def dot(self, other: Vector) -> int:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> int:
        """Signed area of the parallelogram spanned by the two vectors."""
        return self.x * other.y - self.y * other.x

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: int) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: int) -> Vector:
        return self.__mul__(scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __str__(self) -> str:
        return f"Vector({self.x}, {self.y})"


def determinant(first: tuple[int, int], second: tuple[int, int]) -> int:
    """Determinant of the 2x2 matrix whose rows are ``first`` and ``second``.

    Equivalent to ``Vector(*first).cross(Vector(*second))``; kept as a plain
    function because Cramer's rule feeds it coefficient pairs, not vectors.
    """
    return first[0] * second[1] - first[1] * second[0]
