"""Infinite line stored as the implicit equation ``a*x + b*y + c = 0``.

Every test here is exact integer arithmetic. Python integers do not
overflow, so products of coefficients and coordinates stay exact for any
input magnitude.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .vector import Vector

if TYPE_CHECKING:
    from .point import Point
    from .ray import Ray
    from .segment import Segment


@dataclass
class Line:
    """Line with integer coefficients ``(a, b, c)``.

    A well-formed line has ``(a, b) != (0, 0)``. The degenerate all-zero
    line (built from two equal points) satisfies every point and is kept
    as is, since the predicates built on top of it rely on that.
    """

    a: int = 0
    b: int = 0
    c: int = 0

    @classmethod
    def through(cls, begin: Point, end: Point) -> Line:
        """Line passing through two points.

        Args:
            begin: First point
            end: Second point

        Returns:
            Line with ``a = dy``, ``b = -dx`` and ``c`` chosen so both
            points satisfy the equation
        """
        return cls(
            end.y - begin.y,
            begin.x - end.x,
            end.x * begin.y - begin.x * end.y,
        )

    @classmethod
    def from_ray(cls, ray: Ray) -> Line:
        """Supporting line of a ray."""
        a = ray.direction.y
        b = -ray.direction.x
        return cls(a, b, -a * ray.begin.x - b * ray.begin.y)

    @property
    def abc(self) -> tuple[int, int, int]:
        return (self.a, self.b, self.c)

    @property
    def normal(self) -> Vector:
        return Vector(self.a, self.b)

    def put_point_into_equation(self, point: Point) -> int:
        """Evaluate ``a*x + b*y + c`` at ``point``.

        The sign tells which half-plane the point is in; zero means the
        point is on the line.
        """
        return self.a * point.x + self.b * point.y + self.c

    def move(self, vector: Vector) -> Line:
        self.c -= self.a * vector.x + self.b * vector.y
        return self

    def contains_point(self, point: Point) -> bool:
        return self.put_point_into_equation(point) == 0

    def crosses_segment(self, segment: Segment) -> bool:
        """True if the segment's endpoints are not strictly on one side."""
        return (
            self.put_point_into_equation(segment.begin)
            * self.put_point_into_equation(segment.end)
            <= 0
        )

    def is_parallel(self, other: Line) -> bool:
        return self.normal.cross(other.normal) == 0

    def is_same(self, other: Line) -> bool:
        """True if both equations describe the same set of points.

        That holds when ``(a, b, c)`` of one line is a scalar multiple of
        the other's.
        """
        return (
            self.is_parallel(other)
            and self.a * other.c == other.a * self.c
            and self.b * other.c == other.b * self.c
        )

    def is_distance_equal_radius(self, other: Line, radius: int) -> bool:
        """True if ``other`` lies no farther than ``radius`` from this line.

        Compares squared quantities so no square root is taken:
        ``(c1 - c2)^2 <= r^2 * (a^2 + b^2)``. Only meaningful when both lines
        share the same ``(a, b)``, as they do when one is built parallel to
        the other through a reference point.

        Args:
            other: Line parallel to this one with identical ``(a, b)``
            radius: Non-negative distance bound

        Returns:
            Whether the perpendicular distance is within ``radius``; always
            False for a zero radius
        """
        if radius == 0:
            return False
        gap = self.c - other.c
        return gap * gap <= radius * radius * (self.a * self.a + self.b * self.b)

    def clone(self) -> Line:
        return Line(self.a, self.b, self.c)

    def __str__(self) -> str:
        return f"Line({self.a}, {self.b}, {self.c})"
