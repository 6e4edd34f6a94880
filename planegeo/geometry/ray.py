"""Ray: a begin point plus a direction, extending forward only."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .line import Line
from .point import Point
from .vector import Vector, determinant

if TYPE_CHECKING:
    from .segment import Segment


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (Python's ``//`` floors)."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass
class Ray:
    """Half-line starting at ``begin`` and following ``direction``.

    The direction is not normalized. A zero direction does not advance, so
    such a ray behaves as its begin point.
    """

    begin: Point = field(default_factory=Point)
    direction: Vector = field(default_factory=Vector)

    def __post_init__(self):
        self.begin = Point(self.begin.x, self.begin.y)

    @classmethod
    def through(cls, begin: Point, point: Point) -> Ray:
        """Ray from ``begin`` heading toward ``point``."""
        return cls(begin, point - begin)

    def supporting_line(self) -> Line:
        return Line.from_ray(self)

    def move(self, vector: Vector) -> Ray:
        self.begin.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        """True if ``point`` is on the supporting line, at or ahead of begin."""
        if self.direction.is_zero():
            return self.begin.contains_point(point)
        if not self.supporting_line().contains_point(point):
            return False
        return (point - self.begin).dot(self.direction) >= 0

    def crosses_segment(self, segment: Segment) -> bool:
        """True if the ray meets ``segment``.

        The intersection of the two supporting lines comes from Cramer's rule
        and is truncated toward zero before the forward-half test.

        Args:
            segment: Segment to test against

        Returns:
            Whether the segment touches the forward half of the ray
        """
        if self.direction.is_zero():
            return segment.contains_point(self.begin)

        ray_line = self.supporting_line()
        segment_line = segment.supporting_line()
        if not ray_line.crosses_segment(segment):
            return False

        if ray_line.is_same(segment_line):
            return self.contains_point(segment.begin) or self.contains_point(segment.end)

        a1, b1, c1 = ray_line.abc
        a2, b2, c2 = segment_line.abc
        denominator = -determinant((a1, b1), (a2, b2))
        if denominator == 0:
            return False
        x_numerator = determinant((c1, b1), (c2, b2))
        y_numerator = determinant((a1, c1), (a2, c2))

        intersection = Point(
            _trunc_div(x_numerator, denominator),
            _trunc_div(y_numerator, denominator),
        )
        return (intersection - self.begin).dot(self.direction) >= 0

    def clone(self) -> Ray:
        return Ray(self.begin, self.direction)

    def __str__(self) -> str:
        return f"Ray({self.begin}, {self.direction})"
