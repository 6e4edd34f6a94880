"""Circle with an integer center and radius."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .line import Line
from .point import Point
from .vector import Vector

if TYPE_CHECKING:
    from .segment import Segment


@dataclass
class Circle:
    """Closed disk of ``radius`` around ``center``; radius 0 is a point."""

    center: Point = field(default_factory=Point)
    radius: int = 0

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError(f"Circle radius must be non-negative, got {self.radius}")
        self.center = Point(self.center.x, self.center.y)

    def _distance_sq(self, point: Point) -> int:
        offset = point - self.center
        return offset.dot(offset)

    def move(self, vector: Vector) -> Circle:
        self.center.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        return self._distance_sq(point) <= self.radius * self.radius

    def contains_point_in_perimeter(self, point: Point) -> bool:
        """True if ``point`` lies exactly on the circle's boundary."""
        return self._distance_sq(point) == self.radius * self.radius

    def crosses_segment(self, segment: Segment) -> bool:
        """True if the segment touches the disk.

        Checks run in a fixed order: an endpoint on the perimeter, then a
        single endpoint inside, then the two-endpoints-outside cases. The
        distance test at the end assumes both endpoints are outside.

        Args:
            segment: Segment to test

        Returns:
            Whether any point of the segment is in the disk
        """
        begin, end = segment.begin, segment.end
        if self.contains_point_in_perimeter(begin) or self.contains_point_in_perimeter(end):
            return True

        begin_inside = self.contains_point(begin)
        end_inside = self.contains_point(end)
        if begin_inside != end_inside:
            return True
        if begin_inside and end_inside:
            return False

        direction = segment.direction
        center_line = Line.through(self.center, self.center + direction)
        segment_line = Line.through(begin, end)
        to_begin = begin - self.center
        to_end = end - self.center

        if center_line.is_same(segment_line):
            return to_begin.dot(to_end) < 0

        if not center_line.is_distance_equal_radius(segment_line, self.radius):
            return False

        # Segments that stop short of the disk are rejected: the foot of the
        # perpendicular from the center must fall strictly between the ends.
        return to_begin.dot(direction) < 0 < to_end.dot(direction)

    def clone(self) -> Circle:
        return Circle(self.center, self.radius)

    def __str__(self) -> str:
        return f"Circle({self.center}, {self.radius})"
