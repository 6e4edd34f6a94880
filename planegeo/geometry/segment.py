"""Closed line segment between two integer points."""

from __future__ import annotations

from dataclasses import dataclass, field

from .line import Line
from .point import Point
from .vector import Vector


@dataclass
class Segment:
    """Segment from ``begin`` to ``end``, both endpoints included.

    The endpoints are copied on construction, so translating the segment
    never touches the points it was built from. A segment whose endpoints
    coincide behaves as a single point.
    """

    begin: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)

    def __post_init__(self):
        self.begin = Point(self.begin.x, self.begin.y)
        self.end = Point(self.end.x, self.end.y)

    @property
    def direction(self) -> Vector:
        return self.end - self.begin

    def supporting_line(self) -> Line:
        return Line.through(self.begin, self.end)

    def move(self, vector: Vector) -> Segment:
        self.begin.move(vector)
        self.end.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        """True if ``point`` is collinear with the segment and between its ends.

        The dot product of the vectors from the point to both ends is
        negative strictly inside the segment and zero at an endpoint.
        """
        to_begin = point - self.begin
        to_end = point - self.end
        return to_begin.cross(to_end) == 0 and to_begin.dot(to_end) <= 0

    def crosses_segment(self, segment: Segment) -> bool:
        """True if the two segments share at least one point.

        Touching at an endpoint counts as crossing.

        Args:
            segment: The other segment

        Returns:
            Whether the segments intersect
        """
        own_line = self.supporting_line()
        other_line = segment.supporting_line()
        if not (own_line.crosses_segment(segment) and other_line.crosses_segment(self)):
            return False

        if self.contains_point(segment.begin) or self.contains_point(segment.end):
            return True

        # Collinear: the line tests pass for any two segments on one line,
        # so the other segment must straddle this one to cross it.
        if own_line.contains_point(segment.begin) and own_line.contains_point(segment.end):
            from_begin = Vector.between(self.begin, segment.begin)
            from_end = Vector.between(self.end, segment.end)
            return from_begin.dot(from_end) <= 0

        return True

    def clone(self) -> Segment:
        return Segment(self.begin, self.end)

    def __str__(self) -> str:
        return f"Segment({self.begin}, {self.end})"
