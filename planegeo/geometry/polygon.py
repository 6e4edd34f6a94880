"""Simple polygon given by an ordered list of vertices."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .point import Point
from .ray import Ray
from .segment import Segment
from .vector import Vector

# Ray-casting directions. A point is inside if either cast says so, which
# covers casts that run along an edge or through a vertex.
SKEW_DIRECTION = Vector(13, 2)
HORIZONTAL_DIRECTION = Vector(1, 0)


@dataclass
class Polygon:
    """Polygon whose edges join consecutive vertices, last back to first.

    Self-intersection is not checked.
    """

    vertices: list[Point] = field(default_factory=list)

    def __post_init__(self):
        self.vertices = [Point(p.x, p.y) for p in self.vertices]

    @classmethod
    def from_coords(cls, coords: Iterable[tuple[int, int]]) -> Polygon:
        return cls([Point(x, y) for x, y in coords])

    def __len__(self) -> int:
        return len(self.vertices)

    def edges(self) -> Iterator[Segment]:
        """Yield the edges in vertex order, including the closing edge."""
        count = len(self.vertices)
        for i in range(count):
            yield Segment(self.vertices[i], self.vertices[(i + 1) % count])

    def move(self, vector: Vector) -> Polygon:
        for vertex in self.vertices:
            vertex.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        """True if ``point`` is inside the polygon or on its boundary."""
        return (
            self.contains_point_with_direction(point, HORIZONTAL_DIRECTION)
            or self.contains_point_with_direction(point, SKEW_DIRECTION)
        )

    def contains_point_with_direction(self, point: Point, direction: Vector) -> bool:
        """Ray-casting test along a single direction.

        Args:
            point: Query point
            direction: Direction of the cast ray

        Returns:
            True if the point is on an edge, or the ray crosses an odd
            number of edges
        """
        ray = Ray(point, direction)
        crossings = 0
        for edge in self.edges():
            if edge.contains_point(point):
                return True
            if ray.crosses_segment(edge):
                crossings += 1
        return crossings % 2 == 1

    def crosses_segment(self, segment: Segment) -> bool:
        return any(edge.crosses_segment(segment) for edge in self.edges())

    def clone(self) -> Polygon:
        return Polygon(self.vertices)

    def __str__(self) -> str:
        return "Polygon(" + ", ".join(str(p) for p in self.vertices) + ")"
