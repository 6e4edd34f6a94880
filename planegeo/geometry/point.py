"""Point shape: a position that contains only itself."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .vector import Vector

if TYPE_CHECKING:
    from .segment import Segment


@dataclass
class Point:
    """Integer point in the plane."""

    x: int = 0
    y: int = 0

    def move(self, vector: Vector) -> Point:
        """Translate in place by ``vector``.

        Returns:
            This point, so calls can be chained.
        """
        self.x += vector.x
        self.y += vector.y
        return self

    def contains_point(self, point: Point) -> bool:
        return self.x == point.x and self.y == point.y

    def crosses_segment(self, segment: Segment) -> bool:
        """True if this point lies on ``segment``."""
        return segment.contains_point(self)

    def clone(self) -> Point:
        return Point(self.x, self.y)

    def __sub__(self, other: Point) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __add__(self, vector: Vector) -> Point:
        return Point(self.x + vector.x, self.y + vector.y)

    def __str__(self) -> str:
        return f"Point({self.x}, {self.y})"
