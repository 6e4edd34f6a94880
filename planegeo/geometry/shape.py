"""The contract shared by every shape, and the closed set of shape kinds."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, Union, runtime_checkable

from .circle import Circle
from .line import Line
from .point import Point
from .polygon import Polygon
from .ray import Ray
from .segment import Segment
from .vector import Vector


@runtime_checkable
class Shape(Protocol):
    """Operations every shape implements on its own.

    ``move`` mutates the shape and returns it; ``clone`` returns an
    independent copy, so ``shape.clone().move(v)`` leaves ``shape`` as is.
    """

    def move(self, vector: Vector) -> Shape: ...

    def contains_point(self, point: Point) -> bool: ...

    def crosses_segment(self, segment: Segment) -> bool: ...

    def clone(self) -> Shape: ...

    def __str__(self) -> str: ...


AnyShape = Union[Point, Segment, Ray, Line, Circle, Polygon]


class ShapeKind(Enum):
    """Shape keywords accepted by the pipeline and the token reader."""
    POINT = "point"
    SEGMENT = "segment"
    RAY = "ray"
    LINE = "line"
    CIRCLE = "circle"
    POLYGON = "polygon"


SHAPE_CLASSES: dict[ShapeKind, type] = {
    ShapeKind.POINT: Point,
    ShapeKind.SEGMENT: Segment,
    ShapeKind.RAY: Ray,
    ShapeKind.LINE: Line,
    ShapeKind.CIRCLE: Circle,
    ShapeKind.POLYGON: Polygon,
}


def kind_of(shape: AnyShape) -> ShapeKind:
    """Shape kind of a concrete shape instance.

    Raises:
        TypeError: If ``shape`` is not one of the known shape classes
    """
    for kind, cls in SHAPE_CLASSES.items():
        if type(shape) is cls:
            return kind
    raise TypeError(f"Not a shape: {type(shape).__name__}")
