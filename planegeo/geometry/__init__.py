"""Exact integer 2D shapes and the predicates between them."""

from .circle import Circle
from .line import Line
from .measure import (
    intersection_point,
    line_direction,
    parallel_distance,
    triangle_area,
    vector_length,
)
from .point import Point
from .polygon import Polygon
from .ray import Ray
from .segment import Segment
from .shape import SHAPE_CLASSES, AnyShape, Shape, ShapeKind, kind_of
from .vector import Vector, determinant

__all__ = [
    # Primitives
    "Vector",
    "determinant",
    # Shapes
    "Point",
    "Segment",
    "Line",
    "Ray",
    "Circle",
    "Polygon",
    # Contract
    "Shape",
    "AnyShape",
    "ShapeKind",
    "SHAPE_CLASSES",
    "kind_of",
    # Scalar measurements
    "vector_length",
    "triangle_area",
    "line_direction",
    "intersection_point",
    "parallel_distance",
]
