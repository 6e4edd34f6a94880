"""Floating-point measurements for reporting.

These return plain numbers for display. Predicates never use them; all
shape tests stay in exact integer arithmetic.
"""

import math

from .line import Line
from .vector import Vector, determinant


def vector_length(vector: Vector) -> float:
    """Euclidean length of a vector."""
    return math.hypot(vector.x, vector.y)


def triangle_area(first: Vector, second: Vector) -> float:
    """Area of the triangle spanned by two vectors sharing a start point."""
    return abs(first.cross(second)) / 2


def line_direction(line: Line) -> tuple[float, float]:
    """Direction vector ``(-b, a)``; for ``Line.through(p, q)`` this is ``q - p``."""
    return (float(-line.b), float(line.a))


def intersection_point(first: Line, second: Line) -> tuple[float, float]:
    """Point where two non-parallel lines meet.

    Args:
        first: First line
        second: Second line

    Returns:
        (x, y) of the intersection

    Raises:
        ValueError: If the lines are parallel
    """
    a1, b1, c1 = first.abc
    a2, b2, c2 = second.abc
    denominator = -determinant((a1, b1), (a2, b2))
    if denominator == 0:
        raise ValueError(f"{first} and {second} are parallel")
    x_numerator = determinant((c1, b1), (c2, b2))
    y_numerator = determinant((a1, c1), (a2, c2))
    # Positive denominator, so a zero coordinate comes out as 0.0, not -0.0
    if denominator < 0:
        denominator, x_numerator, y_numerator = -denominator, -x_numerator, -y_numerator
    return x_numerator / denominator, y_numerator / denominator


def parallel_distance(first: Line, second: Line) -> float:
    """Distance between two parallel lines.

    The first line is rescaled onto the second line's ``(a, b)`` before the
    ``c`` terms are compared, so proportional equations give the right answer.

    Raises:
        ValueError: If the lines are not parallel or ``second`` is degenerate
    """
    if not first.is_parallel(second):
        raise ValueError(f"{first} and {second} are not parallel")
    norm_sq = second.a * second.a + second.b * second.b
    if norm_sq == 0:
        raise ValueError(f"{second} does not describe a line")
    first_norm_sq = first.a * first.a + first.b * first.b
    if first_norm_sq == 0:
        raise ValueError(f"{first} does not describe a line")
    # Scale factor k with (a2, b2) = k * (a1, b1).
    scale = (first.a * second.a + first.b * second.b) / first_norm_sq
    return abs(first.c * scale - second.c) / math.sqrt(norm_sq)
