"""planegeo - exact integer 2D shapes and geometric predicates.

This package provides:
- Point, Segment, Ray, Line, Circle and Polygon shapes sharing one contract
  (move, contains_point, crosses_segment, clone, str)
- A query pipeline that runs the fixed check sequence on a shape
- A token reader, YAML scenario sets and a command-line entry point
- GeoJSON export through Shapely

Core shapes can be used directly:
    from planegeo.geometry import Circle, Point, Segment
    Circle(Point(0, 0), 5).crosses_segment(Segment(Point(5, 0), Point(6, 0)))
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
