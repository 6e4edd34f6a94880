"""GeoJSON export of bounded shapes via Shapely."""

import logging
from typing import Any

from shapely.geometry import LineString, mapping
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry

from ..geometry import AnyShape, Circle, Line, Point, Polygon, Ray, Segment, kind_of

logger = logging.getLogger(__name__)


def to_shapely(shape: AnyShape) -> BaseGeometry:
    """Convert a bounded shape to a Shapely geometry.

    Circles become buffered disks, so the result is an approximation meant
    for display and interchange only.

    Args:
        shape: Point, Segment, Circle or Polygon

    Returns:
        Shapely geometry; degenerate shapes collapse to a lower dimension

    Raises:
        ValueError: For Line and Ray, which are unbounded
    """
    if isinstance(shape, (Line, Ray)):
        raise ValueError(f"{kind_of(shape).value} is unbounded and has no GeoJSON geometry")

    if isinstance(shape, Point):
        return ShapelyPoint(shape.x, shape.y)

    if isinstance(shape, Segment):
        if shape.begin.contains_point(shape.end):
            return ShapelyPoint(shape.begin.x, shape.begin.y)
        return LineString([(shape.begin.x, shape.begin.y), (shape.end.x, shape.end.y)])

    if isinstance(shape, Circle):
        center = ShapelyPoint(shape.center.x, shape.center.y)
        return center.buffer(shape.radius) if shape.radius > 0 else center

    if isinstance(shape, Polygon):
        coords = [(p.x, p.y) for p in shape.vertices]
        if len(coords) >= 3:
            return ShapelyPolygon(coords)
        if len(coords) == 2:
            return LineString(coords)
        if len(coords) == 1:
            return ShapelyPoint(coords[0])
        return ShapelyPolygon()

    raise TypeError(f"Not a shape: {type(shape).__name__}")


def shape_to_feature(shape: AnyShape, layer: str = "shapes", **properties: Any) -> dict[str, Any]:
    """Convert a bounded shape to a GeoJSON Feature.

    Args:
        shape: Shape to export
        layer: Layer name stored in the feature properties
        **properties: Extra feature properties

    Returns:
        GeoJSON Feature dict
    """
    return {
        "type": "Feature",
        "geometry": mapping(to_shapely(shape)),
        "properties": {
            "kind": kind_of(shape).value,
            "label": str(shape),
            "layer": layer,
            **properties,
        },
    }


def shapes_to_geojson(shapes: list[AnyShape], layer: str = "shapes") -> dict[str, Any]:
    """Convert shapes to a GeoJSON FeatureCollection.

    Lines and rays are skipped since they cannot be drawn as finite
    geometries.
    """
    features = []
    for shape in shapes:
        if isinstance(shape, (Line, Ray)):
            logger.debug(f"Skipping unbounded {kind_of(shape).value} in GeoJSON export")
            continue
        features.append(shape_to_feature(shape, layer=layer))

    return {
        "type": "FeatureCollection",
        "features": features,
    }


def merge_geojson_collections(
    *collections: dict[str, Any],
) -> dict[str, Any]:
    """Merge multiple GeoJSON FeatureCollections.

    Args:
        *collections: GeoJSON FeatureCollection dicts

    Returns:
        Merged GeoJSON FeatureCollection
    """
    all_features = []

    for coll in collections:
        if coll and "features" in coll:
            all_features.extend(coll["features"])

    return {
        "type": "FeatureCollection",
        "features": all_features,
    }
