"""Export utilities for shapes."""

from .geojson import (
    merge_geojson_collections,
    shape_to_feature,
    shapes_to_geojson,
    to_shapely,
)

__all__ = [
    "to_shapely",
    "shape_to_feature",
    "shapes_to_geojson",
    "merge_geojson_collections",
]
