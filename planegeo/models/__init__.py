"""Pydantic models for planegeo."""

from .measurement import LineMeasurements, VectorMeasurements
from .query import PARAM_COUNTS, QueryReport, QueryRequest, ShapeSpec
from .scenario import Scenario, ScenarioExpectation, ScenarioSet

__all__ = [
    # Query
    "ShapeSpec",
    "QueryRequest",
    "QueryReport",
    "PARAM_COUNTS",
    # Measurements
    "VectorMeasurements",
    "LineMeasurements",
    # Scenarios
    "Scenario",
    "ScenarioExpectation",
    "ScenarioSet",
]
