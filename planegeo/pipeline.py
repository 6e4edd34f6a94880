"""Query pipeline.

Runs the fixed check sequence for a shape and two points:
1. Build the shape from its keyword and parameters
2. Test whether the shape contains point A
3. Test whether the shape crosses segment AB
4. Clone the shape and move the clone by B - A
5. Render the results

Also holds the two measurement modes, which report lengths and products of
two vectors, or the directions and gap or meeting point of two lines.
"""

import logging
from dataclasses import dataclass, field

from .geometry import AnyShape, Circle, Line, Point, Polygon, Ray, Segment, ShapeKind, Vector
from .geometry.measure import (
    intersection_point,
    line_direction,
    parallel_distance,
    triangle_area,
    vector_length,
)
from .models.measurement import LineMeasurements, VectorMeasurements
from .models.query import QueryReport, QueryRequest, ShapeSpec
from .models.scenario import Scenario, ScenarioSet

logger = logging.getLogger(__name__)


def build_shape(spec: ShapeSpec) -> AnyShape:
    """Construct a concrete shape from a validated spec.

    Args:
        spec: Shape keyword and parameters

    Returns:
        New shape instance owned by the caller
    """
    kind = ShapeKind(spec.kind)
    p = spec.params

    if kind is ShapeKind.POINT:
        return Point(p[0], p[1])
    if kind is ShapeKind.SEGMENT:
        return Segment(Point(p[0], p[1]), Point(p[2], p[3]))
    if kind is ShapeKind.RAY:
        return Ray.through(Point(p[0], p[1]), Point(p[2], p[3]))
    if kind is ShapeKind.LINE:
        return Line.through(Point(p[0], p[1]), Point(p[2], p[3]))
    if kind is ShapeKind.CIRCLE:
        return Circle(Point(p[0], p[1]), p[2])
    return Polygon.from_coords(zip(p[0::2], p[1::2]))


def check_functions(shape: AnyShape, point_a: Point, point_b: Point) -> QueryReport:
    """Run containment, crossing and clone-and-move checks on ``shape``.

    The shape itself is left untouched; only its clone is moved.

    Args:
        shape: Shape to query
        point_a: Point A
        point_b: Point B

    Returns:
        QueryReport with the three results
    """
    moved = shape.clone().move(point_b - point_a)
    return QueryReport(
        shape=str(shape),
        contains_point_a=shape.contains_point(point_a),
        crosses_segment_ab=shape.crosses_segment(Segment(point_a, point_b)),
        moved_clone=str(moved),
    )


def run_request(request: QueryRequest) -> QueryReport:
    """Build the requested shape and run the check sequence on it."""
    shape = build_shape(request.shape)
    report = check_functions(shape, Point(*request.point_a), Point(*request.point_b))
    logger.debug(
        f"{request.shape.kind}: contains A={report.contains_point_a}, "
        f"crosses AB={report.crosses_segment_ab}"
    )
    return report


def format_report(report: QueryReport) -> str:
    """Render a report as three lines of text."""
    contains = "contains" if report.contains_point_a else "does not contain"
    crosses = "crosses" if report.crosses_segment_ab else "does not cross"
    return (
        f"Given shape {contains} point A\n"
        f"Given shape {crosses} segment AB\n"
        f"{report.moved_clone}"
    )


def measure_vectors(first: Vector, second: Vector) -> VectorMeasurements:
    """Lengths, sum, dot and cross products, and spanned triangle area."""
    total = first + second
    return VectorMeasurements(
        lengths=(vector_length(first), vector_length(second)),
        sum=(total.x, total.y),
        dot=first.dot(second),
        cross=first.cross(second),
        triangle_area=triangle_area(first, second),
    )


def measure_lines(first: Line, second: Line) -> LineMeasurements:
    """Directions of both lines, then their gap or their meeting point.

    Args:
        first: First line
        second: Second line

    Returns:
        LineMeasurements with ``distance`` set for parallel lines and
        ``intersection`` set otherwise

    Raises:
        ValueError: If either equation has ``a = b = 0``
    """
    directions = (line_direction(first), line_direction(second))
    if first.is_parallel(second):
        return LineMeasurements(
            directions=directions,
            parallel=True,
            distance=parallel_distance(first, second),
        )
    return LineMeasurements(
        directions=directions,
        parallel=False,
        intersection=intersection_point(first, second),
    )


def _fixed(*values: float) -> str:
    return " ".join(f"{value:.9f}" for value in values)


def format_vector_measurements(report: VectorMeasurements) -> str:
    """Render vector measurements as four lines of text."""
    return "\n".join([
        _fixed(*report.lengths),
        f"{report.sum[0]} {report.sum[1]}",
        f"{report.dot} {report.cross}",
        _fixed(report.triangle_area),
    ])


def format_line_measurements(report: LineMeasurements) -> str:
    """Render line measurements: one direction per line, then the result."""
    result = (
        _fixed(report.distance) if report.parallel else _fixed(*report.intersection)
    )
    return "\n".join([_fixed(*report.directions[0]), _fixed(*report.directions[1]), result])


@dataclass
class ScenarioOutcome:
    """Result of running one scenario."""

    scenario: str
    report: QueryReport
    mismatches: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.mismatches


def _compare(scenario: Scenario, report: QueryReport) -> list[str]:
    """List fields where the report differs from the scenario's expectation."""
    if scenario.expect is None:
        return []
    mismatches = []
    for name, expected in scenario.expect.model_dump(exclude_none=True).items():
        actual = getattr(report, name)
        if actual != expected:
            mismatches.append(f"{name}: expected {expected!r}, got {actual!r}")
    return mismatches


def run_scenario_set(scenario_set: ScenarioSet) -> list[ScenarioOutcome]:
    """Run every scenario in a set and compare against expectations.

    Args:
        scenario_set: Loaded ScenarioSet

    Returns:
        One ScenarioOutcome per scenario, in set order
    """
    outcomes = []
    for scenario in scenario_set.scenarios:
        report = run_request(scenario.request)
        outcome = ScenarioOutcome(
            scenario=scenario.name,
            report=report,
            mismatches=_compare(scenario, report),
        )
        if not outcome.passed:
            logger.warning(
                f"Scenario '{scenario.name}' mismatched: {'; '.join(outcome.mismatches)}"
            )
        outcomes.append(outcome)

    failed = sum(1 for o in outcomes if not o.passed)
    logger.info(
        f"Ran {len(outcomes)} scenarios from '{scenario_set.name}', {failed} mismatched"
    )
    return outcomes
