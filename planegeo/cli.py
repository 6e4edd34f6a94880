"""Command-line entry point.

Reads one query from stdin in the token format, runs a scenario set, or
measures two vectors or two lines read from stdin:

    echo "circle 0 0 5  5 0  6 0" | planegeo
    planegeo --scenario basic
    planegeo --scenario my_cases.yaml --json
    echo "0 0 3 4  0 0 4 3" | planegeo --measure vectors
    echo "1 0 0  1 0 -10" | planegeo --measure lines
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import structlog

from .export.geojson import merge_geojson_collections, shape_to_feature
from .geometry import Line, Point, Ray
from .io.token_reader import UnknownShapeError, read_lines, read_request_text, read_vectors
from .models.query import QueryRequest
from .pipeline import (
    build_shape,
    format_line_measurements,
    format_report,
    format_vector_measurements,
    measure_lines,
    measure_vectors,
    run_request,
    run_scenario_set,
)
from .scenarios.loader import list_scenario_sets, load_scenario_set

logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING") -> None:
    """Send stdlib and structlog output to stderr; stdout carries results."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planegeo",
        description="Run containment, crossing and move checks on a 2D shape",
    )
    parser.add_argument(
        "--scenario",
        metavar="NAME_OR_PATH",
        help="Run a bundled scenario set by name, or a scenario YAML file",
    )
    parser.add_argument(
        "--list-scenarios",
        action="store_true",
        help="List bundled scenario sets and exit",
    )
    parser.add_argument(
        "--measure",
        choices=["vectors", "lines"],
        help="Read two vectors (x1 y1 x2 y2 each) or two lines (a b c each) "
             "from stdin and print their measurements",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print reports as JSON instead of text",
    )
    parser.add_argument(
        "--geojson",
        type=Path,
        metavar="FILE",
        help="Also write the queried shapes and their moved clones as GeoJSON",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def _request_features(request: QueryRequest, **properties) -> dict:
    """GeoJSON features for a request's shape, moved clone and points."""
    shape = build_shape(request.shape)
    point_a = Point(*request.point_a)
    point_b = Point(*request.point_b)
    moved = shape.clone().move(point_b - point_a)

    features = [
        shape_to_feature(point_a, layer="query", role="A", **properties),
        shape_to_feature(point_b, layer="query", role="B", **properties),
    ]
    if not isinstance(shape, (Line, Ray)):
        features.append(shape_to_feature(shape, layer="shape", **properties))
        features.append(shape_to_feature(moved, layer="moved", **properties))
    return {"type": "FeatureCollection", "features": features}


def _write_geojson(path: Path, collection: dict) -> None:
    with open(path, "w") as f:
        json.dump(collection, f, indent=2)
    logger.info(f"Wrote {len(collection['features'])} features to {path}")


def _run_stdin(args: argparse.Namespace) -> int:
    try:
        request = read_request_text(sys.stdin.read())
    except UnknownShapeError as e:
        print(e, file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1

    report = run_request(request)
    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(format_report(report))

    if args.geojson:
        _write_geojson(args.geojson, _request_features(request))
    return 0


def _run_measure(args: argparse.Namespace) -> int:
    tokens = sys.stdin.read().split()
    try:
        if args.measure == "vectors":
            report = measure_vectors(*read_vectors(tokens))
            text = format_vector_measurements(report)
        else:
            report = measure_lines(*read_lines(tokens))
            text = format_line_measurements(report)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1

    print(report.model_dump_json(indent=2) if args.json else text)
    return 0


def _run_scenarios(args: argparse.Namespace) -> int:
    try:
        scenario_set = load_scenario_set(args.scenario)
    except FileNotFoundError as e:
        print(e, file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Invalid scenario set: {e}", file=sys.stderr)
        return 1

    outcomes = run_scenario_set(scenario_set)

    if args.json:
        print(json.dumps(
            [
                {
                    "scenario": o.scenario,
                    "passed": o.passed,
                    "mismatches": o.mismatches,
                    "report": o.report.model_dump(),
                }
                for o in outcomes
            ],
            indent=2,
        ))
    else:
        for outcome in outcomes:
            status = "ok" if outcome.passed else "MISMATCH"
            print(f"== {outcome.scenario} [{status}]")
            print(format_report(outcome.report))
            for mismatch in outcome.mismatches:
                print(f"   {mismatch}")
        failed = sum(1 for o in outcomes if not o.passed)
        print(f"{len(outcomes) - failed}/{len(outcomes)} scenarios as expected")

    if args.geojson:
        _write_geojson(args.geojson, merge_geojson_collections(*(
            _request_features(s.request, scenario=s.name) for s in scenario_set.scenarios
        )))

    return 0 if all(o.passed for o in outcomes) else 1


def main(argv: list[str] | None = None) -> int:
    args = create_argument_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.list_scenarios:
        for entry in list_scenario_sets():
            print(f"{entry['name']}: {entry['description']}")
        return 0

    if args.measure:
        return _run_measure(args)
    if args.scenario:
        return _run_scenarios(args)
    return _run_stdin(args)


if __name__ == "__main__":
    sys.exit(main())
