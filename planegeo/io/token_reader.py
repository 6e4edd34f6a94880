"""Reader for the whitespace-separated query format.

A query is a shape keyword, its integer parameters, then the coordinates of
points A and B::

    circle 0 0 5   5 0   6 0
    polygon 4  0 0 4 0 4 4 0 4   2 2   5 5

Polygons give their vertex count before the vertex coordinates.

The measurement modes read two vectors as start and end points
(``x1 y1 x2 y2`` twice), or two lines as equation coefficients
(``a b c`` twice).
"""

from collections.abc import Iterable, Iterator

import structlog

from ..geometry import Line, Point, Vector
from ..models.query import PARAM_COUNTS, QueryRequest, ShapeSpec

logger = structlog.get_logger(__name__)


class UnknownShapeError(ValueError):
    """Raised when the shape keyword is not one of the known kinds."""

    def __init__(self, keyword: str):
        super().__init__("Undefined command")
        self.keyword = keyword


def _next_int(tokens: Iterator[str], what: str) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError(f"Unexpected end of input while reading {what}") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Expected an integer for {what}, got {token!r}") from None


def read_request(tokens: Iterable[str]) -> QueryRequest:
    """Parse one query from a token stream.

    Args:
        tokens: Whitespace-split input tokens

    Returns:
        QueryRequest for the shape and points A and B

    Raises:
        UnknownShapeError: If the shape keyword is not recognized
        ValueError: If tokens are missing or not integers
    """
    stream = iter(tokens)
    try:
        keyword = next(stream)
    except StopIteration:
        raise ValueError("Empty input: expected a shape keyword") from None

    if keyword == "polygon":
        vertex_count = _next_int(stream, "polygon vertex count")
        if vertex_count < 0:
            raise ValueError(f"Polygon vertex count must be non-negative, got {vertex_count}")
        param_count = 2 * vertex_count
    elif keyword in PARAM_COUNTS:
        param_count = PARAM_COUNTS[keyword]
    else:
        logger.warning("unknown_shape_kind", keyword=keyword)
        raise UnknownShapeError(keyword)

    params = [_next_int(stream, f"{keyword} parameter {i + 1}") for i in range(param_count)]
    point_a = (_next_int(stream, "point A x"), _next_int(stream, "point A y"))
    point_b = (_next_int(stream, "point B x"), _next_int(stream, "point B y"))

    logger.debug("shape_tokens_parsed", kind=keyword, params=len(params))
    return QueryRequest(
        shape=ShapeSpec(kind=keyword, params=params),
        point_a=point_a,
        point_b=point_b,
    )


def read_request_text(text: str) -> QueryRequest:
    """Parse one query from a string."""
    return read_request(text.split())


def read_vectors(tokens: Iterable[str]) -> tuple[Vector, Vector]:
    """Parse two vectors, each given as ``x1 y1 x2 y2`` (start, then end).

    Raises:
        ValueError: If tokens are missing or not integers
    """
    stream = iter(tokens)
    vectors = []
    for label in ("first", "second"):
        begin = Point(
            _next_int(stream, f"{label} vector start x"),
            _next_int(stream, f"{label} vector start y"),
        )
        end = Point(
            _next_int(stream, f"{label} vector end x"),
            _next_int(stream, f"{label} vector end y"),
        )
        vectors.append(end - begin)

    logger.debug("vector_tokens_parsed", first=str(vectors[0]), second=str(vectors[1]))
    return vectors[0], vectors[1]


def read_lines(tokens: Iterable[str]) -> tuple[Line, Line]:
    """Parse two lines, each given as equation coefficients ``a b c``.

    Raises:
        ValueError: If tokens are missing or not integers
    """
    stream = iter(tokens)
    lines = [
        Line(*(_next_int(stream, f"{label} line coefficient {name}") for name in "abc"))
        for label in ("first", "second")
    ]

    logger.debug("line_tokens_parsed", first=str(lines[0]), second=str(lines[1]))
    return lines[0], lines[1]
