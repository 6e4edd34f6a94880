"""Tests for the whitespace-separated query reader."""

import pytest
from pydantic import ValidationError

from planegeo.geometry import Line, Vector
from planegeo.io.token_reader import (
    UnknownShapeError,
    read_lines,
    read_request,
    read_request_text,
    read_vectors,
)


class TestReadRequest:
    """One query per input: keyword, parameters, then A and B."""

    def test_circle(self):
        request = read_request_text("circle 0 0 5\n5 0\n6 0\n")
        assert request.shape.kind == "circle"
        assert request.shape.params == [0, 0, 5]
        assert request.point_a == (5, 0)
        assert request.point_b == (6, 0)

    @pytest.mark.parametrize(
        "text, kind, params",
        [
            ("point 1 2  3 4  5 6", "point", [1, 2]),
            ("segment 0 0 4 0  2 0  5 0", "segment", [0, 0, 4, 0]),
            ("ray 0 0 1 1  2 2  3 3", "ray", [0, 0, 1, 1]),
            ("line 0 0 0 5  -1 2  1 2", "line", [0, 0, 0, 5]),
        ],
    )
    def test_fixed_parameter_kinds(self, text, kind, params):
        request = read_request_text(text)
        assert request.shape.kind == kind
        assert request.shape.params == params

    def test_polygon_reads_vertex_count_first(self):
        request = read_request_text("polygon 4  0 0 4 0 4 4 0 4  2 2  5 5")
        assert request.shape.params == [0, 0, 4, 0, 4, 4, 0, 4]
        assert request.point_a == (2, 2)
        assert request.point_b == (5, 5)

    def test_polygon_without_vertices(self):
        request = read_request_text("polygon 0  1 1  2 2")
        assert request.shape.params == []

    def test_negative_coordinates(self):
        request = read_request_text("segment -3 -4 5 -6  -1 -1  0 0")
        assert request.shape.params == [-3, -4, 5, -6]

    def test_accepts_token_iterable(self):
        request = read_request(iter(["point", "0", "0", "1", "1", "2", "2"]))
        assert request.point_b == (2, 2)


class TestReadRequestErrors:
    """Unknown keywords and malformed input."""

    def test_unknown_keyword(self):
        with pytest.raises(UnknownShapeError, match="Undefined command") as exc_info:
            read_request_text("hexagon 1 2 3")
        assert exc_info.value.keyword == "hexagon"

    def test_unknown_keyword_is_a_value_error(self):
        with pytest.raises(ValueError):
            read_request_text("triangle 0 0")

    def test_empty_input(self):
        with pytest.raises(ValueError, match="Empty input"):
            read_request_text("   ")

    def test_missing_tokens(self):
        with pytest.raises(ValueError, match="Unexpected end of input"):
            read_request_text("circle 0 0 5  1 1")

    def test_non_integer_token(self):
        with pytest.raises(ValueError, match="Expected an integer"):
            read_request_text("point 1.5 2  0 0  1 1")

    def test_negative_polygon_count(self):
        with pytest.raises(ValueError, match="non-negative"):
            read_request_text("polygon -1  0 0  1 1")

    def test_negative_radius_fails_validation(self):
        with pytest.raises(ValidationError, match="radius"):
            read_request_text("circle 0 0 -5  1 1  2 2")


class TestMeasurementReaders:
    """Two vectors as start and end points, or two lines as coefficients."""

    def test_read_vectors(self):
        first, second = read_vectors("1 1 4 5\n0 0 -2 3".split())
        assert first == Vector(3, 4)
        assert second == Vector(-2, 3)

    def test_read_lines(self):
        first, second = read_lines("1 0 0  2 -3 7".split())
        assert first.abc == (1, 0, 0)
        assert second == Line(2, -3, 7)

    def test_missing_vector_token(self):
        with pytest.raises(ValueError, match="second vector end y"):
            read_vectors("0 0 1 1  0 0 1".split())

    def test_non_integer_coefficient(self):
        with pytest.raises(ValueError, match="first line coefficient b"):
            read_lines("1 x 0  1 0 0".split())
