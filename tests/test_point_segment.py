"""Tests for Point and Segment predicates."""

import pytest

from planegeo.geometry import Point, Segment, Vector


class TestPoint:
    """Point containment, crossing, move and clone."""

    def test_contains_only_itself(self):
        p = Point(3, -2)
        assert p.contains_point(Point(3, -2))
        assert not p.contains_point(Point(3, -1))

    def test_crosses_segment_when_on_it(self):
        seg = Segment(Point(0, 0), Point(4, 4))
        assert Point(2, 2).crosses_segment(seg)
        assert Point(4, 4).crosses_segment(seg)
        assert not Point(5, 5).crosses_segment(seg)
        assert not Point(2, 3).crosses_segment(seg)

    def test_move_mutates_and_returns_self(self):
        p = Point(1, 1)
        result = p.move(Vector(2, -3))
        assert result is p
        assert (p.x, p.y) == (3, -2)

    def test_point_arithmetic(self):
        assert Point(5, 5) - Point(2, 1) == Vector(3, 4)
        assert Point(2, 1) + Vector(3, 4) == Point(5, 5)

    def test_str(self):
        assert str(Point(-1, 7)) == "Point(-1, 7)"


class TestSegmentContainsPoint:
    """Collinearity plus between-ness via the dot product sign."""

    def test_contains_endpoints(self):
        begin, end = Point(-3, 7), Point(11, -2)
        seg = Segment(begin, end)
        assert seg.contains_point(begin)
        assert seg.contains_point(end)

    def test_contains_interior_point(self):
        assert Segment(Point(0, 0), Point(4, 0)).contains_point(Point(2, 0))
        assert Segment(Point(0, 0), Point(6, 3)).contains_point(Point(4, 2))

    def test_rejects_collinear_point_outside(self):
        assert not Segment(Point(0, 0), Point(4, 0)).contains_point(Point(5, 0))
        assert not Segment(Point(0, 0), Point(4, 0)).contains_point(Point(-1, 0))

    def test_rejects_point_off_line(self):
        assert not Segment(Point(0, 0), Point(4, 0)).contains_point(Point(2, 1))

    def test_direction_runs_from_begin_to_end(self):
        assert Segment(Point(1, 2), Point(4, -2)).direction == Vector(3, -4)
        assert Segment(Point(2, 2), Point(2, 2)).direction.is_zero()

    def test_degenerate_segment_is_a_point(self):
        seg = Segment(Point(2, 2), Point(2, 2))
        assert seg.contains_point(Point(2, 2))
        assert not seg.contains_point(Point(2, 3))


class TestSegmentCrossesSegment:
    """Segment-segment crossing including touching and collinear cases."""

    def test_proper_crossing(self):
        a = Segment(Point(0, 0), Point(2, 2))
        b = Segment(Point(0, 2), Point(2, 0))
        assert a.crosses_segment(b)
        assert b.crosses_segment(a)

    def test_disjoint_non_parallel(self):
        a = Segment(Point(0, 0), Point(2, 0))
        b = Segment(Point(3, -1), Point(3, 1))
        assert not a.crosses_segment(b)

    def test_parallel_disjoint(self):
        a = Segment(Point(0, 0), Point(4, 0))
        b = Segment(Point(0, 1), Point(4, 1))
        assert not a.crosses_segment(b)

    def test_touching_at_endpoint_counts(self):
        a = Segment(Point(0, 0), Point(4, 0))
        b = Segment(Point(4, 0), Point(4, 5))
        assert a.crosses_segment(b)

    def test_other_endpoint_on_interior_counts(self):
        """The end (not only the begin) of the other segment is checked."""
        a = Segment(Point(0, 0), Point(4, 0))
        b = Segment(Point(2, 3), Point(2, 0))
        assert a.crosses_segment(b)

    def test_t_junction_with_own_endpoint(self):
        a = Segment(Point(2, 0), Point(2, 5))
        b = Segment(Point(0, 0), Point(4, 0))
        assert a.crosses_segment(b)

    def test_shallow_long_crossing(self):
        """A long segment crossing near one end of a long segment."""
        a = Segment(Point(0, 0), Point(100, 0))
        b = Segment(Point(-50, -1), Point(52, 1))
        assert a.crosses_segment(b)
        assert b.crosses_segment(a)

    @pytest.mark.parametrize(
        "other, expected",
        [
            (((2, 0), (6, 0)), True),    # overlap
            (((5, 0), (6, 0)), False),   # beyond the end
            (((-3, 0), (-1, 0)), False),  # before the begin
            (((-1, 0), (5, 0)), True),   # covers
            (((5, 0), (-1, 0)), True),   # covers, reversed
            (((6, 0), (5, 0)), False),   # beyond, reversed
        ],
    )
    def test_collinear_configurations(self, other, expected):
        a = Segment(Point(0, 0), Point(4, 0))
        b = Segment(Point(*other[0]), Point(*other[1]))
        assert a.crosses_segment(b) is expected

    def test_degenerate_segments(self):
        a = Segment(Point(0, 0), Point(4, 0))
        assert a.crosses_segment(Segment(Point(2, 0), Point(2, 0)))
        assert not a.crosses_segment(Segment(Point(6, 0), Point(6, 0)))
        assert Segment(Point(2, 0), Point(2, 0)).crosses_segment(a)


class TestSegmentMoveAndClone:
    """Translation and independent copies."""

    def test_move_translates_both_ends(self):
        seg = Segment(Point(0, 0), Point(1, 2))
        assert seg.move(Vector(3, 3)) is seg
        assert str(seg) == "Segment(Point(3, 3), Point(4, 5))"

    def test_endpoints_are_copied_on_construction(self):
        begin = Point(0, 0)
        seg = Segment(begin, Point(1, 1))
        seg.move(Vector(5, 5))
        assert begin == Point(0, 0)

    def test_clone_is_independent(self):
        seg = Segment(Point(0, 0), Point(1, 2))
        copy = seg.clone()
        copy.move(Vector(1, 1))
        assert seg == Segment(Point(0, 0), Point(1, 2))
        assert copy == Segment(Point(1, 1), Point(2, 3))
