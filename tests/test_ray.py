"""Tests for Ray containment and crossing."""

from planegeo.geometry import Point, Ray, Segment, Vector
from planegeo.geometry.ray import _trunc_div


class TestTruncDiv:
    """Division must truncate toward zero, not floor."""

    def test_positive(self):
        assert _trunc_div(7, 2) == 3

    def test_negative_numerator(self):
        assert _trunc_div(-7, 2) == -3

    def test_negative_denominator(self):
        assert _trunc_div(7, -2) == -3
        assert _trunc_div(-7, -2) == 3

    def test_exact(self):
        assert _trunc_div(-6, 3) == -2


class TestRayContainsPoint:
    """Forward half of the supporting line, begin point included."""

    def test_contains_begin(self):
        assert Ray(Point(1, 1), Vector(2, 3)).contains_point(Point(1, 1))

    def test_contains_forward_point(self):
        ray = Ray(Point(0, 0), Vector(1, 1))
        assert ray.contains_point(Point(3, 3))
        assert ray.contains_point(Point(1000, 1000))

    def test_rejects_backward_point(self):
        assert not Ray(Point(0, 0), Vector(1, 1)).contains_point(Point(-2, -2))

    def test_rejects_point_off_line(self):
        assert not Ray(Point(0, 0), Vector(1, 1)).contains_point(Point(2, 3))

    def test_through_sets_direction(self):
        ray = Ray.through(Point(1, 1), Point(4, 5))
        assert ray.direction == Vector(3, 4)

    def test_zero_direction_is_its_begin_point(self):
        ray = Ray(Point(1, 1), Vector(0, 0))
        assert ray.contains_point(Point(1, 1))
        assert not ray.contains_point(Point(2, 2))


class TestRayCrossesSegment:
    """Line test, collinear shortcut, then exact intersection."""

    def test_crosses_ahead(self):
        ray = Ray(Point(0, 0), Vector(1, 1))
        assert ray.crosses_segment(Segment(Point(3, 3), Point(5, 1)))
        assert ray.crosses_segment(Segment(Point(0, 4), Point(4, 0)))

    def test_misses_behind(self):
        ray = Ray(Point(0, 0), Vector(1, 1))
        assert not ray.crosses_segment(Segment(Point(-2, -2), Point(-3, 0)))
        assert not ray.crosses_segment(Segment(Point(0, -4), Point(-4, 0)))

    def test_misses_when_line_does_not_reach(self):
        ray = Ray(Point(0, 0), Vector(1, 0))
        assert not ray.crosses_segment(Segment(Point(5, 1), Point(6, 3)))

    def test_parallel_segment(self):
        ray = Ray(Point(0, 0), Vector(1, 0))
        assert not ray.crosses_segment(Segment(Point(0, 1), Point(5, 1)))

    def test_collinear_segment_ahead_and_behind(self):
        ray = Ray(Point(0, 0), Vector(1, 0))
        assert ray.crosses_segment(Segment(Point(3, 0), Point(5, 0)))
        assert ray.crosses_segment(Segment(Point(-3, 0), Point(5, 0)))
        assert not ray.crosses_segment(Segment(Point(-5, 0), Point(-3, 0)))

    def test_segment_through_begin(self):
        ray = Ray(Point(0, 0), Vector(1, 0))
        assert ray.crosses_segment(Segment(Point(0, -2), Point(0, 2)))

    def test_fractional_intersection(self):
        """Intersection at x = 4.5 is truncated to 4 before the forward test."""
        ray = Ray(Point(3, 3), Vector(1, 0))
        assert ray.crosses_segment(Segment(Point(6, 0), Point(3, 6)))

    def test_zero_direction(self):
        ray = Ray(Point(1, 1), Vector(0, 0))
        assert ray.crosses_segment(Segment(Point(0, 0), Point(2, 2)))
        assert not ray.crosses_segment(Segment(Point(0, 1), Point(0, 5)))

    def test_large_coordinates(self):
        big = 10**9
        ray = Ray(Point(-big, -big), Vector(1, 1))
        assert ray.crosses_segment(Segment(Point(big, -big), Point(-big, big)))


class TestRayMoveAndClone:
    """Only the begin point moves; the direction is free."""

    def test_move(self):
        ray = Ray(Point(0, 0), Vector(1, 1))
        assert ray.move(Vector(2, -2)) is ray
        assert str(ray) == "Ray(Point(2, -2), Vector(1, 1))"

    def test_clone_is_independent(self):
        ray = Ray(Point(0, 0), Vector(1, 1))
        ray.clone().move(Vector(5, 5))
        assert ray.begin == Point(0, 0)
