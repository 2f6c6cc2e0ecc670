import math

import pytest

from geometry import Point, Segment, angle_between, distance, is_degenerate, point_at_angle, to_vector


def test_distance_is_euclidean():
    assert distance(Point(0, 0), Point(3, 4)) == 5.0
    assert distance(Point(-1, -1), Point(-1, -1)) == 0.0


def test_point_at_angle_follows_cos_sin():
    p = point_at_angle(Point(10, 10), 5, 0)
    assert math.isclose(p.x, 15) and math.isclose(p.y, 10)

    p = point_at_angle(Point(0, 0), 2, math.pi / 2)
    assert math.isclose(p.x, 0, abs_tol=1e-12) and math.isclose(p.y, 2)

    # Los ángulos fuera de [0, 2pi) dan la vuelta
    a = point_at_angle(Point(1, 1), 3, 0.3)
    b = point_at_angle(Point(1, 1), 3, 0.3 + 4 * math.pi)
    assert math.isclose(a.x, b.x) and math.isclose(a.y, b.y)


def test_point_is_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5


def test_to_vector():
    assert to_vector(Segment(Point(1, 2), Point(4, 6))) == Point(3, 4)


def test_angle_between_is_unsigned():
    base = Segment(Point(0, 0), Point(1, 0))
    up = Segment(Point(1, 0), Point(1, 1))
    down = Segment(Point(1, 0), Point(1, -1))
    back = Segment(Point(1, 0), Point(0, 0))
    ahead = Segment(Point(1, 0), Point(5, 0))

    assert math.isclose(angle_between(base, up), math.pi / 2)
    assert math.isclose(angle_between(base, down), math.pi / 2)
    assert math.isclose(angle_between(base, back), math.pi)
    assert angle_between(base, ahead) == 0.0


def test_angle_between_collinear_does_not_raise():
    # cos ligeramente > 1 por redondeo
    seg1 = Segment(Point(0, 0), Point(0.1, 0.3))
    seg2 = Segment(Point(0.1, 0.3), Point(0.2, 0.6))
    assert math.isclose(angle_between(seg1, seg2), 0.0, abs_tol=1e-7)


def test_angle_between_degenerate_is_nan():
    seg = Segment(Point(0, 0), Point(1, 1))
    assert math.isnan(angle_between(seg, Segment(Point(2, 2), Point(2, 2))))


def test_is_degenerate():
    assert is_degenerate(Point(3, 4), Point(3.0, 4.0))
    assert not is_degenerate(Point(3, 4), Point(3, 4.5))
