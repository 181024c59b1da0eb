import math

import pytest

from cube_diagram.errors import GeometryError
from cube_diagram.geometry import (
    Axis,
    Point,
    angle_between,
    lerp,
    lift_onto_line,
    line_intersection,
    on_right_side,
)


def xyz(p):
    return (p.x, p.y, p.z)


def approx_point(p):
    return pytest.approx((p.x, p.y, p.z), abs=1e-9)


# ---- Point ----------------------------------------------------------------
def test_identity_rotations_leave_point_unchanged():
    p = Point(1.25, -2.0, 3.5)
    assert p.rotate() == p
    assert p.rotate((Axis.X, 0), (Axis.Y, 0), (Axis.Z, 0)) == p
    assert p.rotate((Axis.Y, 360)) == p


def test_quarter_turns_are_exact():
    assert Point(1, 0, 0).rotate((Axis.Z, 90)) == Point(0, 1, 0)
    assert Point(0, 1, 0).rotate((Axis.X, 90)) == Point(0, 0, 1)
    assert Point(0, 0, 1).rotate((Axis.Y, 90)) == Point(1, 0, 0)
    assert Point(0, 0, 1).rotate((Axis.Y, -90)) == Point(-1, 0, 0)


def test_rotations_apply_in_list_order():
    p = Point(1, 0, 0)
    assert p.rotate((Axis.Z, 90), (Axis.X, 90)) == Point(0, 0, 1)
    assert p.rotate((Axis.X, 90), (Axis.Z, 90)) == Point(0, 1, 0)


def test_arbitrary_rotation_preserves_length():
    p = Point(1, 2, 3).rotate((Axis.Y, 30), (Axis.X, -25), (Axis.Z, 10))
    assert p.magnitude() == pytest.approx(math.sqrt(14))
    q = Point(1, 0, 0).rotate((Axis.Y, 30))
    assert (q.x, q.z) == pytest.approx((math.cos(math.radians(30)), -0.5))


def test_rotate_accepts_axis_names():
    assert Point(1, 0, 0).rotate(("z", 90)) == Point(0, 1, 0)


def test_translate_broadcasts_single_argument():
    assert Point(1, 2, 3).translate(1) == Point(2, 3, 4)
    assert Point(1, 2, 3).translate(1, 0, -1) == Point(2, 2, 2)


def test_scale_about_center():
    assert Point(2, 2, 2).scale(2) == Point(4, 4, 4)
    assert Point(2, 2, 2).scale(2, center=Point(1, 1, 1)) == Point(3, 3, 3)


def test_project_orthographic_and_perspective():
    p = Point(1.5, -2.0, 7.0)
    assert p.project(math.inf) == (1.5, -2.0)
    assert Point(1, 1, 1).project(5) == pytest.approx((1.25, 1.25))
    assert p.project(1e12) == pytest.approx((1.5, -2.0))


def test_move_toward():
    moved = Point(0, 0, 0).move_toward(Point(3, 4, 0), 2.5)
    assert xyz(moved) == approx_point(Point(1.5, 2.0, 0))
    back = Point(0, 0, 0).move_toward(Point(3, 4, 0), -5)
    assert xyz(back) == approx_point(Point(-3, -4, 0))


def test_move_toward_coincident_point_is_noop():
    p = Point(1, 2, 3)
    assert p.move_toward(Point(1, 2, 3), 10) == p


def test_axis_access_and_dominant_axis():
    p = Point(0.1, -3.0, 2.0)
    assert p[Axis.Y] == -3.0
    assert p.with_coord(Axis.Z, 9) == Point(0.1, -3.0, 9.0)
    assert p.axis_of_max_abs() is Axis.Y
    assert Point(1, 1, 0).axis_of_max_abs() is Axis.Y  # ties go to the later axis


def test_array_round_trip():
    p = Point(1, -2, 3)
    assert Point.from_array(p.to_array()) == p


# ---- plane helpers ------------------------------------------------------------
def test_line_intersection_of_crossing_lines():
    assert line_intersection(((0, 0), (1, 1)), ((0, 1), (1, 0))) == pytest.approx((0.5, 0.5))


def test_line_intersection_ignores_segment_extent():
    assert line_intersection(((0, 0), (1, 0)), ((3, 1), (3, 2))) == pytest.approx((3.0, 0.0))


def test_parallel_lines_raise():
    with pytest.raises(GeometryError):
        line_intersection(((0, 0), (1, 1)), ((0, 1), (1, 2)))


def test_on_right_side_uses_y_up():
    up = ((0, 0), (0, 1))
    assert on_right_side(up, (1, 0.5))
    assert not on_right_side(up, (-1, 0.5))
    assert not on_right_side(up, (0, 5))


def test_angle_between():
    assert angle_between(((0, 0), (1, 0)), ((1, 0), (2, 0))) == pytest.approx(0.0)
    assert angle_between(((0, 0), (1, 0)), ((1, 0), (1, 1))) == pytest.approx(math.pi / 2)
    assert angle_between(((0, 0), (1, 0)), ((1, 0), (1, -1))) == pytest.approx(math.pi / 2)
    assert angle_between(((0, 0), (1, 0)), ((1, 0), (0, 0))) == pytest.approx(math.pi)


def test_lerp():
    assert lerp((0, 0), (2, 4), 0.25) == pytest.approx((0.5, 1.0))


@pytest.mark.parametrize("distance", [10.0, math.inf])
def test_lift_onto_line_recovers_point(distance):
    start, end = Point(0, 0, 1), Point(2, 0.5, -1)
    target = Point(1, 0.25, 0)
    lifted = lift_onto_line(start, end, target.project(distance), distance)
    assert xyz(lifted) == approx_point(target)
