from __future__ import annotations

"""2D helpers that operate on projected points."""

import math
from typing import Tuple

from ..errors import GeometryError
from .point import Point, Point2

Line2 = Tuple[Point2, Point2]

_PARALLEL_EPS = 1e-12


def lerp(p1: Point2, p2: Point2, ratio: float) -> Point2:
    return (
        (1 - ratio) * p1[0] + ratio * p2[0],
        (1 - ratio) * p1[1] + ratio * p2[1],
    )


def line_intersection(l1: Line2, l2: Line2) -> Point2:
    """Intersection of the two infinite lines through *l1* and *l2*.

    The segments need not overlap. Parallel lines raise ``GeometryError``.
    """
    (x1, y1), (x2, y2) = l1
    (x3, y3), (x4, y4) = l2
    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < _PARALLEL_EPS:
        raise GeometryError(f"Lines {l1} and {l2} are parallel")
    a = x1 * y2 - y1 * x2
    b = x3 * y4 - y3 * x4
    return (
        (a * (x3 - x4) - (x1 - x2) * b) / denom,
        (a * (y3 - y4) - (y1 - y2) * b) / denom,
    )


def on_right_side(line: Line2, point: Point2) -> bool:
    """True when *point* lies strictly right of the directed *line* (y up)."""
    (x1, y1), (x2, y2) = line
    x, y = point
    return (x - x1) * (y2 - y1) - (y - y1) * (x2 - x1) > 0


def angle_between(l1: Line2, l2: Line2) -> float:
    """Turning angle in [0, pi] when walking along *l1* and then *l2*."""
    (ax, ay), (bx, by) = l1
    (cx, cy), (dx, dy) = l2
    alpha0 = math.atan2(by - ay, bx - ax)
    alpha1 = math.atan2(dy - cy, dx - cx)
    angle = (alpha1 - alpha0) % (2 * math.pi)
    return angle if angle <= math.pi else 2 * math.pi - angle


def lift_onto_line(start: Point, end: Point, target: Point2, distance: float) -> Point:
    """Point on the 3D line start->end whose projection is *target*.

    *target* must already lie on the projection of that line.
    """
    direction = Point(end.x - start.x, end.y - start.y, end.z - start.z)
    if math.isinf(distance):
        candidates = [
            (direction.x, target[0] - start.x),
            (direction.y, target[1] - start.y),
        ]
    else:
        # d*(s + t*D)/(d - sz - t*Dz) = X  =>  t*(d*D + X*Dz) = X*(d - sz) - d*s
        candidates = [
            (distance * direction.x + target[0] * direction.z,
             target[0] * (distance - start.z) - distance * start.x),
            (distance * direction.y + target[1] * direction.z,
             target[1] * (distance - start.z) - distance * start.y),
        ]
    denom, numer = max(candidates, key=lambda c: abs(c[0]))
    if abs(denom) < _PARALLEL_EPS:
        raise GeometryError("Line projects to a single point")
    t = numer / denom
    return start.translate(t * direction.x, t * direction.y, t * direction.z)
