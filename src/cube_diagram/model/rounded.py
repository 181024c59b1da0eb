from __future__ import annotations

"""Rounded-path compositor.

Turns vertices annotated with retract distances into a vector path whose
corners are replaced by cubic Bézier arcs. Closed paths outline the cube
body; open paths draw arrows.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..geometry import Point, Point2, angle_between, lerp

_SAME_EPS = 1e-9


@dataclass(frozen=True)
class RoundedVertex:
    """A path vertex plus how far to retract toward each neighbour before rounding.

    A cutoff of 0 keeps the corner sharp.
    """
    vertex: Point
    prev_cutoff: float
    next_cutoff: float


# ---------------------------------------------------------------------------
# Path commands (projected 2D model space, y up)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class MoveTo:
    point: Point2


@dataclass(frozen=True)
class LineTo:
    point: Point2


@dataclass(frozen=True)
class CurveTo:
    control1: Point2
    control2: Point2
    point: Point2


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, LineTo, CurveTo, ClosePath]


@dataclass(frozen=True)
class VectorPath:
    commands: Tuple[PathCommand, ...]

    @property
    def closed(self) -> bool:
        return bool(self.commands) and isinstance(self.commands[-1], ClosePath)

    def points(self) -> List[Point2]:
        """On-curve points in drawing order (control points excluded)."""
        return [c.point for c in self.commands if not isinstance(c, ClosePath)]

    def curves(self) -> List[CurveTo]:
        return [c for c in self.commands if isinstance(c, CurveTo)]


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------
def handle_ratio(theta: float) -> float:
    """Where the Bézier handles sit on each tangent leg, as a fraction of the leg.

    ``k = 4/3 * tan(theta/4)`` is the handle length relative to the arc radius,
    and the leg from arc endpoint to corner is ``r * tan(theta/2)``. Their
    ratio reduces to ``2/3 * (1 - tan(theta/4)**2)``. Using ``k`` itself as the
    lerp fraction agrees with this only at 90 degrees, and drifts off the
    circle for every other turn.
    """
    return 2.0 / 3.0 * (1.0 - math.tan(theta / 4.0) ** 2)


def _same(p: Point2, q: Point2) -> bool:
    return abs(p[0] - q[0]) < _SAME_EPS and abs(p[1] - q[1]) < _SAME_EPS


def _corner(
    prev: RoundedVertex,
    current: RoundedVertex,
    nxt: RoundedVertex,
    distance: float,
) -> Tuple[Point2, Optional[Tuple[Point2, Point2]], Point2]:
    """(entry point, optional curve handles, exit point) for one vertex."""
    v = current.vertex
    if current.prev_cutoff == 0 or current.next_cutoff == 0:
        p = v.project(distance)
        return p, None, p

    a = v.move_toward(prev.vertex, current.prev_cutoff).project(distance)
    b = v.project(distance)
    c = v.move_toward(nxt.vertex, current.next_cutoff).project(distance)
    ratio = handle_ratio(angle_between((a, b), (b, c)))
    return a, (lerp(a, b, ratio), lerp(c, b, ratio)), c


def compose_rounded_path(
    vertices: Sequence[RoundedVertex],
    closed: bool,
    distance: float,
) -> VectorPath:
    n = len(vertices)
    if closed and n < 3:
        raise ValueError(f"A closed rounded path needs at least 3 vertices, got {n}")
    if not closed and n < 2:
        raise ValueError(f"An open rounded path needs at least 2 vertices, got {n}")

    commands: List[PathCommand] = []

    def _emit(entry: Point2, handles, exit_: Point2, at: Point2) -> Point2:
        if not _same(entry, at):
            commands.append(LineTo(entry))
        if handles is not None:
            commands.append(CurveTo(handles[0], handles[1], exit_))
        return exit_

    if closed:
        corners = [
            _corner(vertices[k - 1], vertices[k], vertices[(k + 1) % n], distance)
            for k in range(n)
        ]
        current = corners[-1][2]
        commands.append(MoveTo(current))
        for entry, handles, exit_ in corners:
            current = _emit(entry, handles, exit_, current)
        commands.append(ClosePath())
        return VectorPath(tuple(commands))

    first, last = vertices[0], vertices[-1]
    start = first.vertex.move_toward(vertices[1].vertex, first.next_cutoff).project(distance)
    end = last.vertex.move_toward(vertices[-2].vertex, last.prev_cutoff).project(distance)

    commands.append(MoveTo(start))
    current = start
    for k in range(1, n - 1):
        current = _emit(*_corner(vertices[k - 1], vertices[k], vertices[k + 1], distance), current)
    if not _same(end, current):
        commands.append(LineTo(end))
    return VectorPath(tuple(commands))
