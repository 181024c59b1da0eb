from __future__ import annotations

"""3D point value type used by every part of the cube model.

Points are immutable: each transform returns a new ``Point``, so staged
computations (facelets, silhouette, arrows) can share inputs safely.

    >>> Point(1, 0, 0).rotate((Axis.Z, 90))
    Point(x=0.0, y=1.0, z=0.0)
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

import numpy as np


class Axis(str, Enum):
    X = "x"
    Y = "y"
    Z = "z"


#: (axis, angle in degrees); lists of these are applied in order.
Rotation = Tuple[Axis, float]

#: projected 2D point (x, y), y pointing up.
Point2 = Tuple[float, float]

AXES: Tuple[Axis, ...] = (Axis.X, Axis.Y, Axis.Z)

# sin/cos of quarter turns, exact
_QUARTER_TURNS = {0: (0.0, 1.0), 90: (1.0, 0.0), 180: (0.0, -1.0), 270: (-1.0, 0.0)}


def _sin_cos(degrees: float) -> Tuple[float, float]:
    if float(degrees).is_integer() and int(degrees) % 90 == 0:
        return _QUARTER_TURNS[int(degrees) % 360]
    rad = math.radians(degrees)
    return math.sin(rad), math.cos(rad)


def rotation_matrix(axis: Axis, degrees: float) -> np.ndarray:
    """Right-handed rotation matrix about *axis*."""
    s, c = _sin_cos(degrees)
    if axis is Axis.X:
        return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])
    if axis is Axis.Y:
        return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])
    if axis is Axis.Z:
        return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
    raise ValueError(f"Unknown axis {axis!r}")


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    z: float

    # ---- access -----------------------------------------------------------
    def __getitem__(self, axis: Axis) -> float:
        return getattr(self, Axis(axis).value)

    def with_coord(self, axis: Axis, value: float) -> "Point":
        return replace(self, **{Axis(axis).value: float(value)})

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Point":
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def magnitude(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)

    def axis_of_max_abs(self) -> Axis:
        best = Axis.X
        for axis in AXES:
            if abs(self[axis]) >= abs(self[best]):
                best = axis
        return best

    # ---- transforms -------------------------------------------------------
    def translate(self, dx: float, dy: Optional[float] = None, dz: Optional[float] = None) -> "Point":
        """Shift by (dx, dy, dz); a missing dy copies dx and a missing dz copies dy."""
        if dy is None:
            dy = dx
        if dz is None:
            dz = dy
        return Point(self.x + dx, self.y + dy, self.z + dz)

    def scale(self, factor: float, center: Optional["Point"] = None) -> "Point":
        if center is None:
            return Point(self.x * factor, self.y * factor, self.z * factor)
        return (
            self.translate(-center.x, -center.y, -center.z)
            .scale(factor)
            .translate(center.x, center.y, center.z)
        )

    def rotate(self, *rotations: Rotation) -> "Point":
        """Apply each (axis, degrees) rotation in sequence; order matters."""
        vec = self.to_array()
        for axis, degrees in rotations:
            vec = rotation_matrix(Axis(axis), degrees) @ vec
        return Point.from_array(vec)

    def normalized(self) -> "Point":
        mag = self.magnitude()
        if mag == 0.0:
            return self
        return self.scale(1.0 / mag)

    def move_toward(self, target: "Point", distance: float) -> "Point":
        """Advance *distance* along the direction to *target* (negative moves away).

        Coincident points have no direction, so the point is returned unchanged.
        """
        delta = Point(target.x - self.x, target.y - self.y, target.z - self.z)
        if delta.magnitude() == 0.0:
            return self
        step = delta.normalized().scale(distance)
        return self.translate(step.x, step.y, step.z)

    def project(self, distance: float) -> Point2:
        """Perspective projection onto the z=0 plane seen from z=distance.

        ``distance=math.inf`` gives the orthographic projection. Callers keep
        *distance* beyond the geometry's extent; ``distance == z`` divides by zero.
        """
        if math.isinf(distance):
            return (self.x, self.y)
        return (
            distance * self.x / (distance - self.z),
            distance * self.y / (distance - self.z),
        )
