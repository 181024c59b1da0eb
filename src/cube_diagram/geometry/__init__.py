# Geometry kernel: pure math, no cube semantics.
from .point import AXES, Axis, Point, Point2, Rotation, rotation_matrix
from .plane import Line2, angle_between, lerp, lift_onto_line, line_intersection, on_right_side

__all__ = [
    "AXES",
    "Axis",
    "Point",
    "Point2",
    "Rotation",
    "rotation_matrix",
    "Line2",
    "angle_between",
    "lerp",
    "lift_onto_line",
    "line_intersection",
    "on_right_side",
]
