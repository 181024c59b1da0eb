# ==========================
# file: cube_diagram/model/constants.py
# ==========================
"""Fixed geometry constants, in units of one facelet cell.

The per-face alignment table is process-lifetime immutable data; pass it
around explicitly rather than mutating it.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from ..geometry import Axis, Point, Rotation
from .facelets import Face

STICKER_MARGIN = 0.075
EXTRA_MARGIN = 0.02

# plan (last-layer) view
TILT_ANGLE = 34
BOTTOM_EXTRA_MARGIN = 0.06
SIDE_EXTRA_MARGIN = EXTRA_MARGIN
BASE_ROUND = 0.05

#: rotation carrying the front-face frame onto each face
ROTATION_ONTO_FACE: Mapping[Face, Tuple[Rotation, ...]] = MappingProxyType({
    Face.U: ((Axis.X, -90),),
    Face.R: ((Axis.Y, 90),),
    Face.F: (),
    Face.D: ((Axis.X, 90),),
    Face.L: ((Axis.Y, -90),),
    Face.B: ((Axis.Y, 180),),
})

SIDE_FACES: Tuple[Face, ...] = (Face.R, Face.F, Face.L, Face.B)

#: cube corners at +/-0.5, in URF, UFL, ULB, UBR, DFR, DLF, DBL, DRB order
UNIT_CORNERS: Tuple[Point, ...] = tuple(
    Point(x, y, z).translate(-0.5)
    for x, y, z in (
        (1, 1, 1), (0, 1, 1), (0, 1, 0), (1, 1, 0),
        (1, 0, 1), (0, 0, 1), (0, 0, 0), (1, 0, 0),
    )
)
