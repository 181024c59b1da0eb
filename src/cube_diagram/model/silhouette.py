from __future__ import annotations

"""Body outlines for both view kinds.

Both outlines wind clockwise in projected y-up space, the same winding a
front-facing sticker has.
"""

from typing import TYPE_CHECKING, Dict, List, Tuple

import numpy as np
from scipy.spatial import ConvexHull

from ..errors import GeometryError
from ..geometry import Point, lift_onto_line, line_intersection
from .constants import (
    BASE_ROUND,
    BOTTOM_EXTRA_MARGIN,
    EXTRA_MARGIN,
    SIDE_EXTRA_MARGIN,
    SIDE_FACES,
    UNIT_CORNERS,
)
from .facelets import Face
from .rounded import RoundedVertex

if TYPE_CHECKING:
    from .cube import GeometricCube

Edge = Tuple[Point, Point]


# ---------------------------------------------------------------------------
# Normal view: convex hull of the (margined) cube corners
# ---------------------------------------------------------------------------
def normal_outline_points(cube: "GeometricCube") -> List[Point]:
    size = cube.dimension + 2 * EXTRA_MARGIN
    return [corner.scale(size) for corner in UNIT_CORNERS]


def normal_silhouette(cube: "GeometricCube", distance: float) -> List[RoundedVertex]:
    corners = [p.rotate(*cube.rotations) for p in normal_outline_points(cube)]
    projected = np.array([p.project(distance) for p in corners])
    hull = ConvexHull(projected)
    cutoff = cube.sticker_margin + EXTRA_MARGIN
    # scipy lists 2D hull vertices counter-clockwise
    return [RoundedVertex(corners[k], cutoff, cutoff) for k in reversed(hull.vertices)]


# ---------------------------------------------------------------------------
# Plan view: U face plus the tilted top row of each side face
# ---------------------------------------------------------------------------
def _side_edges(cube: "GeometricCube", face: Face) -> Dict[str, Edge]:
    """Right and left outline edges of a tilted side face, (base, tip) each, unrotated."""
    n = cube.dimension
    tip = n - 1 - BOTTOM_EXTRA_MARGIN
    right_u, left_u = n + SIDE_EXTRA_MARGIN, -SIDE_EXTRA_MARGIN
    return {
        "right": (cube.align_to_face(face, (right_u, n)), cube.align_to_face(face, (right_u, tip))),
        "left": (cube.align_to_face(face, (left_u, n)), cube.align_to_face(face, (left_u, tip))),
    }


def last_layer_outline_points(cube: "GeometricCube") -> List[Point]:
    points: List[Point] = []
    for face in SIDE_FACES:
        for base, tip in _side_edges(cube, face).values():
            points.extend((base, tip))
    return points


def last_layer_silhouette(cube: "GeometricCube", distance: float) -> List[RoundedVertex]:
    """Outline of the splayed last-layer view.

    Tilting moves each side face's edge on its own, so two neighbouring faces
    no longer share a corner. Their meeting point is the 2D intersection of
    the previous face's left edge with this face's right edge, lifted back
    onto the right edge so the compositor can retract along it.
    """
    margin = cube.sticker_margin
    edges = {
        face: {
            side: tuple(p.rotate(*cube.rotations) for p in edge)
            for side, edge in _side_edges(cube, face).items()
        }
        for face in SIDE_FACES
    }

    vertices: List[RoundedVertex] = []
    for k, face in enumerate(SIDE_FACES):
        prev_left = edges[SIDE_FACES[k - 1]]["left"]
        right_base, right_tip = edges[face]["right"]
        left_tip = edges[face]["left"][1]

        try:
            meeting = line_intersection(
                (prev_left[0].project(distance), prev_left[1].project(distance)),
                (right_base.project(distance), right_tip.project(distance)),
            )
        except GeometryError:
            # both edges project onto one line, so they have no crossing
            base = right_base
        else:
            base = lift_onto_line(right_base, right_tip, meeting, distance)

        vertices.extend((
            RoundedVertex(base, BASE_ROUND, BASE_ROUND),
            RoundedVertex(right_tip, BOTTOM_EXTRA_MARGIN + margin, SIDE_EXTRA_MARGIN + margin),
            RoundedVertex(left_tip, SIDE_EXTRA_MARGIN + margin, BOTTOM_EXTRA_MARGIN + margin),
        ))
    return vertices
