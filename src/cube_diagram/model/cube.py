from __future__ import annotations

"""Facelet coordinate model.

A ``GeometricCube`` maps facelet addresses to 3D sticker quads in the current
view orientation. The two view kinds differ only in how a face-local (u, v)
coordinate is placed in 3D and in how the body outline is built; both are
free functions picked by the ``ViewKind`` tag.

Model space: x right, y up, z toward the viewer, one unit per facelet cell,
cube centred on the origin.
"""

import math
from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple, Union

from ..errors import ConfigError, GeometryError
from ..geometry import AXES, Axis, Point, Point2, Rotation, on_right_side
from .arrows import GeometricArrow, arrow_vertices
from .constants import ROTATION_ONTO_FACE, STICKER_MARGIN, TILT_ANGLE
from .facelets import Face, Facelet, check_facelet, parse_facelet_name
from .rounded import RoundedVertex
from .silhouette import (
    last_layer_outline_points,
    last_layer_silhouette,
    normal_outline_points,
    normal_silhouette,
)


class ViewKind(str, Enum):
    NORMAL = "normal"
    PLAN = "plan"


# ---------------------------------------------------------------------------
# Face alignment, one free function per view kind
# ---------------------------------------------------------------------------
def align_normal(dimension: int, face: Face, point: Point2) -> Point:
    half = dimension / 2
    return (
        Point(point[0], point[1], 0.0)
        .translate(-half, -half, half)
        .rotate(*ROTATION_ONTO_FACE[face])
    )


def align_plan(dimension: int, face: Face, point: Point2) -> Point:
    """Side faces hinge on their top edge and swing outward by ``TILT_ANGLE``."""
    if face in (Face.U, Face.D):
        return align_normal(dimension, face, point)
    half = dimension / 2
    return (
        Point(point[0], point[1], 0.0)
        .translate(-half, -dimension, 0.0)
        .rotate((Axis.X, -TILT_ANGLE))
        .translate(0.0, half, half)
        .rotate(*ROTATION_ONTO_FACE[face])
    )


_ALIGNERS: Dict[ViewKind, Callable[[int, Face, Point2], Point]] = {
    ViewKind.NORMAL: align_normal,
    ViewKind.PLAN: align_plan,
}

_SILHOUETTES: Dict[ViewKind, Callable[["GeometricCube", float], List[RoundedVertex]]] = {
    ViewKind.NORMAL: normal_silhouette,
    ViewKind.PLAN: last_layer_silhouette,
}

_OUTLINE_POINTS: Dict[ViewKind, Callable[["GeometricCube"], List[Point]]] = {
    ViewKind.NORMAL: normal_outline_points,
    ViewKind.PLAN: last_layer_outline_points,
}

FaceletRef = Union[Facelet, str]


class GeometricCube:
    """Geometry of one N×N×N cube seen in one orientation.

    Instances are cheap and per-render; they hold no mutable shared state.
    """

    def __init__(
        self,
        dimension: int,
        rotations: Sequence[Rotation] = (),
        view: Union[ViewKind, str] = ViewKind.NORMAL,
        sticker_margin: float = STICKER_MARGIN,
    ) -> None:
        if int(dimension) != dimension or dimension < 1:
            raise ConfigError(f"Cube dimension must be a positive integer, got {dimension!r}")
        if not 0 <= sticker_margin < 0.5:
            raise ConfigError(f"Sticker margin must be in [0, 0.5), got {sticker_margin!r}")
        self.dimension = int(dimension)
        self.rotations: Tuple[Rotation, ...] = tuple(rotations)
        self.view = ViewKind(view)
        self.sticker_margin = sticker_margin

    def __repr__(self) -> str:
        return f"GeometricCube(dimension={self.dimension}, view={self.view.value!r}, rotations={list(self.rotations)})"

    # ---- addressing ---------------------------------------------------------
    def facelet(self, ref: FaceletRef) -> Facelet:
        if isinstance(ref, str):
            return parse_facelet_name(ref, self.dimension)
        return check_facelet(ref, self.dimension)

    def align_to_face(self, face: Face, point: Point2) -> Point:
        """Place face-local (u, v) in unrotated model space."""
        return _ALIGNERS[self.view](self.dimension, Face(face), point)

    # ---- stickers -----------------------------------------------------------
    def get_sticker(self, ref: FaceletRef) -> List[Point]:
        face, i, j = self.facelet(ref)
        m = self.sticker_margin
        corners = (
            (m + i, m + j),
            (m + i, 1 - m + j),
            (1 - m + i, 1 - m + j),
            (1 - m + i, m + j),
        )
        return [self.align_to_face(face, p).rotate(*self.rotations) for p in corners]

    def _unrotated_center(self, facelet: Facelet) -> Point:
        return self.align_to_face(facelet.face, (0.5 + facelet.i, 0.5 + facelet.j))

    def get_sticker_center(self, ref: FaceletRef) -> Point:
        return self._unrotated_center(self.facelet(ref)).rotate(*self.rotations)

    def facing_front(self, face: Face, distance: float) -> bool:
        """True when *face* winds clockwise on screen, i.e. points at the viewer."""
        sticker = self.get_sticker(Facelet(Face(face), 0, 0))
        p0, p1, p2 = (p.project(distance) for p in sticker[:3])
        return on_right_side((p0, p1), p2)

    def bent_point(self, ref_a: FaceletRef, ref_b: FaceletRef) -> Point:
        """Where an arrow crosses the cube edge between two adjacent faces.

        Each centre's dominant axis is its face plane. The bend keeps A's
        plane coordinate and B's plane coordinate, and takes the remaining
        axis as an average weighted by how far each centre is from the edge.
        """
        p1 = self._unrotated_center(self.facelet(ref_a))
        p2 = self._unrotated_center(self.facelet(ref_b))
        s = p1.axis_of_max_abs()
        t = p2.axis_of_max_abs()
        if s == t:
            raise GeometryError(f"Facelets {ref_a!r} and {ref_b!r} are not on adjacent faces")
        u = next(axis for axis in AXES if axis not in (s, t))
        a = abs(p2[t] - p1[t])
        b = abs(p1[s] - p2[s])
        bent = (
            Point(0.0, 0.0, 0.0)
            .with_coord(s, p1[s])
            .with_coord(t, p2[t])
            .with_coord(u, (b * p1[u] + a * p2[u]) / (a + b))
        )
        return bent.rotate(*self.rotations)

    # ---- outlines -----------------------------------------------------------
    def silhouette(self, distance: float) -> List[RoundedVertex]:
        return _SILHOUETTES[self.view](self, distance)

    def arrow(self, arrow: GeometricArrow) -> List[RoundedVertex]:
        return arrow_vertices(self, arrow)

    def bounding_radius(self) -> float:
        """Largest distance from the centre to any outline point (rotation invariant)."""
        return max(p.magnitude() for p in _OUTLINE_POINTS[self.view](self))

    def check_distance(self, distance: float) -> None:
        """Reject distances inside the bounding sphere.

        This is stricter than the rotated z extent, so the same distance is
        accepted or refused for every orientation.
        """
        if not (distance == math.inf or distance > self.bounding_radius()):
            raise ConfigError(
                f"Projection distance {distance!r} must exceed the cube's bounding radius "
                f"{self.bounding_radius():.3f} (the largest extent over any orientation)"
            )
