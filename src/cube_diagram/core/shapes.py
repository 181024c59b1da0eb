# ========================
# file: cube_diagram/core/shapes.py
# ========================
"""Render-result contract: everything the serializer needs, nothing more."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

from ..geometry import Point2
from ..model.facelets import Face, Facelet
from ..model.rounded import VectorPath


@dataclass(frozen=True)
class Style:
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    opacity: float = 1.0


@dataclass(frozen=True)
class FaceletQuad:
    facelet: Facelet
    points: Tuple[Point2, Point2, Point2, Point2]
    style: Style


@dataclass(frozen=True)
class FaceGroup:
    face: Face
    front: bool
    quads: Tuple[FaceletQuad, ...]


@dataclass(frozen=True)
class PathShape:
    kind: str  # "body" | "arrow"
    path: VectorPath
    style: Style
    marker_start: bool = False
    marker_end: bool = False


Shape = Union[FaceGroup, PathShape]


@dataclass
class Diagram:
    """Ordered vector shapes for one cube picture, in projected y-up model space."""
    dimension: int
    size: int
    view_box: Tuple[float, float, float, float]  # (min_x, min_y, width, height)
    body: PathShape
    faces: List[FaceGroup] = field(default_factory=list)
    arrows: List[PathShape] = field(default_factory=list)
    background: Optional[str] = None

    @property
    def translucent_body(self) -> bool:
        return self.body.style.opacity < 1

    def front_faces(self) -> List[FaceGroup]:
        return [g for g in self.faces if g.front]

    def back_faces(self) -> List[FaceGroup]:
        return [g for g in self.faces if not g.front]

    def shapes(self) -> Iterator[Shape]:
        """Draw order: hidden faces (translucent body only), body, visible faces, arrows."""
        if self.translucent_body:
            yield from self.back_faces()
        yield self.body
        yield from self.front_faces()
        yield from self.arrows
