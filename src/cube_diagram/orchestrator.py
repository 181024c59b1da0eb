# =============================
# file: cube_diagram/orchestrator.py
# =============================
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from .config import Config
from .core.shapes import Diagram, FaceGroup, FaceletQuad, PathShape, Style
from .errors import ConfigError
from .geometry import Point2
from .model.cube import GeometricCube, ViewKind
from .model.facelets import Face, Facelet, iter_facelets
from .model.rounded import compose_rounded_path
from .sim.cube_state import FaceletColors, Palette, VirtualCube
from .sim.masks import get_mask
from .utils import format_rotations

logger = logging.getLogger(__name__)

ARROW_STROKE_WIDTH = 0.12
VIEW_HALF_MIN = 0.9  # per cube dimension
VIEW_PADDING = 0.1


class DiagramRenderer:
    """Turns one :class:`Config` into a :class:`Diagram`.

    Each ``render()`` builds its own cube geometry; nothing is cached between
    calls, so renderers can be used from several threads.
    """

    def __init__(self, config: Config, palette: Optional[Palette] = None):
        self.config = config.validate()
        self.palette = palette or Palette()

    # ---- request -> geometry ------------------------------------------------
    def build_cube(self) -> GeometricCube:
        cfg = self.config
        return GeometricCube(cfg.dimension, cfg.resolved_rotations(), cfg.view_kind)

    def projection_distance(self, cube: GeometricCube) -> float:
        """Config distance is in cube widths; the geometry works in facelet cells."""
        distance = self.config.distance
        distance = math.inf if distance == math.inf else distance * cube.dimension
        cube.check_distance(distance)
        return distance

    # ---- request -> colours -------------------------------------------------
    def facelet_colors(self) -> FaceletColors:
        cfg = self.config
        n = cfg.dimension
        if cfg.definition:
            colors = FaceletColors.from_definition(
                cfg.definition, n, cfg.scheme, cfg.mask_color, self.palette
            )
        elif cfg.alg or cfg.case:
            if n != 3:
                raise ConfigError(f"Move sequences are only supported on 3x3 cubes, got N={n}")
            cube = VirtualCube()
            if cfg.case:
                cube.apply_case(cfg.case)
            else:
                cube.apply(cfg.alg)
            colors = cube.facelet_colors(cfg.scheme, self.palette)
        else:
            colors = FaceletColors.solved(n, cfg.scheme, self.palette)

        if cfg.stage:
            colors = colors.masked(get_mask(cfg.stage), cfg.mask_color, self.palette)
        return colors

    # ---- shapes ---------------------------------------------------------------
    def _visible_facelets(self, cube: GeometricCube, face: Face) -> Iterable[Facelet]:
        n = cube.dimension
        if cube.view is ViewKind.PLAN:
            if face == Face.D:
                return []
            if face != Face.U:
                return [f for f in iter_facelets(n, face) if f.j == n - 1]
        return list(iter_facelets(n, face))

    def _face_groups(self, cube: GeometricCube, distance: float, colors: FaceletColors) -> List[FaceGroup]:
        groups = []
        for face in Face:
            facelets = self._visible_facelets(cube, face)
            if not facelets:
                continue
            quads = []
            for facelet in facelets:
                style = colors.get(facelet)
                points = tuple(p.project(distance) for p in cube.get_sticker(facelet))
                quads.append(FaceletQuad(facelet, points, Style(fill=style.fill, opacity=style.opacity)))
            groups.append(FaceGroup(face, cube.facing_front(face, distance), tuple(quads)))
        return groups

    def _body(self, cube: GeometricCube, distance: float) -> PathShape:
        fill, alpha = self.palette.resolve(self.config.body_color)
        path = compose_rounded_path(cube.silhouette(distance), closed=True, distance=distance)
        return PathShape("body", path, Style(fill=fill, opacity=alpha * self.config.body_opacity))

    def _arrows(self, cube: GeometricCube, distance: float) -> List[PathShape]:
        shapes = []
        for spec in self.config.arrows:
            stroke, alpha = self.palette.resolve(spec.color or self.config.arrow_color)
            vertices = cube.arrow(spec.geometric())
            shapes.append(PathShape(
                "arrow",
                compose_rounded_path(vertices, closed=False, distance=distance),
                Style(stroke=stroke, stroke_width=ARROW_STROKE_WIDTH, opacity=alpha),
                marker_start=spec.marker_start,
                marker_end=spec.marker_end,
            ))
        return shapes

    @staticmethod
    def _view_box(dimension: int, points: Iterable[Point2]):
        extent = max((max(abs(x), abs(y)) for x, y in points), default=0.0)
        half = max(VIEW_HALF_MIN * dimension, extent + VIEW_PADDING)
        return (-half, -half, 2 * half, 2 * half)

    def render(self) -> Diagram:
        cfg = self.config
        cube = self.build_cube()
        distance = self.projection_distance(cube)
        logger.debug(
            "Rendering N=%d %s view, rotations [%s], distance %s",
            cube.dimension, cube.view.value, format_rotations(cube.rotations), distance,
        )

        colors = self.facelet_colors()
        faces = self._face_groups(cube, distance, colors)
        body = self._body(cube, distance)
        arrows = self._arrows(cube, distance)

        points: List[Point2] = list(body.path.points())
        for group in faces:
            for quad in group.quads:
                points.extend(quad.points)
        for arrow in arrows:
            points.extend(arrow.path.points())

        background = self.palette[cfg.background] if cfg.background else None
        diagram = Diagram(
            dimension=cube.dimension,
            size=cfg.size,
            view_box=self._view_box(cube.dimension, points),
            body=body,
            faces=faces,
            arrows=arrows,
            background=background,
        )
        logger.debug(
            "Rendered %d face groups (%d front), %d arrows",
            len(faces), len(diagram.front_faces()), len(arrows),
        )
        return diagram
