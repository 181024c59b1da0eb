# ====================
# file: cube_diagram/render/svg.py
# ====================
"""Serialize a :class:`~cube_diagram.core.shapes.Diagram` with svgwrite.

Model space is y-up; SVG is y-down, so every y is negated here and nowhere
else.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

import svgwrite

from ..core.shapes import Diagram, FaceGroup, PathShape
from ..geometry import Point2
from ..model.rounded import ClosePath, CurveTo, LineTo, MoveTo, VectorPath

logger = logging.getLogger(__name__)

PRECISION = 4

# arrowheads in stroke-width units, tip pointing along +x
_END_HEAD = "M 0 0 L 4 2 L 0 4 Z"
_START_HEAD = "M 4 0 L 0 2 L 4 4 Z"
_HEAD_SIZE = (4, 4)
_HEAD_REF = (2, 2)


def _num(value: float) -> float:
    return round(value, PRECISION) + 0.0  # + 0.0 drops negative zero


def _fmt(value: float) -> str:
    text = f"{_num(value):.{PRECISION}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def to_svg_point(point: Point2) -> Tuple[float, float]:
    return _num(point[0]), _num(-point[1])


def path_data(path: VectorPath) -> str:
    """``d`` attribute text for a vector path, y flipped."""

    def pt(p: Point2) -> str:
        return f"{_fmt(p[0])} {_fmt(-p[1])}"

    parts: List[str] = []
    for cmd in path.commands:
        if isinstance(cmd, MoveTo):
            parts.append(f"M {pt(cmd.point)}")
        elif isinstance(cmd, LineTo):
            parts.append(f"L {pt(cmd.point)}")
        elif isinstance(cmd, CurveTo):
            parts.append(f"C {pt(cmd.control1)} {pt(cmd.control2)} {pt(cmd.point)}")
        elif isinstance(cmd, ClosePath):
            parts.append("Z")
        else:
            raise TypeError(f"Unsupported path command {cmd!r}")
    return " ".join(parts)


class SvgWriter:
    """Builds one ``svgwrite.Drawing`` per diagram."""

    def __init__(self, diagram: Diagram) -> None:
        self.diagram = diagram

    # ---- public ---------------------------------------------------------------
    def drawing(self) -> svgwrite.Drawing:
        d = self.diagram
        min_x, min_y, width, height = d.view_box
        view_box = (min_x, -(min_y + height), width, height)
        dwg = svgwrite.Drawing(
            size=(d.size, d.size),
            viewBox=" ".join(_fmt(v) for v in view_box),
        )

        if d.background:
            dwg.add(dwg.rect(
                insert=(_num(view_box[0]), _num(view_box[1])),
                size=(_num(width), _num(height)),
                fill=d.background,
            ))

        if d.translucent_body:
            self._add_faces(dwg, d.back_faces())
        dwg.add(self._body(dwg, d.body))
        self._add_faces(dwg, d.front_faces())
        for k, arrow in enumerate(d.arrows):
            dwg.add(self._arrow(dwg, arrow, k))
        return dwg

    def to_string(self) -> str:
        return self.drawing().tostring()

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_string(), encoding="utf-8")
        logger.debug("Wrote SVG → %s", path)
        return path

    # ---- pieces ---------------------------------------------------------------
    def _add_faces(self, dwg: svgwrite.Drawing, groups: Iterable[FaceGroup]) -> None:
        for group in groups:
            g = dwg.g(id=f"face-{group.face.name}", stroke_linejoin="round")
            for quad in group.quads:
                style = quad.style
                g.add(dwg.polygon(
                    points=[to_svg_point(p) for p in quad.points],
                    fill=style.fill,
                    fill_opacity=style.opacity,
                    stroke=style.stroke or "none",
                    stroke_width=style.stroke_width,
                ))
            dwg.add(g)

    def _body(self, dwg: svgwrite.Drawing, body: PathShape):
        style = body.style
        return dwg.path(
            d=path_data(body.path),
            id="body",
            fill=style.fill,
            opacity=style.opacity,
            stroke=style.stroke or "none",
            stroke_width=style.stroke_width,
        )

    def _arrow(self, dwg: svgwrite.Drawing, arrow: PathShape, index: int):
        style = arrow.style
        path = dwg.path(
            d=path_data(arrow.path),
            id=f"arrow-{index}",
            fill="none",
            stroke=style.stroke,
            stroke_width=style.stroke_width,
            stroke_opacity=style.opacity,
            stroke_linejoin="round",
            stroke_linecap="round",
        )
        if arrow.marker_start:
            marker = self._marker(dwg, f"arrow-{index}-start", _START_HEAD, style.stroke)
            path["marker-start"] = marker.get_funciri()
        if arrow.marker_end:
            marker = self._marker(dwg, f"arrow-{index}-end", _END_HEAD, style.stroke)
            path["marker-end"] = marker.get_funciri()
        return path

    def _marker(self, dwg: svgwrite.Drawing, marker_id: str, head: str, colour: str):
        marker = dwg.marker(insert=_HEAD_REF, size=_HEAD_SIZE, orient="auto", id=marker_id)
        marker.add(dwg.path(d=head, fill=colour))
        dwg.defs.add(marker)
        return marker


def render_svg(diagram: Diagram) -> str:
    return SvgWriter(diagram).to_string()
