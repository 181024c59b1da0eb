from __future__ import annotations

"""Arrow path builder: facelet sequence -> open rounded-vertex list."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence

from .rounded import RoundedVertex

if TYPE_CHECKING:
    from .cube import GeometricCube


@dataclass(frozen=True)
class GeometricArrow:
    """Facelet names to pass through, plus signed extensions at the open ends.

    Negative extensions shorten the path, positive ones lengthen it past the
    first/last sticker centre.
    """
    facelets: Sequence[str]
    extend_start: float = 0.0
    extend_end: float = 0.0

    def __post_init__(self):
        facelets = tuple(self.facelets)
        if len(facelets) < 2:
            raise ValueError(f"An arrow needs at least two facelets, got {list(facelets)}")
        object.__setattr__(self, "facelets", facelets)


def arrow_vertices(cube: "GeometricCube", arrow: GeometricArrow) -> List[RoundedVertex]:
    facelets = [cube.facelet(name) for name in arrow.facelets]
    margin = cube.sticker_margin
    last = len(facelets) - 1

    vertices: List[RoundedVertex] = []
    for k, facelet in enumerate(facelets):
        if k == 0:
            cutoff = -arrow.extend_start
        elif k == last:
            cutoff = -arrow.extend_end
        else:
            cutoff = 0.5 - margin  # stop at the sticker edge
        vertices.append(RoundedVertex(cube.get_sticker_center(facelet), cutoff, cutoff))

        if k < last and facelets[k + 1].face != facelet.face:
            vertices.append(
                RoundedVertex(cube.bent_point(facelet, facelets[k + 1]), margin, margin)
            )
    return vertices
