from __future__ import annotations

"""cube_state.py
Facelet colours for the diagram, and a small pycuber facade that produces them.

    >>> cube = VirtualCube()
    >>> cube.apply_case("R U R' U'")
    >>> colors = FaceletColors.from_definition(cube.to_definition(), 3)

Colours are looked up per facelet in definition order (URFDLB, each face
row-major from its top-left sticker).
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, Mapping, Optional, Tuple

import pycuber as pc  # type: ignore – external dependency

from ..errors import ConfigError
from ..model.facelets import Face, Facelet, check_facelet, facelet_serial, iter_facelets

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

MaskPredicate = Callable[[Face, int, int, int], bool]


# ---------------------------------------------------------------------------
# Colour helpers
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Palette:
    """Maps logical colour names to hex strings; hex values pass through."""

    colour_to_hex: Dict[str, str] = field(
        default_factory=lambda: {
            "white": "#ffffff",
            "yellow": "#fefe00",
            "orange": "#ff8c0a",
            "red": "#ee0000",
            "green": "#00d800",
            "blue": "#0051ba",
            "black": "#000000",
            "grey": "#808080",
            "gray": "#808080",
            "silver": "#c0c0c0",
            "purple": "#800080",
            "pink": "#ffc0cb",
        }
    )

    def resolve(self, colour: str) -> Tuple[str, float]:
        """``(hex, opacity)`` for a colour name, hex literal or ``transparent``."""
        name = str(colour).strip().lower()
        if name == "transparent":
            return "#000000", 0.0
        if _HEX_RE.match(name):
            return name, 1.0
        try:
            return self.colour_to_hex[name], 1.0
        except KeyError as e:
            raise ConfigError(f"Unknown colour {colour!r}") from e

    def __getitem__(self, colour: str) -> str:
        return self.resolve(colour)[0]


@dataclass(frozen=True)
class ColorScheme:
    """Which colour each face shows when the cube is solved."""

    face_to_colour: Mapping[Face, str] = field(
        default_factory=lambda: {
            Face.U: "yellow",
            Face.R: "red",
            Face.F: "blue",
            Face.D: "white",
            Face.L: "orange",
            Face.B: "green",
        }
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> "ColorScheme":
        scheme = dict(cls().face_to_colour)
        for key, colour in data.items():
            try:
                scheme[Face[str(key).upper()]] = colour
            except KeyError as e:
                raise ConfigError(f"Unknown face {key!r} in colour scheme") from e
        return cls(scheme)

    def __getitem__(self, face: Face) -> str:
        return self.face_to_colour[Face(face)]


@dataclass(frozen=True)
class FaceletStyle:
    fill: str
    opacity: float = 1.0


# ---------------------------------------------------------------------------
# Facelet colours
# ---------------------------------------------------------------------------
class FaceletColors:
    """Dense (face, serial) -> style table with 6·N² entries."""

    def __init__(self, dimension: int, styles: Iterable[FaceletStyle]) -> None:
        self.dimension = dimension
        self._styles: Tuple[FaceletStyle, ...] = tuple(styles)
        if len(self._styles) != 6 * dimension * dimension:
            raise ConfigError(
                f"Expected {6 * dimension * dimension} facelet colours, got {len(self._styles)}"
            )

    def __len__(self) -> int:
        return len(self._styles)

    def __iter__(self) -> Iterator[FaceletStyle]:
        return iter(self._styles)

    def _index(self, facelet: Facelet) -> int:
        n = self.dimension
        facelet = check_facelet(facelet, n)
        return int(facelet.face) * n * n + facelet_serial(facelet, n)

    def get(self, facelet: Facelet) -> FaceletStyle:
        return self._styles[self._index(facelet)]

    __getitem__ = get

    @classmethod
    def solved(
        cls,
        dimension: int,
        scheme: Optional[ColorScheme] = None,
        palette: Optional[Palette] = None,
    ) -> "FaceletColors":
        scheme = scheme or ColorScheme()
        palette = palette or Palette()
        per_face = {face: FaceletStyle(*palette.resolve(scheme[face])) for face in Face}
        return cls(dimension, (per_face[face] for face in Face for _ in range(dimension * dimension)))

    @classmethod
    def from_definition(
        cls,
        definition: str,
        dimension: int,
        scheme: Optional[ColorScheme] = None,
        mask_color: str = "#404040",
        palette: Optional[Palette] = None,
    ) -> "FaceletColors":
        """Letters U R F D L B take that face's colour, N the mask colour, T transparent."""
        scheme = scheme or ColorScheme()
        palette = palette or Palette()
        definition = definition.strip().upper()
        expected = 6 * dimension * dimension
        if len(definition) != expected:
            raise ConfigError(
                f"Facelet definition must have {expected} letters for N={dimension}, got {len(definition)}"
            )

        lookup = {face.name: FaceletStyle(*palette.resolve(scheme[face])) for face in Face}
        lookup["N"] = FaceletStyle(*palette.resolve(mask_color))
        lookup["T"] = FaceletStyle(*palette.resolve("transparent"))
        bad = sorted(set(definition) - set(lookup))
        if bad:
            raise ConfigError(f"Invalid facelet definition letters: {''.join(bad)}")
        return cls(dimension, (lookup[ch] for ch in definition))

    def masked(
        self,
        mask: MaskPredicate,
        mask_color: str = "#404040",
        palette: Optional[Palette] = None,
    ) -> "FaceletColors":
        """New table where every facelet the predicate hides shows *mask_color*."""
        hidden = FaceletStyle(*(palette or Palette()).resolve(mask_color))
        n = self.dimension
        styles = [
            self.get(f) if mask(f.face, f.i, f.j, n) else hidden
            for face in Face
            for f in iter_facelets(n, face)
        ]
        return FaceletColors(n, styles)


# ---------------------------------------------------------------------------
# pycuber facade
# ---------------------------------------------------------------------------
class VirtualCube:
    """A lightweight facade around *pycuber*'s `Cube` for 3x3 diagrams."""

    #: Faces in definition order
    FACE_ORDER = ["U", "R", "F", "D", "L", "B"]

    def __init__(self) -> None:
        self._cube: pc.Cube = pc.Cube()

    def apply(self, moves: str) -> None:
        """Apply a move sequence given in standard notation (e.g. "R U R' U'")."""
        if moves.strip():
            logger.debug("Applying %s", moves)
            self._cube(moves)

    def apply_case(self, moves: str) -> None:
        """Apply the inverse of *moves*, giving the state that *moves* solves."""
        if moves.strip():
            inverse = pc.Formula(moves)
            inverse.reverse()  # in place
            logger.debug("Applying case %s (inverse %s)", moves, inverse)
            self._cube(inverse)

    def to_definition(self) -> str:
        """54-letter URFDLB facelet string, colours mapped to faces via the centres."""
        colour_to_face = {
            str(self._cube.get_face(f)[1][1].colour).lower(): f
            for f in self.FACE_ORDER
        }
        if len(colour_to_face) != 6:
            raise ValueError("Center colors must be unique; current scheme appears invalid.")

        out = []
        for f in self.FACE_ORDER:
            face = self._cube.get_face(f)
            for r in range(3):
                for c in range(3):
                    out.append(colour_to_face[str(face[r][c].colour).lower()])
        return "".join(out)

    def facelet_colors(
        self,
        scheme: Optional[ColorScheme] = None,
        palette: Optional[Palette] = None,
    ) -> FaceletColors:
        return FaceletColors.from_definition(self.to_definition(), 3, scheme, palette=palette)
