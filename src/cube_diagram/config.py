# =====================
# file: cube_diagram/config.py
# =====================
from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .errors import ConfigError
from .geometry import Axis, Rotation
from .model.arrows import GeometricArrow
from .model.cube import ViewKind
from .sim.cube_state import ColorScheme
from .sim.masks import get_mask
from .utils import parse_arrow_text, parse_rotations, split_facelets

MARKERS = ("none", "start", "end", "both")

#: orientation used when a request gives none
DEFAULT_ROTATIONS: Dict[ViewKind, Tuple[Rotation, ...]] = {
    ViewKind.NORMAL: ((Axis.Y, -30.0), (Axis.X, 25.0)),
    ViewKind.PLAN: ((Axis.X, 90.0),),
}


@dataclass
class ArrowSpec:
    facelets: List[str]
    extend_start: float = 0.0
    extend_end: float = 0.0
    marker: str = "end"
    color: Optional[str] = None

    def __post_init__(self):
        self.facelets = split_facelets(self.facelets)
        self.marker = str(self.marker).lower()
        if self.marker not in MARKERS:
            raise ConfigError(f"Arrow marker must be one of {MARKERS}, got {self.marker!r}")
        if len(self.facelets) < 2:
            raise ConfigError(f"An arrow needs at least two facelets, got {self.facelets}")

    @property
    def marker_start(self) -> bool:
        return self.marker in ("start", "both")

    @property
    def marker_end(self) -> bool:
        return self.marker in ("end", "both")

    def geometric(self) -> GeometricArrow:
        return GeometricArrow(tuple(self.facelets), self.extend_start, self.extend_end)

    @classmethod
    def parse(cls, text: str) -> "ArrowSpec":
        return cls(**parse_arrow_text(text))

    @classmethod
    def from_value(cls, value: Any) -> "ArrowSpec":
        """Accepts the command-line string form or a JSON object."""
        if isinstance(value, ArrowSpec):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, Mapping):
            data = dict(value)
            if "colour" in data:
                data["color"] = data.pop("colour")
            for short, long in (("start", "extend_start"), ("end", "extend_end")):
                if short in data:
                    data[long] = data.pop(short)
            try:
                return cls(**data)
            except TypeError as e:
                raise ConfigError(f"Invalid arrow {value!r}: {e}") from e
        raise ConfigError(f"Invalid arrow {value!r}")


@dataclass
class Config:
    """One render request."""
    dimension: int = 3
    size: int = 128
    view: str = "normal"
    rotations: Optional[List[Rotation]] = None  # None -> view default
    distance: float = 5.0  # in cube widths; math.inf for orthographic
    background: Optional[str] = None
    body_color: str = "black"
    body_opacity: float = 1.0
    scheme: ColorScheme = field(default_factory=ColorScheme)
    mask_color: str = "#404040"
    stage: Optional[str] = None
    alg: Optional[str] = None
    case: Optional[str] = None
    definition: Optional[str] = None
    arrows: List[ArrowSpec] = field(default_factory=list)
    arrow_color: str = "grey"

    @property
    def view_kind(self) -> ViewKind:
        return ViewKind(self.view)

    def resolved_rotations(self) -> Tuple[Rotation, ...]:
        if self.rotations is None:
            return DEFAULT_ROTATIONS[self.view_kind]
        return tuple(self.rotations)

    def validate(self) -> "Config":
        if self.view not in [v.value for v in ViewKind]:
            raise ConfigError(f"View must be 'normal' or 'plan', got {self.view!r}")
        if int(self.dimension) != self.dimension or self.dimension < 1:
            raise ConfigError(f"Dimension must be a positive integer, got {self.dimension!r}")
        if int(self.size) != self.size or self.size < 1:
            raise ConfigError(f"Size must be a positive integer, got {self.size!r}")
        if not 0 <= self.body_opacity <= 1:
            raise ConfigError(f"Body opacity must be within [0, 1], got {self.body_opacity!r}")
        if math.isnan(self.distance) or self.distance <= 0:
            raise ConfigError(f"Distance must be positive, got {self.distance!r}")
        if self.case and self.alg:
            raise ConfigError("Give either an algorithm or a case, not both")
        if self.stage:
            get_mask(self.stage)
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown request keys: {', '.join(unknown)}")

        kwargs: Dict[str, Any] = dict(data)
        if kwargs.get("rotations") is not None:
            kwargs["rotations"] = parse_rotations(kwargs["rotations"])
        if "arrows" in kwargs:
            kwargs["arrows"] = [ArrowSpec.from_value(a) for a in kwargs["arrows"] or []]
        if isinstance(kwargs.get("scheme"), Mapping):
            kwargs["scheme"] = ColorScheme.from_dict(kwargs["scheme"])
        if "distance" in kwargs:
            try:
                kwargs["distance"] = float(kwargs["distance"])
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Distance must be a number, got {kwargs['distance']!r}") from e
        return cls(**kwargs).validate()
