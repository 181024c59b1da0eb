# src/cube_diagram/__init__.py
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .config import ArrowSpec, Config
from .core.shapes import Diagram
from .errors import (
    ConfigError,
    CubeDiagramError,
    FaceletNameError,
    FaceletRangeError,
    GeometryError,
)
from .model.cube import GeometricCube, ViewKind
from .orchestrator import DiagramRenderer
from .render.svg import SvgWriter, render_svg

# Keep version single-sourced from pyproject.toml
try:
    __version__ = version("cube-diagram")  # distribution name, with hyphen
except PackageNotFoundError:  # running from source without pip -e .
    __version__ = "0+unknown"

__all__ = [
    "ArrowSpec",
    "Config",
    "ConfigError",
    "CubeDiagramError",
    "Diagram",
    "DiagramRenderer",
    "FaceletNameError",
    "FaceletRangeError",
    "GeometricCube",
    "GeometryError",
    "SvgWriter",
    "ViewKind",
    "render_svg",
]
