# ==================
# file: cube_diagram/errors.py
# ==================
"""Exception hierarchy. Every render failure is local and synchronous."""


class CubeDiagramError(Exception):
    """Base class for all errors raised by cube_diagram."""


class ConfigError(CubeDiagramError, ValueError):
    """A render request (or one of its values) is invalid."""


class FaceletNameError(CubeDiagramError, ValueError):
    """A facelet name does not match ``<Face><serial>``."""


class FaceletRangeError(CubeDiagramError, IndexError):
    """A facelet serial or (i, j) index is outside the cube."""


class GeometryError(CubeDiagramError, ArithmeticError):
    """A geometric precondition was violated (parallel lines, non-adjacent faces...)."""
