# Cube state: pycuber facade, facelet colours and stage masks.
from .cube_state import ColorScheme, FaceletColors, FaceletStyle, Palette, VirtualCube
from .masks import STAGE_MASKS, get_mask

__all__ = [
    "ColorScheme",
    "FaceletColors",
    "FaceletStyle",
    "Palette",
    "VirtualCube",
    "STAGE_MASKS",
    "get_mask",
]
