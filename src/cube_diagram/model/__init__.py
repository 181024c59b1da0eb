from .arrows import GeometricArrow, arrow_vertices
from .constants import (
    BASE_ROUND,
    BOTTOM_EXTRA_MARGIN,
    EXTRA_MARGIN,
    ROTATION_ONTO_FACE,
    SIDE_EXTRA_MARGIN,
    SIDE_FACES,
    STICKER_MARGIN,
    TILT_ANGLE,
    UNIT_CORNERS,
)
from .cube import GeometricCube, ViewKind, align_normal, align_plan
from .facelets import (
    Face,
    Facelet,
    check_facelet,
    facelet_serial,
    format_facelet_name,
    iter_facelets,
    parse_facelet_name,
)
from .rounded import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    RoundedVertex,
    VectorPath,
    compose_rounded_path,
    handle_ratio,
)
from .silhouette import last_layer_silhouette, normal_silhouette
