import re

from .errors import ConfigError
from .geometry import Axis

_ROTATION_RE = re.compile(r"^([xyzXYZ])\s*([-+]?\d+(?:\.\d+)?)$")


def parse_rotations(value):
    """
    Parses a rotation list into [(Axis, degrees), ...], keeping the given order.

    Accepts a compact string such as "y-30 x25" (commas also separate
    entries), or a list whose items are "y-30" strings, [axis, angle] pairs
    or {"axis": ..., "angle": ...} dicts.
    """
    def parse_one(item):
        if isinstance(item, str):
            match = _ROTATION_RE.match(item.strip())
            if match is None:
                raise ConfigError(f"Malformed rotation {item!r}; expected e.g. 'y-30'")
            axis, angle = match.groups()
        elif isinstance(item, dict):
            axis, angle = item.get("axis"), item.get("angle")
        else:
            axis, angle = item
        try:
            axis = axis if isinstance(axis, Axis) else Axis(str(axis).strip().lower())
            return axis, float(angle)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Malformed rotation {item!r}") from e

    if value is None:
        return []
    if isinstance(value, str):
        value = [tok for tok in re.split(r"[\s,]+", value) if tok]
    return [parse_one(item) for item in value]


def format_rotations(rotations):
    """Inverse of parse_rotations for the compact string form: [(Y, -30)] -> 'y-30'."""
    def fmt(angle):
        return str(int(angle)) if float(angle).is_integer() else repr(float(angle))

    return " ".join(f"{Axis(axis).value}{fmt(angle)}" for axis, angle in rotations)


def split_facelets(value):
    """'U0, U1 U2' or ['U0', 'U1'] -> ['U0', 'U1', 'U2'] (names are not validated here)."""
    if isinstance(value, str):
        return [tok for tok in re.split(r"[\s,]+", value.strip()) if tok]
    return [str(tok).strip() for tok in value]


def parse_arrow_text(text):
    """
    Parses the command-line arrow form into keyword arguments.

        "U0,U1,U2;start=-0.2;end=0.3;marker=both;color=red"

    gives {"facelets": [...], "extend_start": -0.2, "extend_end": 0.3,
    "marker": "both", "color": "red"}. Only the facelet list is required.
    """
    keys = {"start": "extend_start", "end": "extend_end", "marker": "marker",
            "color": "color", "colour": "color"}

    head, *options = [part.strip() for part in text.split(";")]
    result = {"facelets": split_facelets(head)}
    for option in options:
        if not option:
            continue
        key, sep, raw = option.partition("=")
        key = key.strip().lower()
        if not sep or key not in keys:
            raise ConfigError(f"Unknown arrow option {option!r} in {text!r}")
        name = keys[key]
        if name.startswith("extend_"):
            try:
                result[name] = float(raw)
            except ValueError as e:
                raise ConfigError(f"Arrow option {key} needs a number, got {raw!r}") from e
        else:
            result[name] = raw.strip()
    return result
