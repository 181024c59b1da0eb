# =====================
# file: cube_diagram/sim/masks.py
# =====================
"""Stage masks: which facelets keep their colour when showing a solving stage.

Each mask is a predicate ``(face, i, j, n) -> visible``. ``j`` counts rows
from the bottom, so ``j == n - 1`` is a side face's last-layer row.
"""
from __future__ import annotations

from typing import Callable, Dict

from ..errors import ConfigError
from ..model.facelets import Face

MaskPredicate = Callable[[Face, int, int, int], bool]

_SIDES = (Face.R, Face.F, Face.L, Face.B)


# ---- facelet position helpers ---------------------------------------------
def _last_layer_side(face, j, n):
    return face in _SIDES and j == n - 1


def _rim(i, n):
    return i == 0 or i == n - 1


def _corner(i, j, n):
    return _rim(i, n) and _rim(j, n)


def _edge(i, j, n):
    return _rim(i, n) != _rim(j, n)


# ---- first two layers -------------------------------------------------------
def fl(face, i, j, n):
    return face != Face.U and (face == Face.D or j == 0)


def f2l(face, i, j, n):
    return face != Face.U and not _last_layer_side(face, j, n)


def f2l_1(face, i, j, n):
    """F2L with the front-right slot still open."""
    if not f2l(face, i, j, n):
        return False
    if face == Face.F:
        return i != n - 1
    if face == Face.R:
        return i != 0
    if face == Face.D:
        return not (i == n - 1 and j == n - 1)
    return True


def f2l_2(face, i, j, n):
    """F2L with both front slots still open."""
    if not f2l_1(face, i, j, n):
        return False
    if face == Face.F:
        return i != 0
    if face == Face.L:
        return i != n - 1
    if face == Face.D:
        return not (i == 0 and j == n - 1)
    return True


def f2l_3(face, i, j, n):
    if not f2l(face, i, j, n):
        return False
    if face == Face.F:
        return i != 0
    if face == Face.R:
        return i != n - 1
    if face in (Face.L, Face.B):
        return not _rim(i, n)
    if face == Face.D:
        return (i, j) not in ((0, 0), (0, n - 1), (n - 1, 0))
    return True


def f2l_sm(face, i, j, n):
    """F2L with two opposite slots open."""
    if not f2l(face, i, j, n):
        return False
    if face in (Face.F, Face.B):
        return i != 0
    if face in (Face.R, Face.L):
        return i != n - 1
    if face == Face.D:
        return (i, j) not in ((0, n - 1), (n - 1, 0))
    return True


def f2b(face, i, j, n):
    """Roux first two blocks."""
    if not f2l(face, i, j, n):
        return False
    if face in (Face.F, Face.B, Face.D):
        return _rim(i, n)
    return True


def line(face, i, j, n):
    return f2l(face, i, j, n) and not f2b(face, i, j, n)


def cross(face, i, j, n):
    if not f2l(face, i, j, n):
        return False
    if face in _SIDES:
        return not _rim(i, n)
    return not _corner(i, j, n)


def block_2x2x3(face, i, j, n):
    if not f2l(face, i, j, n):
        return False
    if face == Face.B:
        return False
    if face == Face.R:
        return i != n - 1
    if face == Face.L:
        return i != 0
    if face == Face.D:
        return j != 0
    return True


def block_2x2x2(face, i, j, n):
    if not block_2x2x3(face, i, j, n):
        return False
    if face == Face.L:
        return False
    if face in (Face.F, Face.D):
        return i != 0
    return True


# ---- last layer -------------------------------------------------------------
def ll(face, i, j, n):
    if face == Face.U:
        return True
    if face == Face.D:
        return False
    return _last_layer_side(face, j, n)


def cll(face, i, j, n):
    return ll(face, i, j, n) and not _edge(i, j, n)


def ell(face, i, j, n):
    return ll(face, i, j, n) and not _corner(i, j, n)


def oll(face, i, j, n):
    return face == Face.U


def ocll(face, i, j, n):
    return oll(face, i, j, n) and cll(face, i, j, n)


def oell(face, i, j, n):
    return oll(face, i, j, n) and ell(face, i, j, n)


def coll(face, i, j, n):
    return oll(face, i, j, n) or cll(face, i, j, n)


def ocell(face, i, j, n):
    return oll(face, i, j, n) or ell(face, i, j, n)


# ---- insertion methods --------------------------------------------------------
def wv(face, i, j, n):
    return not _last_layer_side(face, j, n)


def vh(face, i, j, n):
    return f2l(face, i, j, n) or oell(face, i, j, n)


def els(face, i, j, n):
    if not vh(face, i, j, n):
        return False
    if face == Face.F and i == n - 1 and j == 0:
        return False
    if face == Face.R and i == 0 and j == 0:
        return False
    if face == Face.D and i == n - 1 and j == n - 1:
        return False
    return True


def cls(face, i, j, n):
    return wv(face, i, j, n)


def cmll(face, i, j, n):
    return f2b(face, i, j, n) or _corner(i, j, n)


def none(face, i, j, n):
    return False


STAGE_MASKS: Dict[str, MaskPredicate] = {
    "fl": fl,
    "f2l": f2l,
    "f2l_1": f2l_1,
    "f2l_2": f2l_2,
    "f2l_3": f2l_3,
    "f2l_sm": f2l_sm,
    "f2b": f2b,
    "line": line,
    "cross": cross,
    "2x2x3": block_2x2x3,
    "2x2x2": block_2x2x2,
    "ll": ll,
    "cll": cll,
    "ell": ell,
    "oll": oll,
    "ocll": ocll,
    "oell": oell,
    "coll": coll,
    "ocell": ocell,
    "wv": wv,
    "vh": vh,
    "els": els,
    "cls": cls,
    "cmll": cmll,
    "none": none,
}


def get_mask(name: str) -> MaskPredicate:
    try:
        return STAGE_MASKS[name.strip().lower()]
    except KeyError as e:
        raise ConfigError(
            f"Unknown stage {name!r}; choose from {', '.join(STAGE_MASKS)}"
        ) from e
