from __future__ import annotations

"""Facelet addressing and the ``<Face><serial>`` naming contract.

Serials run left-to-right, then top-to-bottom within a face, while ``j``
counts rows bottom-to-top, hence ``serial = i + (N - 1 - j) * N``.
"""

import re
from enum import IntEnum
from typing import Iterator, NamedTuple

from ..errors import FaceletNameError, FaceletRangeError


class Face(IntEnum):
    U = 0
    R = 1
    F = 2
    D = 3
    L = 4
    B = 5


class Facelet(NamedTuple):
    face: Face
    i: int
    j: int


_NAME_RE = re.compile(r"^([URFDLB])([0-9]+)$")


def check_facelet(facelet: Facelet, dimension: int) -> Facelet:
    face, i, j = facelet
    for name, value in (("i", i), ("j", j)):
        if int(value) != value or not 0 <= value < dimension:
            raise FaceletRangeError(
                f"Facelet index {name}={value!r} outside [0, {dimension}) on face {Face(face).name}"
            )
    return Facelet(Face(face), int(i), int(j))


def facelet_serial(facelet: Facelet, dimension: int) -> int:
    face, i, j = check_facelet(facelet, dimension)
    return i + (dimension - 1 - j) * dimension


def format_facelet_name(facelet: Facelet, dimension: int) -> str:
    return f"{Face(facelet.face).name}{facelet_serial(facelet, dimension)}"


def parse_facelet_name(name: str, dimension: int) -> Facelet:
    """Inverse of :func:`format_facelet_name`."""
    match = _NAME_RE.match(str(name).strip())
    if match is None:
        raise FaceletNameError(f"Malformed facelet name {name!r}; expected e.g. 'U0' or 'F8'")
    serial = int(match.group(2))
    if serial >= dimension * dimension:
        raise FaceletRangeError(
            f"Facelet {name!r} out of range for a {dimension}x{dimension} face"
        )
    i = serial % dimension
    j = dimension - (serial + dimension) // dimension  # N - ceil((serial + 1) / N)
    return Facelet(Face[match.group(1)], i, j)


def iter_facelets(dimension: int, face: Face) -> Iterator[Facelet]:
    """All facelets of *face* in serial order."""
    for serial in range(dimension * dimension):
        yield Facelet(face, serial % dimension, dimension - 1 - serial // dimension)
