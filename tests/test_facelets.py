import pytest

from cube_diagram.errors import FaceletNameError, FaceletRangeError
from cube_diagram.model.facelets import (
    Face,
    Facelet,
    check_facelet,
    facelet_serial,
    format_facelet_name,
    iter_facelets,
    parse_facelet_name,
)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_name_round_trip(n):
    for face in Face:
        for i in range(n):
            for j in range(n):
                facelet = Facelet(face, i, j)
                assert parse_facelet_name(format_facelet_name(facelet, n), n) == facelet


def test_serials_run_left_to_right_then_top_to_bottom():
    assert parse_facelet_name("U0", 3) == Facelet(Face.U, 0, 2)
    assert parse_facelet_name("U2", 3) == Facelet(Face.U, 2, 2)
    assert parse_facelet_name("R4", 3) == Facelet(Face.R, 1, 1)
    assert parse_facelet_name("F8", 3) == Facelet(Face.F, 2, 0)
    assert format_facelet_name(Facelet(Face.B, 0, 0), 4) == "B12"


@pytest.mark.parametrize("name", ["X1", "U", "U-1", "u0", "U1a", "", "1U"])
def test_malformed_names_fail_fast(name):
    with pytest.raises(FaceletNameError):
        parse_facelet_name(name, 3)


def test_serial_out_of_range():
    with pytest.raises(FaceletRangeError):
        parse_facelet_name("U9", 3)
    with pytest.raises(IndexError):
        parse_facelet_name("F4", 2)


def test_index_out_of_range():
    with pytest.raises(FaceletRangeError):
        check_facelet(Facelet(Face.F, 3, 0), 3)
    with pytest.raises(FaceletRangeError):
        facelet_serial(Facelet(Face.F, 0, -1), 3)


def test_iter_facelets_in_serial_order():
    n = 4
    serials = [facelet_serial(f, n) for f in iter_facelets(n, Face.L)]
    assert serials == list(range(n * n))
