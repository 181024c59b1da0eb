import logging
import math

import pytest

from cube_diagram import Config, ConfigError, DiagramRenderer, FaceletNameError, FaceletRangeError
from cube_diagram.config import ArrowSpec
from cube_diagram.core.shapes import FaceGroup, PathShape
from cube_diagram.geometry import Axis
from cube_diagram.model import Face
from cube_diagram.sim import Palette

MIRRORED_VIEW = [(Axis.Y, 30), (Axis.X, -25)]


def render(**kwargs):
    return DiagramRenderer(Config(**kwargs)).render()


def test_solved_cube_end_to_end():
    diagram = render(dimension=3, rotations=MIRRORED_VIEW, distance=5)

    assert len(diagram.faces) == 6
    assert all(len(group.quads) == 9 for group in diagram.faces)
    assert {g.face for g in diagram.front_faces()} == {Face.D, Face.F, Face.L}
    assert len(diagram.back_faces()) == 3

    # one rounded corner per hull vertex
    renderer = DiagramRenderer(Config(rotations=MIRRORED_VIEW))
    cube = renderer.build_cube()
    hull = cube.silhouette(renderer.projection_distance(cube))
    assert len(hull) == 6
    assert len(diagram.body.path.curves()) == len(hull)
    assert diagram.body.path.closed


def test_solved_colors_per_face():
    diagram = render()
    palette = Palette()
    by_face = {g.face: g for g in diagram.faces}
    assert {q.style.fill for q in by_face[Face.U].quads} == {palette["yellow"]}
    assert {q.style.fill for q in by_face[Face.F].quads} == {palette["blue"]}


def test_default_view_shows_up_front_right():
    assert {g.face for g in render().front_faces()} == {Face.U, Face.F, Face.R}


def test_plan_view_faces():
    diagram = render(view="plan")
    counts = {g.face: len(g.quads) for g in diagram.faces}
    assert counts == {Face.U: 9, Face.R: 3, Face.F: 3, Face.L: 3, Face.B: 3}
    assert all(g.front for g in diagram.faces)
    assert all(q.facelet.j == 2 for g in diagram.faces if g.face != Face.U for q in g.quads)
    assert len(diagram.body.path.curves()) == 12


def test_draw_order_depends_on_body_opacity():
    opaque = list(render().shapes())
    assert isinstance(opaque[0], PathShape) and opaque[0].kind == "body"
    assert len([s for s in opaque if isinstance(s, FaceGroup)]) == 3

    translucent = list(render(body_opacity=0.5).shapes())
    kinds = ["front" if isinstance(s, FaceGroup) and s.front else
             "back" if isinstance(s, FaceGroup) else s.kind for s in translucent]
    assert kinds == ["back"] * 3 + ["body"] + ["front"] * 3


def test_projection_distance_is_checked():
    with pytest.raises(ConfigError):
        render(distance=0.5)
    diagram = render(distance=math.inf)
    assert len(diagram.front_faces()) == 3


def test_view_box_is_square_and_covers_drawing():
    diagram = render(arrows=[ArrowSpec(["U0", "U2"], extend_end=0.5)])
    min_x, min_y, width, height = diagram.view_box
    assert width == height
    assert min_x == min_y == -width / 2
    assert width / 2 >= 0.9 * 3
    extent = max(
        max(abs(x), abs(y))
        for shape in [diagram.body] + diagram.arrows
        for x, y in shape.path.points()
    )
    assert width / 2 >= extent


def test_arrow_shapes():
    diagram = render(arrows=[
        ArrowSpec(["U0", "U1", "U2"]),
        ArrowSpec(["F5", "R3"], marker="both", color="red"),
    ])
    first, second = diagram.arrows
    assert first.kind == "arrow"
    assert (first.marker_start, first.marker_end) == (False, True)
    assert first.style.stroke == Palette()["grey"]
    assert first.style.stroke_width == pytest.approx(0.12)
    assert first.style.fill is None
    assert not first.path.closed
    assert (second.marker_start, second.marker_end) == (True, True)
    assert second.style.stroke == Palette()["red"]


def test_arrow_with_bad_facelet_fails():
    with pytest.raises(FaceletRangeError):
        render(arrows=[ArrowSpec(["U0", "U9"])])
    with pytest.raises(FaceletNameError):
        render(arrows=[ArrowSpec(["U0", "Q1"])])


def test_definition_wins_over_alg():
    definition = "F" * 9 + "".join(face.name * 9 for face in Face)[9:]
    diagram = render(definition=definition, alg="R U")
    top = next(g for g in diagram.faces if g.face == Face.U)
    assert {q.style.fill for q in top.quads} == {Palette()["blue"]}


def test_alg_and_case():
    r_turn = render(alg="R")
    top = next(g for g in r_turn.faces if g.face == Face.U)
    assert Palette()["blue"] in {q.style.fill for q in top.quads}

    case = render(case="R'")
    top = next(g for g in case.faces if g.face == Face.U)
    assert {q.style.fill for q in top.quads} == {q.style.fill for q in next(
        g for g in r_turn.faces if g.face == Face.U).quads}


def test_moves_need_a_3x3():
    with pytest.raises(ConfigError):
        render(dimension=4, alg="R")


def test_stage_mask_applies_last():
    diagram = render(stage="oll", mask_color="#111111")
    for group in diagram.faces:
        fills = {q.style.fill for q in group.quads}
        if group.face == Face.U:
            assert fills == {Palette()["yellow"]}
        else:
            assert fills == {"#111111"}


def test_renders_are_independent():
    cfg = Config(dimension=2, rotations=MIRRORED_VIEW, arrows=[ArrowSpec(["U0", "U1"])])
    assert DiagramRenderer(cfg).render() == DiagramRenderer(cfg).render()


@pytest.mark.parametrize("n", [1, 2, 4, 5])
def test_other_dimensions(n):
    diagram = render(dimension=n)
    assert all(len(g.quads) == n * n for g in diagram.faces)
    assert diagram.view_box[2] / 2 >= 0.9 * n


@pytest.mark.parametrize("yaw", [-135, -45, 45, 135])
def test_plan_view_from_a_corner_renders(yaw):
    diagram = render(view="plan", rotations=[(Axis.Y, yaw)], distance=math.inf)
    assert len(diagram.body.path.curves()) == 12
    assert len(diagram.faces) == 5


def test_render_logs_rotations(caplog):
    caplog.set_level(logging.DEBUG, logger="cube_diagram.orchestrator")
    render(rotations=[(Axis.Y, -30), (Axis.X, 25)])
    assert "rotations [y-30 x25]" in caplog.text
