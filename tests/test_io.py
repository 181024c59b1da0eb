import json

import pytest

from cube_diagram.errors import ConfigError
from cube_diagram.io import load_batch, load_config, load_request, save_svg


def write(path, data):
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_request(tmp_path / "nope.json")


def test_bad_json_and_wrong_shape(tmp_path):
    with pytest.raises(ConfigError):
        load_request(write(tmp_path / "bad.json", "{not json"))
    with pytest.raises(ConfigError):
        load_request(write(tmp_path / "list.json", [1, 2]))
    with pytest.raises(ConfigError):
        load_batch(write(tmp_path / "obj.json", {"dimension": 3}))
    with pytest.raises(ConfigError):
        load_batch(write(tmp_path / "items.json", [{"dimension": 3}, "U0"]))


def test_load_config(tmp_path):
    cfg = load_config(write(tmp_path / "req.json", {"dimension": 5, "arrows": ["U0,U4"]}))
    assert cfg.dimension == 5
    assert cfg.arrows[0].facelets == ["U0", "U4"]


def test_load_batch_names(tmp_path):
    batch = load_batch(write(tmp_path / "batch.json", [{}, {"name": "oll", "stage": "oll"}, {}]))
    assert [name for name, _ in batch] == ["diagram_000", "oll", "diagram_002"]
    assert batch[1][1].stage == "oll"


def test_batch_entries_are_validated_up_front(tmp_path):
    with pytest.raises(ConfigError):
        load_batch(write(tmp_path / "batch.json", [{}, {"view": "iso"}]))


def test_save_svg_creates_parents(tmp_path):
    target = save_svg(tmp_path / "a" / "b" / "cube.svg", "<svg/>")
    assert target.read_text(encoding="utf-8") == "<svg/>"
