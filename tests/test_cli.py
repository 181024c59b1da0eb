import json

import pytest

from cube_diagram.cli import build_parser, config_from_args, main
from cube_diagram.errors import ConfigError
from cube_diagram.geometry import Axis


def test_writes_svg_file(tmp_path, capsys):
    out = tmp_path / "cube.svg"
    main(["--alg", "R U R' U'", "--arrow", "U0,U2;marker=both", "--out", str(out)])
    text = out.read_text(encoding="utf-8")
    assert text.startswith("<svg")
    assert "url(#arrow-0-start)" in text
    assert "✅" in capsys.readouterr().out


def test_quiet_prints_nothing(tmp_path, capsys):
    main(["--out", str(tmp_path / "cube.svg"), "--quiet"])
    assert capsys.readouterr().out == ""


def test_stdout_when_no_out(capsys):
    main(["--view", "plan", "--size", "64"])
    out = capsys.readouterr().out
    assert out.startswith("<svg")
    assert 'width="64"' in out


def test_flags_override_config_file(tmp_path):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"dimension": 2, "size": 64, "rotations": "y10"}), encoding="utf-8")
    args = build_parser().parse_args(["--config", str(request), "--size", "200", "--rotate", "x-20"])
    cfg = config_from_args(args)
    assert cfg.dimension == 2
    assert cfg.size == 200
    assert cfg.rotations == [(Axis.X, -20.0)]


def test_batch_writes_named_files(tmp_path, capsys):
    batch = tmp_path / "batch.json"
    batch.write_text(json.dumps([
        {"name": "first", "stage": "oll"},
        {"dimension": 2, "view": "plan"},
    ]), encoding="utf-8")
    out_dir = tmp_path / "svgs"
    main(["--batch", str(batch), "--out-dir", str(out_dir), "--quiet"])
    assert sorted(p.name for p in out_dir.iterdir()) == ["diagram_001.svg", "first.svg"]


def test_errors_propagate(tmp_path):
    with pytest.raises(ConfigError):
        main(["--dimension", "4", "--alg", "R", "--out", str(tmp_path / "x.svg")])
    assert not (tmp_path / "x.svg").exists()
