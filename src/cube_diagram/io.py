# ==================
# file: cube_diagram/io.py
# ==================
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .config import Config
from .errors import ConfigError

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Request file not found at {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Could not decode JSON in {path}: {e}") from e


def load_request(path: Path) -> Dict[str, Any]:
    """Raw request dict from a JSON object file (CLI flags are merged on top)."""
    data = _read_json(Path(path))
    if not isinstance(data, dict):
        raise ConfigError(f"Request file {path} must hold a JSON object")
    return data


def load_config(path: Path) -> Config:
    return Config.from_dict(load_request(path))


def load_batch(path: Path) -> List[Tuple[str, Config]]:
    """(name, config) pairs from a JSON list of request objects, each validated up front.

    An optional "name" key per entry names the output file; it defaults to
    diagram_000, diagram_001, ...
    """
    data = _read_json(Path(path))
    if not isinstance(data, list):
        raise ConfigError(f"Batch file {path} must hold a JSON list of requests")
    configs = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            raise ConfigError(f"Batch entry {idx} in {path} is not a JSON object")
        item = dict(item)
        name = str(item.pop("name", f"diagram_{idx:03d}"))
        configs.append((name, Config.from_dict(item)))
    logger.info("Loaded %d requests from %s", len(configs), path)
    return configs


def save_svg(file_path: Path, svg_text: str) -> Path:
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(svg_text, encoding="utf-8")
    logger.info("Saved diagram → %s", file_path)
    return file_path
