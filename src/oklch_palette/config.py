from __future__ import annotations

"""YAML configuration loading (fail-soft)."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "OKLCH_PALETTE_CONFIG"


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """Return the nearest ancestor holding `.git`, `pyproject.toml` or `configs/`.

    Falls back to ``start.parents[2]`` (``<repo>/src/oklch_palette`` -> ``<repo>``).
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    parents = list(cur.parents)
    return parents[1] if len(parents) > 1 else cur


def load_config(project_root: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration as a dict.

    Order (later wins, top-level keys only):
    1) `configs/default.yaml`
    2) root `config.yaml`
    3) the file named by ``$OKLCH_PALETTE_CONFIG``

    Missing or invalid files contribute nothing.
    """
    if project_root is None:
        project_root = _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = project_root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    explicit = os.getenv(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit).expanduser()
        if path.exists():
            base.update(_safe_load_yaml(path))
        else:
            logger.warning("%s points to a missing file: %s", CONFIG_ENV_VAR, path)

    return base


__all__ = ["CONFIG_ENV_VAR", "load_config"]
