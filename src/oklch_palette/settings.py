"""
Where: `oklch_palette.settings`
What: typed defaults for the command line, read from YAML config and `OKP_*` variables.
Why: one snapshot with consistent types instead of scattered lookups.

Precedence: environment > YAML (`config.load_config`) > built-in defaults.
The generator itself never reads settings; only the CLI does.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .config import load_config
from .env import env_bool, env_int, env_str
from .options import DEFAULT_STEPS
from .render import DEFAULT_DARK_SELECTOR, DEFAULT_PREFIX, DEFAULT_SELECTOR


logger = logging.getLogger(__name__)


@dataclass
class _Settings:
    # Generator
    steps: int = DEFAULT_STEPS
    mode: str = "both"
    gamut: str = "srgb"
    boost_low_chroma: bool = True

    # Output
    prefix: str = DEFAULT_PREFIX
    selector: str = DEFAULT_SELECTOR
    dark_selector: str = DEFAULT_DARK_SELECTOR

    # Misc
    log_level: str = "WARNING"


_settings = _Settings()


def _apply_mapping(target: _Settings, data: Dict[str, Any]) -> None:
    known = {f.name: f for f in fields(_Settings)}
    for key, value in data.items():
        if key not in known or value is None:
            continue
        current = getattr(target, key)
        try:
            if isinstance(current, bool):
                if isinstance(value, bool):
                    coerced: Any = value
                else:
                    coerced = str(value).strip().lower() in {"1", "true", "yes", "on"}
            elif isinstance(current, int):
                coerced = int(value)
            else:
                coerced = str(value)
        except (TypeError, ValueError):
            logger.warning("ignoring config value %s=%r", key, value)
            continue
        setattr(target, key, coerced)


def _apply_env(target: _Settings) -> None:
    steps = env_int("OKP_STEPS")
    if steps is not None:
        target.steps = steps
    target.mode = env_str("OKP_MODE", target.mode) or target.mode
    target.gamut = env_str("OKP_GAMUT", target.gamut) or target.gamut
    target.boost_low_chroma = env_bool("OKP_BOOST_LOW_CHROMA", target.boost_low_chroma)
    target.prefix = env_str("OKP_PREFIX", target.prefix) or target.prefix
    target.selector = env_str("OKP_SELECTOR", target.selector) or target.selector
    target.dark_selector = (
        env_str("OKP_DARK_SELECTOR", target.dark_selector) or target.dark_selector
    )
    target.log_level = env_str("OKP_LOG_LEVEL", target.log_level) or target.log_level


def reload(config: Optional[Dict[str, Any]] = None) -> _Settings:
    """Rebuild settings from defaults, YAML config and the environment.

    ``config`` replaces the YAML lookup when given.
    """
    global _settings
    fresh = _Settings()
    _apply_mapping(fresh, load_config() if config is None else config)
    _apply_env(fresh)
    _settings = fresh
    return _settings


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


reload()


__all__ = ["get", "reload", "_Settings"]
