"""
Where: `oklch_palette.env`
What: small parsers for environment variables.
Why: keep `os.getenv` plus fallback handling in one place.
"""

from __future__ import annotations

import os
from typing import Optional


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """String environment variable; empty or unset gives the default."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """Integer environment variable (unset or invalid gives the default).

    Parameters
    ----------
    name : str
        Variable name.
    default : Optional[int]
        Fallback value.
    min_value : Optional[int]
        Lower bound applied to parsed values.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """Boolean environment variable (accepts 0/1, true/false, yes/no, on/off)."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)


__all__ = ["env_str", "env_int", "env_bool"]
