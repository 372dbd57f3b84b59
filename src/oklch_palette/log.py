"""
Lightweight logging helpers.

- Library modules obtain loggers with `logging.getLogger(__name__)` and never
  configure handlers.
- Entry points call `setup_default_logging` once to get a sane minimal setup.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level: int | str = "INFO") -> None:
    """Apply a minimal logging configuration once.

    - No-op if the root logger already has handlers
    - Intended for the CLI and other top-level runners
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(level=lvl, format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "setup_default_logging"]
