"""共通フィクスチャ。

- 既定シードのパレット
- OKP_* 環境変数を消したクリーンな環境
"""

from __future__ import annotations

from typing import Iterator

import pytest

from oklch_palette import Palette, synthesize


SEED = "#6753ff"

_ENV_VARS = (
    "OKP_STEPS",
    "OKP_MODE",
    "OKP_GAMUT",
    "OKP_BOOST_LOW_CHROMA",
    "OKP_PREFIX",
    "OKP_SELECTOR",
    "OKP_DARK_SELECTOR",
    "OKP_LOG_LEVEL",
    "OKLCH_PALETTE_CONFIG",
)


@pytest.fixture()
def seed_palette() -> Palette:
    return synthesize(SEED)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


def _parse_oklch(text: str) -> tuple[float, float, float]:
    """`oklch(62.4% 0.153 271.2)` -> (0.624, 0.153, 271.2)."""
    assert text.startswith("oklch(") and text.endswith(")"), text
    l_pct, c, h = text[len("oklch(") : -1].split()
    assert l_pct.endswith("%")
    return float(l_pct[:-1]) / 100.0, float(c), float(h)


@pytest.fixture()
def parse_oklch():
    return _parse_oklch
