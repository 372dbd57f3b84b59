from __future__ import annotations

import math

import pytest

from oklch_palette import Gamut, InvalidInput, Mode, PaletteOptions
from oklch_palette.options import DEFAULT_STEPS, clamp_steps, resolve_options


def test_defaults() -> None:
    opts = PaletteOptions()
    assert opts.steps == DEFAULT_STEPS == 12
    assert opts.mode is Mode.BOTH
    assert opts.gamut is Gamut.SRGB
    assert opts.boost_low_chroma is True


def test_string_values_are_coerced() -> None:
    opts = PaletteOptions(mode=" Dark ", gamut="P3")
    assert opts.mode is Mode.DARK
    assert opts.gamut is Gamut.P3
    assert opts.to_dict() == {
        "steps": 12,
        "mode": "dark",
        "gamut": "p3",
        "boost_low_chroma": True,
    }


def test_clamp_steps() -> None:
    assert clamp_steps(None) == 12
    assert clamp_steps(1) == 2
    assert clamp_steps(30) == 24
    assert clamp_steps(7.9) == 7
    assert clamp_steps(math.inf) == 24
    assert clamp_steps(math.nan) == 12
    with pytest.raises(InvalidInput):
        clamp_steps("many")  # type: ignore[arg-type]


def test_mode_sides() -> None:
    assert Mode.LIGHT.has_light and not Mode.LIGHT.has_dark
    assert Mode.DARK.has_dark and not Mode.DARK.has_light
    assert Mode.BOTH.has_light and Mode.BOTH.has_dark


def test_unknown_values() -> None:
    with pytest.raises(InvalidInput):
        Mode.from_value("dim")
    with pytest.raises(InvalidInput):
        Gamut.from_value("rec2020")


def test_resolve_options() -> None:
    assert resolve_options() == PaletteOptions()
    assert resolve_options({"steps": 3, "unused": 1}).steps == 3
    assert resolve_options(None, mode="light", steps=None).mode is Mode.LIGHT
    with pytest.raises(InvalidInput):
        resolve_options(["steps", 3])  # type: ignore[arg-type]
