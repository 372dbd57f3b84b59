from __future__ import annotations

"""パレット生成 (`synthesize`) の基本動作テスト。"""

import pytest

from oklch_palette import (
    InvalidInput,
    Mode,
    PaletteOptions,
    make_palette,
    synthesize,
)
from oklch_palette.options import MAX_STEPS, MIN_STEPS


def test_default_palette_has_two_12_step_sides(seed_palette) -> None:
    assert seed_palette.light is not None and seed_palette.dark is not None
    assert len(seed_palette.light.brand) == 12
    assert len(seed_palette.dark.brand) == 12
    assert seed_palette.steps == 12


def test_endpoints_of_both_ramps(seed_palette, parse_oklch) -> None:
    """ライト側は明るい方から、ダーク側は暗い方から始まる。"""
    assert seed_palette.light.brand[0].startswith("oklch(99.0% ")
    assert seed_palette.light.brand[-1].startswith("oklch(25.0% ")
    assert seed_palette.dark.brand[0].startswith("oklch(14.0% ")
    assert seed_palette.dark.brand[-1].startswith("oklch(93.0% ")
    L_first, _, _ = parse_oklch(seed_palette.dark.brand[0])
    assert L_first == pytest.approx(0.14)


def test_hue_is_shared_by_every_step(seed_palette, parse_oklch) -> None:
    hue = seed_palette.meta.hue
    assert 0.0 <= hue < 360.0
    for _, side in seed_palette.sides():
        for color in side:
            assert color.oklch[2] == hue
            assert parse_oklch(color.css)[2] == float(f"{hue:.1f}")


def test_chroma_within_bounds(seed_palette, parse_oklch) -> None:
    for _, side in seed_palette.sides():
        for value in side.brand:
            _, C, _ = parse_oklch(value)
            assert 0.0 <= C <= 0.37


def test_edges_are_less_chromatic(seed_palette) -> None:
    light = seed_palette.light
    target = seed_palette.meta.target_chroma
    assert target == pytest.approx(0.18)  # #6753ff is a saturated seed
    assert light[0].oklch[1] <= 0.6 * target + 1e-12
    assert light[-1].oklch[1] <= 0.6 * target + 1e-12


@pytest.mark.parametrize(
    "requested, expected",
    [(1, MIN_STEPS), (0, MIN_STEPS), (-5, MIN_STEPS), (2, 2), (7, 7), (24, 24), (25, MAX_STEPS), (100, MAX_STEPS)],
)
def test_steps_are_clamped(requested: int, expected: int) -> None:
    pal = synthesize("#6753ff", steps=requested)
    assert len(pal.light) == expected
    assert len(pal.dark) == expected
    assert pal.meta.options.steps == expected


@pytest.mark.parametrize(
    "mode, has_light, has_dark",
    [("light", True, False), ("dark", False, True), ("both", True, True), (Mode.DARK, False, True)],
)
def test_mode_selects_sides(mode, has_light: bool, has_dark: bool) -> None:
    pal = synthesize("#3fa34d", mode=mode)
    assert (pal.light is not None) is has_light
    assert (pal.dark is not None) is has_dark


def test_options_object_and_mapping_are_equivalent() -> None:
    a = synthesize("#3fa34d", PaletteOptions(steps=6, mode="light"))
    b = synthesize("#3fa34d", {"steps": 6, "mode": "light"})
    assert a.light.brand == b.light.brand
    assert b.dark is None


def test_keyword_overrides_win_over_options() -> None:
    pal = synthesize("#3fa34d", PaletteOptions(steps=6), steps=4)
    assert pal.steps == 4


def test_gray_seed_gets_boosted_chroma() -> None:
    pal = synthesize("#808080")
    assert pal.meta.target_chroma == 0.06
    mid = pal.light[5].oklch[1]
    assert mid == pytest.approx(0.06)


def test_gray_seed_without_boost_stays_gray(parse_oklch) -> None:
    pal = synthesize("#808080", boost_low_chroma=False)
    assert pal.meta.target_chroma < 0.03
    for value in pal.light.brand:
        assert parse_oklch(value)[1] == 0.0


def test_gamut_option_does_not_change_output() -> None:
    srgb = synthesize("#ff0066", gamut="srgb")
    p3 = synthesize("#ff0066", gamut="p3")
    assert srgb.light.brand == p3.light.brand
    assert srgb.dark.brand == p3.dark.brand


def test_alpha_is_recorded_but_not_applied() -> None:
    opaque = synthesize("#6753ff")
    translucent = synthesize("#6753ff80")
    assert translucent.meta.seed_alpha == pytest.approx(0x80 / 255.0)
    assert translucent.light.brand == opaque.light.brand


def test_deterministic() -> None:
    assert synthesize("#0af").to_dict() == synthesize("#0af").to_dict()


@pytest.mark.parametrize("seed", ["notacolor", "#12", "", "#12345"])
def test_invalid_seed_raises(seed: str) -> None:
    with pytest.raises(InvalidInput):
        synthesize(seed)


def test_invalid_mode_raises() -> None:
    with pytest.raises(InvalidInput):
        synthesize("#6753ff", mode="sepia")


def test_unknown_override_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        synthesize("#6753ff", stepz=4)


def test_make_palette_alias() -> None:
    assert make_palette is synthesize


def test_palette_is_frozen(seed_palette) -> None:
    with pytest.raises(AttributeError):
        seed_palette.light = None  # type: ignore[misc]
