from __future__ import annotations

import pytest

from oklch_palette import InvalidInput, hex_to_srgb, parse_hex_color
from oklch_palette.color_types import srgb_to_hex


def _approx_tuple(t, p=6):
    return tuple(round(v, p) for v in t)


def test_parse_hex_color_valid_variants() -> None:
    assert _approx_tuple(parse_hex_color("#112233")) == _approx_tuple(
        (0x11 / 255.0, 0x22 / 255.0, 0x33 / 255.0, 1.0)
    )
    assert _approx_tuple(parse_hex_color("112233cc")) == _approx_tuple(
        (0x11 / 255.0, 0x22 / 255.0, 0x33 / 255.0, 0xCC / 255.0)
    )
    assert parse_hex_color("  #FFFFFF ") == (1.0, 1.0, 1.0, 1.0)


def test_parse_hex_color_short_forms_are_doubled() -> None:
    assert parse_hex_color("#abc") == parse_hex_color("#aabbcc")
    assert parse_hex_color("abc8") == parse_hex_color("#aabbcc88")
    assert parse_hex_color("#FA0") == parse_hex_color("#ffaa00")


def test_hex_to_srgb_drops_alpha() -> None:
    assert hex_to_srgb("#ff000080") == (1.0, 0.0, 0.0)
    assert hex_to_srgb("#000") == (0.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "text",
    ["notacolor", "#12", "#12345", "#1234567", "#123456789", "#ggg", "", "#", "##123"],
)
def test_parse_hex_color_invalid(text: str) -> None:
    with pytest.raises(InvalidInput):
        parse_hex_color(text)


def test_parse_hex_color_rejects_non_string() -> None:
    with pytest.raises(InvalidInput):
        parse_hex_color(0x6753FF)  # type: ignore[arg-type]


def test_invalid_input_is_value_error() -> None:
    with pytest.raises(ValueError, match="notacolor"):
        parse_hex_color("notacolor")


def test_srgb_to_hex_clips() -> None:
    assert srgb_to_hex((1.0, 0.0, 0.5)) == "#ff0080"
    assert srgb_to_hex((1.2, -0.1, 0.0)) == "#ff0000"
