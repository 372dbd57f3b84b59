from __future__ import annotations

"""Core color types and seed parsing.

Seed colors arrive as hex text ("#6753ff", "fa0", "#6753ff80"). They are
parsed into gamma-encoded sRGB channels in [0, 1]; everything downstream
works in OKLCH and produces :class:`Color` snapshots.
"""

import re
from dataclasses import dataclass
from typing import Tuple

from .engine import OKLCH, SRGB
from .errors import InvalidInput


RGBA = Tuple[float, float, float, float]

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_HEX_LENGTHS = (3, 4, 6, 8)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def parse_hex_color(text: str) -> RGBA:
    """Parse a hex color code into RGBA in [0, 1].

    Accepted forms (case-insensitive, leading ``#`` optional):
    ``rgb``, ``rgba``, ``rrggbb``, ``rrggbbaa``. Short forms are
    channel-doubled; a missing alpha is 1.0.

    Raises
    ------
    InvalidInput
        If the text is not one of the accepted forms.
    """
    if not isinstance(text, str):
        raise InvalidInput(f"hex color must be a string, got {type(text).__name__}")
    s = text.strip()
    if s.startswith("#"):
        s = s[1:]
    if len(s) not in _HEX_LENGTHS or not _HEX_RE.fullmatch(s):
        raise InvalidInput(
            f"invalid hex color: '{text}' (expected 3, 4, 6 or 8 hex digits)"
        )
    if len(s) in (3, 4):
        s = "".join(ch * 2 for ch in s)
    if len(s) == 6:
        s += "ff"
    r, g, b, a = (int(s[i : i + 2], 16) / 255.0 for i in range(0, 8, 2))
    return (r, g, b, a)


def hex_to_srgb(text: str) -> SRGB:
    """Parse a hex color code into sRGB, dropping any alpha."""
    r, g, b, _ = parse_hex_color(text)
    return (r, g, b)


def srgb_to_hex(rgb: SRGB) -> str:
    """Return ``#rrggbb`` for sRGB channels, clipping to [0, 1]."""
    r, g, b = rgb
    r_i = int(round(_clamp01(r) * 255))
    g_i = int(round(_clamp01(g) * 255))
    b_i = int(round(_clamp01(b) * 255))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


@dataclass(frozen=True)
class Color:
    """One palette step.

    Attributes
    ----------
    oklch:
        (L, C, h) after gamut mapping. L is in OKLab units (0..1),
        h in degrees [0, 360).
    srgb:
        Device color for ``oklch``. May lie slightly outside [0, 1] when
        gamut mapping ran out of attempts.
    css:
        ``oklch(...)`` color-function string.
    """

    oklch: OKLCH
    srgb: SRGB
    css: str

    @property
    def hex(self) -> str:
        """``#rrggbb`` approximation (clipped) of the device color."""
        return srgb_to_hex(self.srgb)

    def __str__(self) -> str:
        return self.css


__all__ = [
    "RGBA",
    "Color",
    "parse_hex_color",
    "hex_to_srgb",
    "srgb_to_hex",
]
