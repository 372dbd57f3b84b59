from __future__ import annotations

"""Color conversion engine for sRGB, OKLab and OKLCH.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between gamma-encoded sRGB (D65) and OKLab /
OKLCH using the fixed matrices published with OKLab by Björn Ottosson.

None of the conversions clamp. Device values outside [0, 1] are returned
unchanged so that :mod:`oklch_palette.gamut` can detect them.
"""

import math
from typing import Protocol, Tuple

import numpy as np


SRGB = Tuple[float, float, float]
OKLAB = Tuple[float, float, float]
OKLCH = Tuple[float, float, float]

# Published 10-digit matrices; M1/M1_INV and M2/M2_INV round-trip sRGB to about 2e-6.
# Linear sRGB -> LMS
M1 = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ],
    dtype=np.float64,
)
# LMS' (cube root) -> OKLab
M2 = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)
# OKLab -> LMS'
M2_INV = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ],
    dtype=np.float64,
)
# LMS -> linear sRGB
M1_INV = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ],
    dtype=np.float64,
)


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def srgb_to_oklab(self, r: float, g: float, b: float) -> OKLAB: ...

    def oklab_to_srgb(self, L: float, a: float, b: float) -> SRGB: ...

    def srgb_to_oklch(self, r: float, g: float, b: float) -> OKLCH: ...

    def oklch_to_srgb(self, L: float, C: float, h: float) -> SRGB: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation based on OKLab/OKLCH and sRGB (D65)."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        h_norm = h % 360.0
        # -1e-17 % 360.0 rounds to 360.0
        return 0.0 if h_norm >= 360.0 else h_norm

    def srgb_to_oklab(self, r: float, g: float, b: float) -> OKLAB:
        """Convert gamma-encoded sRGB to OKLab (L nominally in [0, 1])."""
        lin = srgb_to_linear(np.array([r, g, b], dtype=np.float64))
        lms_ = np.cbrt(M1 @ lin)
        L, a, b_ = M2 @ lms_
        return (float(L), float(a), float(b_))

    def oklab_to_srgb(self, L: float, a: float, b: float) -> SRGB:
        """Convert OKLab to gamma-encoded sRGB, without clipping."""
        lms = (M2_INV @ np.array([L, a, b], dtype=np.float64)) ** 3
        r, g, b_ = linear_to_srgb(M1_INV @ lms)
        return (float(r), float(g), float(b_))

    def oklab_to_oklch(self, L: float, a: float, b: float) -> OKLCH:
        """Polar form of OKLab: chroma is |(a, b)|, hue its angle in degrees."""
        C = math.hypot(a, b)
        h = self.normalize_hue(math.degrees(math.atan2(b, a)))
        return (L, C, h)

    def oklch_to_oklab(self, L: float, C: float, h: float) -> OKLAB:
        h_rad = math.radians(h)
        return (L, C * math.cos(h_rad), C * math.sin(h_rad))

    def srgb_to_oklch(self, r: float, g: float, b: float) -> OKLCH:
        """Convert sRGB in [0, 1] to OKLCH."""
        return self.oklab_to_oklch(*self.srgb_to_oklab(r, g, b))

    def oklch_to_srgb(self, L: float, C: float, h: float) -> SRGB:
        """Convert OKLCH to sRGB. Channels may fall outside [0, 1]."""
        return self.oklab_to_srgb(*self.oklch_to_oklab(L, C, h))


def srgb_to_linear(c: np.ndarray) -> np.ndarray:
    """Gamma-decode sRGB channels. Vectorized over any shape."""
    c = np.asarray(c, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def linear_to_srgb(c: np.ndarray) -> np.ndarray:
    """Gamma-encode linear channels. Negative inputs stay on the linear segment."""
    c = np.asarray(c, dtype=np.float64)
    # Only the positive branch is taken for c > 0.0031308.
    safe = np.maximum(c, 0.0031308)
    return np.where(c <= 0.0031308, 12.92 * c, 1.055 * safe ** (1.0 / 2.4) - 0.055)


_DEFAULT_ENGINE = DefaultColorEngine()


def default_engine() -> DefaultColorEngine:
    """Return the shared stateless :class:`DefaultColorEngine`."""
    return _DEFAULT_ENGINE


def srgb_to_oklab(r: float, g: float, b: float) -> OKLAB:
    return _DEFAULT_ENGINE.srgb_to_oklab(r, g, b)


def oklab_to_srgb(L: float, a: float, b: float) -> SRGB:
    return _DEFAULT_ENGINE.oklab_to_srgb(L, a, b)


def oklab_to_oklch(L: float, a: float, b: float) -> OKLCH:
    return _DEFAULT_ENGINE.oklab_to_oklch(L, a, b)


def oklch_to_oklab(L: float, C: float, h: float) -> OKLAB:
    return _DEFAULT_ENGINE.oklch_to_oklab(L, C, h)


def srgb_to_oklch(r: float, g: float, b: float) -> OKLCH:
    return _DEFAULT_ENGINE.srgb_to_oklch(r, g, b)


def oklch_to_srgb(L: float, C: float, h: float) -> SRGB:
    return _DEFAULT_ENGINE.oklch_to_srgb(L, C, h)


__all__ = [
    "SRGB",
    "OKLAB",
    "OKLCH",
    "ColorEngine",
    "DefaultColorEngine",
    "default_engine",
    "srgb_to_linear",
    "linear_to_srgb",
    "srgb_to_oklab",
    "oklab_to_srgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "srgb_to_oklch",
    "oklch_to_srgb",
]
