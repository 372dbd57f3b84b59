from __future__ import annotations

"""High-level public API for generating shade palettes.

This module provides :func:`synthesize`, which coordinates seed parsing,
color-space conversion, lightness ramp sampling, chroma shaping and sRGB
gamut mapping to produce a :class:`oklch_palette.palette.Palette`.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence

from .color_types import Color, parse_hex_color
from .engine import ColorEngine, default_engine
from .gamut import map_to_gamut
from .options import PaletteOptions, resolve_options
from .palette import Palette, PaletteMeta, PaletteSide
from .ramps import adjust_seed_chroma, dark_ramp, light_ramp, step_chroma
from .render import oklch_string


logger = logging.getLogger(__name__)


def synthesize(
    seed: str,
    options: "PaletteOptions | Mapping[str, Any] | None" = None,
    *,
    engine: Optional[ColorEngine] = None,
    **overrides: Any,
) -> Palette:
    """Generate light and/or dark shade ramps from one seed color.

    Parameters
    ----------
    seed:
        Hex color code, ``#`` optional, 3/4/6/8 digits.
    options:
        :class:`PaletteOptions` or a mapping with the same keys.
    engine:
        Optional ColorEngine for color space conversions. If None, the
        shared DefaultColorEngine is used.
    **overrides:
        ``steps``, ``mode``, ``gamut`` or ``boost_low_chroma``; these take
        precedence over ``options``.

    Returns
    -------
    Palette
        Every step of both ramps shares the seed's hue.

    Raises
    ------
    InvalidInput
        If the seed is not a valid hex code or an option value is unknown.
    """
    opts = resolve_options(options, **overrides)
    if engine is None:
        engine = default_engine()

    r, g, b, alpha = parse_hex_color(seed)
    L0, C0, hue = engine.srgb_to_oklch(r, g, b)
    target_C = adjust_seed_chroma(C0, opts.boost_low_chroma)
    logger.debug(
        "seed %s -> oklch(%.4f %.4f %.2f), target C=%.4f, options=%s",
        seed,
        L0,
        C0,
        hue,
        target_C,
        opts.to_dict(),
    )

    light = None
    dark = None
    if opts.mode.has_light:
        light = _build_side(light_ramp(opts.steps), target_C, hue, engine)
    if opts.mode.has_dark:
        dark = _build_side(dark_ramp(opts.steps), target_C, hue, engine)

    meta = PaletteMeta(
        hue=hue,
        seed=seed,
        seed_oklch=(L0, C0, hue),
        seed_alpha=alpha,
        target_chroma=target_C,
        options=opts,
    )
    return Palette(meta=meta, light=light, dark=dark)


def _build_side(
    lightness: Sequence[float], target_C: float, hue: float, engine: ColorEngine
) -> PaletteSide:
    n = len(lightness)
    colors: List[Color] = []
    for i, L in enumerate(lightness):
        C = step_chroma(target_C, i, n)
        (L_adj, C_adj, h_adj), rgb = map_to_gamut(L, C, hue, engine=engine)
        colors.append(
            Color(
                oklch=(L_adj, C_adj, h_adj),
                srgb=rgb,
                css=oklch_string(L_adj, C_adj, h_adj),
            )
        )
    return PaletteSide(colors=tuple(colors))


make_palette = synthesize


__all__ = ["synthesize", "make_palette"]
