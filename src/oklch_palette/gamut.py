from __future__ import annotations

"""sRGB gamut handling for OKLCH colors.

Out-of-gamut colors are pulled in by shrinking chroma only; lightness and
hue are never touched. The search is bounded and lossy: when it runs out
of attempts the last computed color is returned as-is.
"""

import logging
from typing import Optional, Sequence, Tuple

from .engine import OKLCH, SRGB, ColorEngine, default_engine


logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 6
REDUCTION_FACTOR = 0.85


def is_in_gamut(rgb: Sequence[float]) -> bool:
    """True iff every channel lies in [0, 1] inclusive."""
    r, g, b = rgb
    return 0.0 <= r <= 1.0 and 0.0 <= g <= 1.0 and 0.0 <= b <= 1.0


def map_to_gamut(
    L: float,
    C: float,
    h: float,
    *,
    engine: Optional[ColorEngine] = None,
    max_attempts: int = MAX_ATTEMPTS,
    reduction_factor: float = REDUCTION_FACTOR,
) -> Tuple[OKLCH, SRGB]:
    """Reduce chroma until the OKLCH color fits sRGB.

    Returns ``((L, C_adj, h), (r, g, b))``. At most ``max_attempts``
    reductions by ``reduction_factor`` are tried. If the color is still out
    of gamut afterwards, the last (unclipped) result is returned.
    """
    if engine is None:
        engine = default_engine()

    C_curr = C
    rgb = engine.oklch_to_srgb(L, C_curr, h)
    attempts = 0
    while not is_in_gamut(rgb) and C_curr > 0.0 and attempts < max_attempts:
        C_curr *= reduction_factor
        rgb = engine.oklch_to_srgb(L, C_curr, h)
        attempts += 1

    if not is_in_gamut(rgb):
        logger.debug(
            "gamut mapping gave up after %d attempts: L=%.4f C=%.4f h=%.2f rgb=%s",
            attempts,
            L,
            C_curr,
            h,
            tuple(round(v, 4) for v in rgb),
        )
    return (L, C_curr, h), rgb


__all__ = ["MAX_ATTEMPTS", "REDUCTION_FACTOR", "is_in_gamut", "map_to_gamut"]
