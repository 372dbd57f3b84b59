from __future__ import annotations

"""Lightness ramps and chroma shaping.

Both ramps share the same smoothstep shaping and differ only in their
endpoints: the light ramp runs bright to dim, the dark ramp dim to bright.
"""

from typing import List

import numpy as np


LIGHT_L_START = 0.99
LIGHT_L_END = 0.25
DARK_L_START = 0.14
DARK_L_END = 0.93

LOW_CHROMA_THRESHOLD = 0.03
LOW_CHROMA_BOOST = 0.06
HIGH_CHROMA_THRESHOLD = 0.2
HIGH_CHROMA_CAP = 0.18

EDGE_DAMPING = 0.6
MAX_CHROMA = 0.37


def smoothstep(t: np.ndarray) -> np.ndarray:
    """``t^2 (3 - 2t)``, vectorized."""
    t = np.asarray(t, dtype=np.float64)
    return t * t * (3.0 - 2.0 * t)


def sample_curve(n: int, start: float, end: float) -> List[float]:
    """Sample ``n`` values from ``start`` to ``end`` along a smoothstep curve."""
    if n < 2:
        raise ValueError("n must be at least 2.")
    t = np.linspace(0.0, 1.0, n)
    s = smoothstep(t)
    return [float(v) for v in start + (end - start) * s]


def light_ramp(n: int) -> List[float]:
    return sample_curve(n, LIGHT_L_START, LIGHT_L_END)


def dark_ramp(n: int) -> List[float]:
    return sample_curve(n, DARK_L_START, DARK_L_END)


def adjust_seed_chroma(C: float, boost_low_chroma: bool = True) -> float:
    """Derive the ramp's target chroma from the seed chroma.

    Near-gray seeds are boosted so the palette keeps a visible tint, and
    very saturated seeds are capped.
    """
    if boost_low_chroma and C < LOW_CHROMA_THRESHOLD:
        return LOW_CHROMA_BOOST
    if C > HIGH_CHROMA_THRESHOLD:
        return HIGH_CHROMA_CAP
    return C


def step_chroma(target_C: float, index: int, n: int) -> float:
    """Chroma for step ``index`` of an ``n``-step ramp, damped at both ends."""
    edge = index == 0 or index == n - 1
    c = target_C * (EDGE_DAMPING if edge else 1.0)
    return max(0.0, min(MAX_CHROMA, c))


__all__ = [
    "LIGHT_L_START",
    "LIGHT_L_END",
    "DARK_L_START",
    "DARK_L_END",
    "MAX_CHROMA",
    "smoothstep",
    "sample_curve",
    "light_ramp",
    "dark_ramp",
    "adjust_seed_chroma",
    "step_chroma",
]
