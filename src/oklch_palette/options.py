from __future__ import annotations

"""Generator options.

:class:`PaletteOptions` is an immutable bundle of the knobs accepted by
:func:`oklch_palette.synthesize`. String values for ``mode`` and ``gamut``
are coerced to their enums; the step count is clamped into [2, 24].
"""

import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Mapping, Optional

from .errors import InvalidInput


MIN_STEPS = 2
MAX_STEPS = 24
DEFAULT_STEPS = 12


class Mode(Enum):
    """Which ramps a palette carries."""

    LIGHT = "light"
    DARK = "dark"
    BOTH = "both"

    @classmethod
    def from_value(cls, value: "Mode | str") -> "Mode":
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == str(value).strip().lower():
                return mode
        raise InvalidInput(f"Unknown mode: {value!r} (expected light, dark or both)")

    @property
    def has_light(self) -> bool:
        return self in (Mode.LIGHT, Mode.BOTH)

    @property
    def has_dark(self) -> bool:
        return self in (Mode.DARK, Mode.BOTH)


class Gamut(Enum):
    """Target display gamut.

    Only sRGB bounds are checked; ``P3`` is accepted and recorded so that
    callers can already declare it.
    """

    SRGB = "srgb"
    P3 = "p3"

    @classmethod
    def from_value(cls, value: "Gamut | str") -> "Gamut":
        if isinstance(value, cls):
            return value
        for gamut in cls:
            if gamut.value == str(value).strip().lower():
                return gamut
        raise InvalidInput(f"Unknown gamut: {value!r} (expected srgb or p3)")


def clamp_steps(steps: Optional[float]) -> int:
    """Clamp a requested step count into [MIN_STEPS, MAX_STEPS]."""
    if steps is None:
        return DEFAULT_STEPS
    try:
        value = float(steps)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"steps must be a number, got {steps!r}") from exc
    if math.isnan(value):
        return DEFAULT_STEPS
    return int(max(MIN_STEPS, min(MAX_STEPS, value)))


@dataclass(frozen=True)
class PaletteOptions:
    """Options for palette synthesis.

    Attributes
    ----------
    steps:
        Number of shades per ramp. Clamped into [2, 24] on construction.
    mode:
        ``light``, ``dark`` or ``both``.
    gamut:
        Declared target gamut. Does not alter the computation.
    boost_low_chroma:
        Give near-gray seeds a minimum chroma of 0.06.
    """

    steps: int = DEFAULT_STEPS
    mode: Mode = Mode.BOTH
    gamut: Gamut = Gamut.SRGB
    boost_low_chroma: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", clamp_steps(self.steps))
        object.__setattr__(self, "mode", Mode.from_value(self.mode))
        object.__setattr__(self, "gamut", Gamut.from_value(self.gamut))
        object.__setattr__(self, "boost_low_chroma", bool(self.boost_low_chroma))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PaletteOptions":
        """Build options from a mapping, ignoring unknown or ``None`` values."""
        names = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in names and v is not None}
        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "PaletteOptions":
        kwargs = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **kwargs) if kwargs else self

    def to_dict(self) -> dict:
        return {
            "steps": self.steps,
            "mode": self.mode.value,
            "gamut": self.gamut.value,
            "boost_low_chroma": self.boost_low_chroma,
        }


def resolve_options(
    options: "PaletteOptions | Mapping[str, Any] | None" = None, **overrides: Any
) -> PaletteOptions:
    """Normalize ``options`` and apply keyword overrides."""
    if options is None:
        base = PaletteOptions()
    elif isinstance(options, PaletteOptions):
        base = options
    elif isinstance(options, Mapping):
        base = PaletteOptions.from_mapping(options)
    else:
        raise InvalidInput(f"unsupported options type: {type(options).__name__}")
    unknown = set(overrides) - {f.name for f in fields(PaletteOptions)}
    if unknown:
        raise TypeError(f"unexpected option(s): {', '.join(sorted(unknown))}")
    return base.with_overrides(**overrides)


__all__ = [
    "MIN_STEPS",
    "MAX_STEPS",
    "DEFAULT_STEPS",
    "Mode",
    "Gamut",
    "PaletteOptions",
    "clamp_steps",
    "resolve_options",
]
