from __future__ import annotations

"""Container types for generated palettes.

A :class:`Palette` holds up to two ramps (``light`` and ``dark``) of equal
length plus metadata about the seed. All types are frozen; a palette is a
snapshot produced once per :func:`oklch_palette.synthesize` call.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .color_types import Color
from .engine import OKLCH
from .options import PaletteOptions


@dataclass(frozen=True)
class PaletteSide:
    """One ramp of shades, ordered by index (1-based in CSS output)."""

    colors: Tuple[Color, ...]

    @property
    def brand(self) -> Tuple[str, ...]:
        """The ramp as ``oklch(...)`` strings."""
        return tuple(c.css for c in self.colors)

    def hex(self) -> Tuple[str, ...]:
        return tuple(c.hex for c in self.colors)

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> Color:
        return self.colors[index]


@dataclass(frozen=True)
class PaletteMeta:
    """Information about how a palette was made.

    Attributes
    ----------
    hue:
        Seed hue in degrees [0, 360). Every step of both ramps uses it.
    seed:
        The seed text as given.
    seed_oklch:
        Seed color in OKLCH.
    seed_alpha:
        Alpha parsed from 4/8-digit seeds (1.0 otherwise). Not applied to
        the generated shades.
    target_chroma:
        Chroma derived from the seed before edge damping and gamut mapping.
    options:
        Resolved options used for synthesis.
    """

    hue: float
    seed: str = ""
    seed_oklch: Optional[OKLCH] = None
    seed_alpha: float = 1.0
    target_chroma: Optional[float] = None
    options: Optional[PaletteOptions] = None


@dataclass(frozen=True)
class Palette:
    """Generated palette. At least one of ``light`` / ``dark`` is present."""

    meta: PaletteMeta
    light: Optional[PaletteSide] = None
    dark: Optional[PaletteSide] = None

    def __post_init__(self) -> None:
        if self.light is None and self.dark is None:
            raise ValueError("Palette needs a light or a dark side.")
        if (
            self.light is not None
            and self.dark is not None
            and len(self.light) != len(self.dark)
        ):
            raise ValueError("light and dark sides must have the same length.")

    @property
    def steps(self) -> int:
        side = self.light if self.light is not None else self.dark
        assert side is not None
        return len(side)

    def sides(self) -> Iterator[Tuple[str, PaletteSide]]:
        """Yield ``(name, side)`` for present sides, light first."""
        if self.light is not None:
            yield "light", self.light
        if self.dark is not None:
            yield "dark", self.dark

    def to_dict(self) -> dict:
        """Plain-data view: sides as string lists plus metadata."""
        out: dict = {}
        for name, side in self.sides():
            out[name] = {"brand": list(side.brand)}
        meta: dict = {"hue": self.meta.hue}
        if self.meta.seed:
            meta["seed"] = self.meta.seed
        if self.meta.options is not None:
            meta["options"] = self.meta.options.to_dict()
        out["meta"] = meta
        return out


__all__ = ["Palette", "PaletteSide", "PaletteMeta"]
