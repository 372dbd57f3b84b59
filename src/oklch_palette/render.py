from __future__ import annotations

"""Presentation adapters for palettes.

These functions only format data that synthesis already produced:
``oklch()`` strings, CSS custom property blocks, a theme preset object for
utility-CSS frameworks, and flat color lists for UI code.
"""

import re
from enum import Enum
from typing import Dict, List, Optional

from .errors import InvalidInput
from .palette import Palette


DEFAULT_PREFIX = "brand"
DEFAULT_SELECTOR = ":root"
DEFAULT_DARK_SELECTOR = ".dark"

_PREFIX_RE = re.compile(r"[A-Za-z0-9_-]+")


def oklch_string(L: float, C: float, h: float) -> str:
    """Format OKLCH as ``oklch(62.4% 0.153 271.2)``.

    L is in OKLab units and printed as a percentage with one decimal,
    C with three decimals, h in degrees with one decimal.
    """
    return f"oklch({L * 100:.1f}% {C:.3f} {h:.1f})"


def _check_prefix(prefix: str) -> str:
    if not isinstance(prefix, str) or not _PREFIX_RE.fullmatch(prefix):
        raise InvalidInput(f"invalid CSS variable prefix: {prefix!r}")
    return prefix


def _var_name(prefix: str, index: int) -> str:
    return f"--{prefix}-{index}"


def render_css_variables(
    palette: Palette,
    *,
    prefix: str = DEFAULT_PREFIX,
    selector: str = DEFAULT_SELECTOR,
    dark_selector: str = DEFAULT_DARK_SELECTOR,
) -> str:
    """Render CSS custom properties, one selector block per present side.

    >>> print(render_css_variables(pal))  # doctest: +SKIP
    :root {
      --brand-1: oklch(99.0% 0.086 285.6);
      ...
    }
    .dark {
      ...
    }
    """
    _check_prefix(prefix)
    lines: List[str] = []
    for name, side in palette.sides():
        sel = selector if name == "light" else dark_selector
        lines.append(f"{sel} {{")
        for i, value in enumerate(side.brand, start=1):
            lines.append(f"  {_var_name(prefix, i)}: {value};")
        lines.append("}")
    return "\n".join(lines)


def render_theme_preset(palette: Palette, *, prefix: str = DEFAULT_PREFIX) -> dict:
    """Build a theme preset for a utility-CSS theming system.

    The color scale references CSS variables; the variable values
    themselves are returned per side under ``baseVariablesBySide``. The
    consumer is expected to emit ``light`` under a root selector and
    ``dark`` under its dark-mode selector.
    """
    _check_prefix(prefix)
    steps = palette.steps
    scale: Dict[str, str] = {
        str(i): f"var({_var_name(prefix, i)})" for i in range(1, steps + 1)
    }
    by_side: Dict[str, Dict[str, str]] = {}
    for name, side in palette.sides():
        by_side[name] = {
            _var_name(prefix, i): value for i, value in enumerate(side.brand, start=1)
        }
    return {
        "theme": {"extend": {"colors": {prefix: scale}}},
        "baseVariablesBySide": by_side,
    }


class ExportFormat(Enum):
    """Supported output formats for exported color lists."""

    OKLCH = "oklch"
    HEX = "hex"
    SRGB_01 = "srgb_01"
    SRGB_255 = "srgb_255"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise InvalidInput(f"Unknown export format: {value}")


def export_palette(
    palette: Palette, fmt: "ExportFormat | str", side: Optional[str] = None
) -> List[object]:
    """Convert one side of a palette to a list of colors in the given format.

    ``side`` defaults to ``light`` when present, else ``dark``.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    sides = dict(palette.sides())
    if side is None:
        side = next(iter(sides))
    if side not in sides:
        raise InvalidInput(f"palette has no {side!r} side")
    colors = sides[side].colors

    if export_fmt == ExportFormat.OKLCH:
        return [c.css for c in colors]
    if export_fmt == ExportFormat.HEX:
        return [c.hex for c in colors]
    if export_fmt == ExportFormat.SRGB_01:
        return [c.srgb for c in colors]
    if export_fmt == ExportFormat.SRGB_255:
        colors_255 = []
        for r, g, b in (c.srgb for c in colors):
            colors_255.append(
                tuple(int(round(max(0.0, min(1.0, v)) * 255)) for v in (r, g, b))
            )
        return colors_255
    raise InvalidInput(f"Unsupported export format: {fmt}")


# Alias
to_css_vars = render_css_variables


__all__ = [
    "DEFAULT_PREFIX",
    "DEFAULT_SELECTOR",
    "DEFAULT_DARK_SELECTOR",
    "oklch_string",
    "render_css_variables",
    "render_theme_preset",
    "ExportFormat",
    "export_palette",
    "to_css_vars",
]
