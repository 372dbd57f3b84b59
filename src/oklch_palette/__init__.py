"""Public entrypoint for the oklch_palette library.

Turns one seed color into perceptually uniform OKLCH shade ramps and
renders them as CSS custom properties or a theme preset. This module
re-exports the user-facing types and functions so applications can import
from ``oklch_palette`` directly.
"""

__version__ = "0.1.0"

from .errors import InvalidInput
from .engine import (
    ColorEngine,
    DefaultColorEngine,
    oklab_to_oklch,
    oklab_to_srgb,
    oklch_to_oklab,
    oklch_to_srgb,
    srgb_to_oklab,
    srgb_to_oklch,
)
from .color_types import Color, hex_to_srgb, parse_hex_color
from .gamut import is_in_gamut, map_to_gamut
from .options import Gamut, Mode, PaletteOptions
from .palette import Palette, PaletteMeta, PaletteSide
from .api import make_palette, synthesize
from .render import (
    ExportFormat,
    export_palette,
    oklch_string,
    render_css_variables,
    render_theme_preset,
    to_css_vars,
)

__all__ = [
    "__version__",
    "InvalidInput",
    "ColorEngine",
    "DefaultColorEngine",
    "srgb_to_oklab",
    "oklab_to_srgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "srgb_to_oklch",
    "oklch_to_srgb",
    "Color",
    "parse_hex_color",
    "hex_to_srgb",
    "is_in_gamut",
    "map_to_gamut",
    "Mode",
    "Gamut",
    "PaletteOptions",
    "Palette",
    "PaletteSide",
    "PaletteMeta",
    "synthesize",
    "make_palette",
    "oklch_string",
    "render_css_variables",
    "render_theme_preset",
    "to_css_vars",
    "ExportFormat",
    "export_palette",
]
