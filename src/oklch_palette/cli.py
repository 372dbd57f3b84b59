"""
Command line front end.

Usage:
    oklch-palette "#6753ff"
    oklch-palette 6753ff --steps 10 --mode dark --format preset
    oklch-palette --random --seed-rng 7 --format hex

Defaults come from `settings` (YAML config and `OKP_*` variables); flags win.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np

from . import __version__, settings
from .api import synthesize
from .errors import InvalidInput
from .log import setup_default_logging
from .options import Gamut, Mode
from .palette import Palette
from .render import render_css_variables, render_theme_preset


logger = logging.getLogger(__name__)

FORMATS = ("css", "preset", "json", "hex")


def random_seed(rng: Optional[np.random.Generator] = None) -> str:
    """Return a random ``#rrggbb`` seed."""
    if rng is None:
        rng = np.random.default_rng()
    return f"#{int(rng.integers(0, 0x1000000)):06x}"


def build_parser() -> argparse.ArgumentParser:
    cfg = settings.get()
    parser = argparse.ArgumentParser(
        prog="oklch-palette",
        description="Generate OKLCH shade ramps from a seed color.",
    )
    parser.add_argument("seed", nargs="?", help="seed color, e.g. '#6753ff' or 'fa0'")
    parser.add_argument("--steps", type=int, default=cfg.steps, help="shades per ramp (2-24)")
    parser.add_argument(
        "--mode", choices=[m.value for m in Mode], default=cfg.mode, help="ramps to emit"
    )
    parser.add_argument(
        "--gamut",
        choices=[g.value for g in Gamut],
        default=cfg.gamut,
        help="declared target gamut (only srgb is mapped)",
    )
    parser.add_argument(
        "--no-boost",
        dest="boost_low_chroma",
        action="store_false",
        default=cfg.boost_low_chroma,
        help="do not raise the chroma of near-gray seeds",
    )
    parser.add_argument("--format", choices=FORMATS, default="css")
    parser.add_argument("--prefix", default=cfg.prefix, help="CSS variable prefix")
    parser.add_argument("--selector", default=cfg.selector)
    parser.add_argument("--dark-selector", default=cfg.dark_selector)
    parser.add_argument("--random", action="store_true", help="use a random seed")
    parser.add_argument("--seed-rng", type=int, default=None, help="RNG seed for --random")
    parser.add_argument("-o", "--output", type=Path, default=None, help="write to file")
    parser.add_argument("--log-level", default=cfg.log_level)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_palette(palette: Palette, fmt: str, args: argparse.Namespace) -> str:
    if fmt == "css":
        return render_css_variables(
            palette,
            prefix=args.prefix,
            selector=args.selector,
            dark_selector=args.dark_selector,
        )
    if fmt == "preset":
        return json.dumps(render_theme_preset(palette, prefix=args.prefix), indent=2)
    if fmt == "json":
        return json.dumps(palette.to_dict(), indent=2)
    if fmt == "hex":
        lines: List[str] = []
        for name, side in palette.sides():
            lines.extend(f"{name} {i} {h}" for i, h in enumerate(side.hex(), start=1))
        return "\n".join(lines)
    raise ValueError(f"Unknown format: {fmt}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)

    if args.random:
        seed = random_seed(np.random.default_rng(args.seed_rng))
        logger.info("random seed: %s", seed)
    elif args.seed is None:
        parser.error("a seed color is required unless --random is given")
    else:
        seed = args.seed

    try:
        palette = synthesize(
            seed,
            steps=args.steps,
            mode=args.mode,
            gamut=args.gamut,
            boost_low_chroma=args.boost_low_chroma,
        )
        text = format_palette(palette, args.format, args)
    except InvalidInput as exc:
        logger.error("%s", exc)
        return 2

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text + "\n", encoding="utf-8")
        logger.info("wrote %s", args.output)
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
