from __future__ import annotations

"""Exception types raised by oklch_palette."""


class InvalidInput(ValueError):
    """Raised when user supplied text cannot be interpreted.

    This covers seed colors that are not 3/4/6/8-digit hex codes, unknown
    mode or gamut names, and unusable CSS variable prefixes. Numeric
    conditions inside synthesis never raise; they are clamped instead.
    """


__all__ = ["InvalidInput"]
