"""Stable string keys derived from color coordinates.

All rounding goes through `round_decimal` (half away from zero on the
shortest decimal repr), so 0.0125 always becomes 0.013 no matter how the
float is stored in binary.
"""

from __future__ import annotations

from decimal import Decimal

from hueprint.core.color.models import Color
from hueprint.core.utils.math import round_decimal

INTELLIGENCE_KEY_PREFIX = "color-intel:"
CORRELATION_PREFIX = "pending-ai-"

_FULL_TURN = Decimal(360)


def _wrapped_hue(hue: float, places: int) -> Decimal:
    rounded = round_decimal(hue, places)
    return rounded - _FULL_TURN if rounded >= _FULL_TURN else rounded


def _compact(value: Decimal) -> str:
    """Shortest plain decimal form: 240.0 -> '240', 0.10 -> '0.1'."""
    return format(value.normalize(), "f")


def fingerprint(color: Color) -> str:
    """Exact-lookup key: L and C to 3 decimals, H to the nearest integer.

    Example:
        >>> fingerprint(Color(l=0.5, c=0.12, h=240))
        '0.500-0.120-240'
    """
    lightness = round_decimal(color.l, 3)
    chroma = round_decimal(color.c, 3)
    hue = _wrapped_hue(color.h, 0)
    return f"{lightness}-{chroma}-{hue}"


def intelligence_fingerprint(color: Color) -> str:
    """Coarser key so near-duplicate colors share one intelligence entry.

    L and C are rounded to 2 decimals, H to 1 decimal, each rendered in
    compact form.

    Example:
        >>> intelligence_fingerprint(Color(l=0.65, c=0.12, h=240))
        '0.65-0.12-240'
    """
    lightness = _compact(round_decimal(color.l, 2))
    chroma = _compact(round_decimal(color.c, 2))
    hue = _compact(_wrapped_hue(color.h, 1))
    return f"{lightness}-{chroma}-{hue}"


def cache_key(color: Color) -> str:
    """Vector cache key for a color's augmented descriptor."""
    return f"{INTELLIGENCE_KEY_PREFIX}{intelligence_fingerprint(color)}"


def correlation_id(color: Color) -> str:
    """Identifier handed back while generation is pending."""
    return f"{CORRELATION_PREFIX}{fingerprint(color)}"


def quantize(color: Color) -> Color:
    """Round a color to fingerprint precision.

    `fingerprint(quantize(c)) == fingerprint(c)` for every valid color.
    """
    return Color(
        l=float(round_decimal(color.l, 3)),
        c=float(round_decimal(color.c, 3)),
        h=float(_wrapped_hue(color.h, 0)),
        alpha=color.alpha,
    )
