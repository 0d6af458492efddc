"""Math utilities for common operations."""

from __future__ import annotations

import bisect
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)
T = TypeVar("T")

# Enough significant digits to quantize any finite float (max ~1.8e308)
_FLOAT_DIGITS = 330


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def round_decimal(value: float, places: int) -> Decimal:
    """Round half away from zero on the shortest decimal representation.

    `repr(float)` gives the shortest string that round-trips, so 0.125 rounds
    to 0.13 and 2.675 rounds to 2.68 regardless of binary representation error.

    Args:
        value: Value to round
        places: Number of decimal places (0 for integers)

    Returns:
        Rounded Decimal with exactly `places` fractional digits
    """
    exponent = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = _FLOAT_DIGITS + max(places, 0)
        rounded = Decimal(repr(float(value))).quantize(exponent, rounding=ROUND_HALF_UP)
    # -0.0 and values that round to zero render unsigned
    return rounded.copy_abs() if rounded.is_zero() else rounded


def round_half_away(value: float, places: int = 0) -> float:
    """Round half away from zero, returning a float.

    Example:
        >>> round_half_away(0.125, 2)
        0.13
        >>> round_half_away(-2.5)
        -3.0
    """
    result = float(round_decimal(value, places))
    return 0.0 if result == 0 else result


def wrap_hue(hue: float) -> float:
    """Wrap hue degrees into [0, 360)."""
    wrapped = hue % 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def band_lookup(value: float, starts: Sequence[float], labels: Sequence[T]) -> T:
    """Select the label of the half-open band containing value.

    Bands are defined by ascending, start-inclusive thresholds: band i covers
    [starts[i], starts[i + 1]). Values below the first start map to the first label.

    Args:
        value: Value to classify
        starts: Ascending band start thresholds
        labels: One label per band

    Returns:
        Label for the band containing value
    """
    index = bisect.bisect_right(starts, value) - 1
    return labels[max(index, 0)]
