"""OKLCH to sRGB conversion and gamut mapping.

Matrices are Björn Ottosson's OKLab definitions. All functions are pure.
"""

from __future__ import annotations

import math

import numpy as np

from hueprint.core.color.models import Color
from hueprint.core.utils.math import clamp, round_half_away

# OKLab -> non-linear LMS (cube roots)
_LMS_FROM_OKLAB = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)

# LMS -> linear sRGB
_LINEAR_SRGB_FROM_LMS = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)

GAMUT_EPSILON = 1e-6
_CHROMA_SEARCH_STEPS = 24
# No sRGB color exceeds ~0.323 OKLCH chroma
_MAX_SRGB_CHROMA = 0.4
# Past this chroma every channel is saturated; larger values would overflow the cube
_MAX_CONVERSION_CHROMA = 1e4


def oklch_to_oklab(color: Color) -> np.ndarray:
    """Convert polar OKLCH to rectangular OKLab [L, a, b]."""
    hue = math.radians(color.h)
    chroma = min(color.c, _MAX_CONVERSION_CHROMA)
    return np.array([color.l, chroma * math.cos(hue), chroma * math.sin(hue)])


def oklab_to_linear_srgb(lab: np.ndarray) -> np.ndarray:
    lms = (_LMS_FROM_OKLAB @ lab) ** 3
    return _LINEAR_SRGB_FROM_LMS @ lms


def oklch_to_linear_srgb(color: Color) -> np.ndarray:
    """Convert to linear-light sRGB. Channels may fall outside [0, 1]."""
    return oklab_to_linear_srgb(oklch_to_oklab(color))


def linear_to_gamma(channels: np.ndarray) -> np.ndarray:
    """Apply the sRGB transfer function (sign-preserving)."""
    magnitude = np.abs(channels)
    encoded = np.where(
        magnitude <= 0.0031308,
        12.92 * magnitude,
        1.055 * np.power(magnitude, 1 / 2.4) - 0.055,
    )
    return np.sign(channels) * encoded


def oklch_to_srgb(color: Color) -> np.ndarray:
    """Convert to gamma-encoded sRGB. Channels may fall outside [0, 1]."""
    return linear_to_gamma(oklch_to_linear_srgb(color))


def in_srgb_gamut(color: Color, epsilon: float = GAMUT_EPSILON) -> bool:
    rgb = oklch_to_linear_srgb(color)
    return bool(np.all(rgb >= -epsilon) and np.all(rgb <= 1.0 + epsilon))


def max_chroma_in_gamut(lightness: float, chroma: float, hue: float) -> float:
    """Largest chroma <= `chroma` that stays inside sRGB at this lightness and hue.

    Uses bisection; lightness and hue are never altered.

    Args:
        lightness: OKLCH lightness in [0, 1]
        chroma: Requested chroma
        hue: Hue in degrees, [0, 360)

    Returns:
        Chroma clipped to the gamut boundary
    """
    if in_srgb_gamut(Color(l=lightness, c=chroma, h=hue)):
        return chroma

    low, high = 0.0, min(chroma, _MAX_SRGB_CHROMA)
    for _ in range(_CHROMA_SEARCH_STEPS):
        mid = (low + high) / 2
        if in_srgb_gamut(Color(l=lightness, c=mid, h=hue)):
            low = mid
        else:
            high = mid
    return low


def clip_to_gamut(color: Color) -> Color:
    """Reduce chroma until the color is displayable in sRGB."""
    chroma = max_chroma_in_gamut(color.l, color.c, color.h)
    if chroma == color.c:
        return color
    return color.model_copy(update={"c": chroma})


def to_hex(color: Color) -> str:
    """Render as #rrggbb after gamut clipping.

    Example:
        >>> to_hex(Color(l=1.0, c=0.0, h=0.0))
        '#ffffff'
    """
    rgb = oklch_to_srgb(clip_to_gamut(color))
    channels = [int(round_half_away(clamp(float(v), 0.0, 1.0) * 255)) for v in rgb]
    return "#" + "".join(f"{v:02x}" for v in channels)


def to_css(color: Color) -> str:
    """Render as a CSS oklch() expression."""
    parts = f"{color.l:g} {color.c:g} {color.h:g}"
    if color.alpha is not None and color.alpha < 1.0:
        return f"oklch({parts} / {color.alpha:g})"
    return f"oklch({parts})"
