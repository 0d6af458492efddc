"""Contrast metrics: WCAG 2.x ratio and APCA-W3 lightness contrast."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from hueprint.core.color.conversion import oklch_to_linear_srgb, oklch_to_srgb
from hueprint.core.color.models import Color, ContrastResult
from hueprint.core.utils.math import round_half_away

WHITE = Color(l=1.0, c=0.0, h=0.0)
BLACK = Color(l=0.0, c=0.0, h=0.0)

WCAG_AA_RATIO = 4.5
WCAG_AAA_RATIO = 7.0

_WCAG_COEFFICIENTS = np.array([0.2126, 0.7152, 0.0722])

# APCA-W3 0.0.98G-4g constants
_APCA_COEFFICIENTS = np.array([0.2126729, 0.7151522, 0.0721750])
_APCA_MAIN_TRC = 2.4
_APCA_BLACK_THRESHOLD = 0.022
_APCA_BLACK_CLAMP = 1.414
_APCA_DELTA_Y_MIN = 0.0005
_APCA_NORM_BG = 0.56
_APCA_NORM_TXT = 0.57
_APCA_REV_BG = 0.65
_APCA_REV_TXT = 0.62
_APCA_SCALE = 1.14
_APCA_LO_OFFSET = 0.027
_APCA_LO_CLIP = 0.1


def relative_luminance(color: Color) -> float:
    """WCAG relative luminance of the gamut-clamped color."""
    linear = np.clip(oklch_to_linear_srgb(color), 0.0, 1.0)
    return float(_WCAG_COEFFICIENTS @ linear)


def wcag_contrast_ratio(first: Color, second: Color) -> float:
    """Unrounded WCAG contrast ratio (1.0 to 21.0), order-independent."""
    lum_a = relative_luminance(first)
    lum_b = relative_luminance(second)
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def _apca_luminance(color: Color) -> float:
    rgb = np.clip(oklch_to_srgb(color), 0.0, 1.0)
    y = float(_APCA_COEFFICIENTS @ np.power(rgb, _APCA_MAIN_TRC))
    if y < _APCA_BLACK_THRESHOLD:
        y += (_APCA_BLACK_THRESHOLD - y) ** _APCA_BLACK_CLAMP
    return y


def apca_contrast(text: Color, background: Color) -> float:
    """APCA lightness contrast (Lc) of text over background.

    Positive values mean dark text on a light background, negative values
    light text on a dark background. Result is scaled to the usual -108..106
    range and rounded to one decimal.

    Args:
        text: Foreground color
        background: Background color

    Returns:
        Signed Lc value
    """
    y_text = _apca_luminance(text)
    y_bg = _apca_luminance(background)

    if abs(y_bg - y_text) < _APCA_DELTA_Y_MIN:
        return 0.0

    if y_bg > y_text:
        sapc = (y_bg**_APCA_NORM_BG - y_text**_APCA_NORM_TXT) * _APCA_SCALE
        output = 0.0 if sapc < _APCA_LO_CLIP else sapc - _APCA_LO_OFFSET
    else:
        sapc = (y_bg**_APCA_REV_BG - y_text**_APCA_REV_TXT) * _APCA_SCALE
        output = 0.0 if sapc > -_APCA_LO_CLIP else sapc + _APCA_LO_OFFSET

    return round_half_away(output * 100, 1)


def reported_ratio(first: Color, second: Color) -> float:
    """Contrast ratio as reported in descriptors (2 decimals, half away from zero)."""
    return round_half_away(wcag_contrast_ratio(first, second), 2)


def passing_indices(scale: Sequence[Color], background: Color, threshold: float) -> list[int]:
    """Indices of scale entries whose reported ratio meets threshold."""
    return [
        index
        for index, step in enumerate(scale)
        if reported_ratio(step, background) >= threshold
    ]


def contrast_against(color: Color, background: Color, scale: Sequence[Color]) -> ContrastResult:
    """Compute the contrast summary of color used as text on background.

    AA/AAA flags are evaluated on the reported (rounded) ratio so they can
    never disagree with it.
    """
    ratio = reported_ratio(color, background)
    return ContrastResult(
        wcag_aa=ratio >= WCAG_AA_RATIO,
        wcag_aaa=ratio >= WCAG_AAA_RATIO,
        contrast_ratio=ratio,
        apca=apca_contrast(color, background),
        aa=passing_indices(scale, background, WCAG_AA_RATIO),
        aaa=passing_indices(scale, background, WCAG_AAA_RATIO),
    )
