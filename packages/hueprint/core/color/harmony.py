"""Scales, harmonies and semantic role suggestions derived from a base color."""

from __future__ import annotations

from hueprint.core.color.conversion import max_chroma_in_gamut
from hueprint.core.color.models import Color, Harmonies, SemanticSuggestions
from hueprint.core.utils.math import clamp, round_half_away, wrap_hue

SCALE_SIZE = 11
BASE_INDEX = 5

# Lightness per scale position, darkest first; None marks the base position
SCALE_LIGHTNESS: tuple[float | None, ...] = (
    0.04,
    0.08,
    0.15,
    0.25,
    0.40,
    None,
    0.70,
    0.80,
    0.90,
    0.95,
    0.98,
)
BASE_LIGHTNESS_RANGE = (0.40, 0.70)
MIN_SCALE_CHROMA = 0.01


def derived_color(lightness: float, chroma: float, hue: float) -> Color:
    """Build a derived color, clamped and rounded to L/C 3dp and H 1dp.

    Clamping is applied only here, for colors computed from a valid base.
    """
    return Color(
        l=round_half_away(clamp(lightness, 0.0, 1.0), 3),
        c=round_half_away(max(chroma, 0.0), 3),
        h=wrap_hue(round_half_away(wrap_hue(hue), 1)),
    )


def scale_chroma_multiplier(lightness: float) -> float:
    """Chroma taper toward the extremes of the scale."""
    if lightness > 0.9:
        return 0.15
    if lightness > 0.8:
        return 0.25
    if lightness > 0.6:
        return 0.7
    if lightness < 0.15:
        return 0.8
    if lightness < 0.3:
        return 0.9
    return 1.0


def generate_scale(color: Color) -> list[Color]:
    """Generate the 11-step scale, index 0 darkest and index 10 lightest.

    Hue is fixed; chroma tapers at the extremes and is then clipped to the
    sRGB gamut at each step's lightness.
    """
    low, high = BASE_LIGHTNESS_RANGE
    base_lightness = clamp(color.l, low, high)

    scale: list[Color] = []
    for step in SCALE_LIGHTNESS:
        lightness = base_lightness if step is None else step
        chroma = color.c * scale_chroma_multiplier(lightness)
        if color.c > 0:
            chroma = max(chroma, MIN_SCALE_CHROMA)
        chroma = max_chroma_in_gamut(lightness, chroma, color.h)
        scale.append(derived_color(lightness, chroma, color.h))
    return scale


def complementary(color: Color) -> Color:
    lightness = 0.3 if color.l > 0.5 else 0.7
    return derived_color(lightness, min(0.3, color.c * 1.2), color.h + 180)


def triadic(color: Color) -> list[Color]:
    chroma = color.c * 0.85
    return [
        derived_color(clamp(color.l - 0.1, 0.3, 0.7), chroma, color.h + 120),
        derived_color(clamp(color.l + 0.1, 0.3, 0.7), chroma, color.h + 240),
    ]


def analogous(color: Color) -> list[Color]:
    chroma = color.c * 0.9
    return [
        derived_color(clamp(color.l + 0.05, 0.2, 0.8), chroma, color.h + 30),
        derived_color(clamp(color.l - 0.05, 0.2, 0.8), chroma, color.h - 30),
    ]


def tetradic(color: Color) -> list[Color]:
    chroma = color.c * 0.8
    lightness = clamp(color.l, 0.2, 0.8)
    return [
        derived_color(lightness, chroma, color.h + 90),
        complementary(color),
        derived_color(lightness, chroma, color.h + 270),
    ]


def monochromatic(color: Color) -> list[Color]:
    """Same hue and chroma at lightness offsets -0.2, -0.1, +0.1, +0.2."""
    return [derived_color(color.l + offset, color.c, color.h) for offset in (-0.2, -0.1, 0.1, 0.2)]


def generate_harmonies(color: Color) -> Harmonies:
    return Harmonies(
        complementary=complementary(color),
        triadic=triadic(color),
        analogous=analogous(color),
        tetradic=tetradic(color),
        monochromatic=monochromatic(color),
    )


def semantic_suggestions(color: Color) -> SemanticSuggestions:
    """Rotate the base toward each role's canonical hue.

    Each role keeps the base lightness/chroma family, nudged into a window
    that reads well for that role.
    """
    l, c = color.l, color.c  # noqa: E741
    return SemanticSuggestions(
        danger=derived_color(clamp(l + 0.1, 0.55, 0.7), min(0.25, c * 1.2), 15),
        success=derived_color(clamp(l + 0.15, 0.6, 0.75), min(0.2, c * 0.9), 135),
        warning=derived_color(clamp(l + 0.15, 0.7, 0.8), min(0.2, c * 0.95), 45),
        info=derived_color(clamp(l + 0.1, 0.6, 0.75), min(0.2, c * 0.9), 220),
    )
