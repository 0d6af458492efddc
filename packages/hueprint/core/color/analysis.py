"""Categorical analysis and visual-weight scores for a single color."""

from __future__ import annotations

from hueprint.core.color.models import (
    AtmosphericRole,
    AtmosphericWeight,
    Color,
    ColorAnalysis,
    Density,
    PerceptualWeight,
    Temperature,
)
from hueprint.core.utils.math import band_lookup, clamp, round_half_away

LIGHT_THRESHOLD = 0.6

# Hue bands (start-inclusive) for the temperature label
TEMPERATURE_BAND_STARTS = (0.0, 60.0, 180.0, 300.0)
TEMPERATURE_BAND_LABELS = (
    Temperature.WARM,
    Temperature.NEUTRAL,
    Temperature.COOL,
    Temperature.WARM,
)

# Hue bands (start-inclusive) for inherent hue heaviness
HUE_WEIGHT_BAND_STARTS = (0.0, 15.0, 45.0, 75.0, 105.0, 165.0, 225.0, 285.0, 345.0)
HUE_WEIGHT_BAND_VALUES = (0.9, 0.8, 0.6, 0.4, 0.3, 0.2, 0.35, 0.5, 0.9)

BALANCING_RECOMMENDATIONS = {
    Density.LIGHT: "Safe for large surfaces; pair with a heavier accent for focus",
    Density.MEDIUM: "Balanced weight; works for mid-sized surfaces and secondary actions",
    Density.HEAVY: "Use sparingly as an accent; offset with lighter neutral areas",
}


def temperature(color: Color) -> Temperature:
    return band_lookup(color.h, TEMPERATURE_BAND_STARTS, TEMPERATURE_BAND_LABELS)


def is_light(color: Color) -> bool:
    return color.l > LIGHT_THRESHOLD


def analysis_name(color: Color) -> str:
    """Coordinate identifier, e.g. `color-260-70-15`."""
    hue = int(round_half_away(color.h))
    lightness = int(round_half_away(color.l * 100))
    chroma = int(round_half_away(color.c * 100))
    return f"color-{hue}-{lightness}-{chroma}"


def analyze(color: Color) -> ColorAnalysis:
    return ColorAnalysis(
        temperature=temperature(color),
        is_light=is_light(color),
        name=analysis_name(color),
    )


def _density(weight: float) -> Density:
    if weight < 0.3:
        return Density.LIGHT
    if weight < 0.7:
        return Density.MEDIUM
    return Density.HEAVY


def perceptual_weight(color: Color) -> PerceptualWeight:
    """Estimate how visually heavy a color feels.

    Darker, more saturated and warmer colors weigh more:
    0.4 * (1 - L) + 0.35 * min(1, C / 0.3) + 0.25 * hue_weight.
    """
    hue_weight = band_lookup(color.h, HUE_WEIGHT_BAND_STARTS, HUE_WEIGHT_BAND_VALUES)
    raw = (1 - color.l) * 0.4 + min(1.0, color.c / 0.3) * 0.35 + hue_weight * 0.25
    weight = round_half_away(clamp(raw, 0.0, 1.0), 3)
    density = _density(weight)
    return PerceptualWeight(
        weight=weight,
        density=density,
        balancing_recommendation=BALANCING_RECOMMENDATIONS[density],
    )


def atmospheric_weight(color: Color) -> AtmosphericWeight:
    """Estimate apparent depth; warm, dark and saturated colors advance."""
    warm = color.h <= 60.0 or color.h >= 300.0
    cool = 180.0 <= color.h <= 270.0

    raw = 0.0
    if warm:
        raw += 0.3
    elif cool:
        raw -= 0.2
    raw += (1 - color.l) * 0.4
    raw += color.c * 1.5
    distance = round_half_away(clamp(raw, 0.0, 1.0), 3)

    if distance < 0.3:
        role = AtmosphericRole.BACKGROUND
    elif distance < 0.7:
        role = AtmosphericRole.MIDGROUND
    else:
        role = AtmosphericRole.FOREGROUND

    if warm:
        label = Temperature.WARM
    elif cool:
        label = Temperature.COOL
    else:
        label = Temperature.NEUTRAL

    return AtmosphericWeight(distance_weight=distance, temperature=label, atmospheric_role=role)
