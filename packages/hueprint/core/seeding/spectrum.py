"""Spectrum grid generation for bulk seeding."""

from __future__ import annotations

from hueprint.core.color.models import Color
from hueprint.core.seeding.models import SpectrumConfig
from hueprint.core.utils.math import round_half_away

LIGHTNESS_RANGE = (0.1, 0.9)
CHROMA_RANGE = (0.0, 0.4)


def _steps(low: float, high: float, count: int) -> list[float]:
    if count == 1:
        return [round_half_away((low + high) / 2, 3)]
    span = (high - low) / (count - 1)
    return [round_half_away(low + i * span, 3) for i in range(count)]


def spectrum_colors(config: SpectrumConfig) -> list[tuple[Color, str]]:
    """Expand a spectrum config into (color, name) pairs.

    Ordered by lightness, then chroma, then hue. Names look like
    `spectrum-l50-c20-h120`.
    """
    hues = [round_half_away(i * 360 / config.hue_steps, 1) for i in range(config.hue_steps)]
    colors: list[tuple[Color, str]] = []
    for lightness in _steps(*LIGHTNESS_RANGE, config.lightness_steps):
        for chroma in _steps(*CHROMA_RANGE, config.chroma_steps):
            for hue in hues:
                name = (
                    f"{config.base_name}"
                    f"-l{int(round_half_away(lightness * 100))}"
                    f"-c{int(round_half_away(chroma * 100))}"
                    f"-h{int(round_half_away(hue))}"
                )
                colors.append((Color(l=lightness, c=chroma, h=hue), name))
    return colors
