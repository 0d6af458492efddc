"""Table-driven color names.

A name is `<luminosity>-<chroma>-<hue>` or, inside a semantic hub,
`<luminosity>-<chroma>-<qualifier>-<hue>`. Tables are immutable module
constants; bump NAME_TABLE_VERSION whenever any of them changes because
names are part of cached descriptors.
"""

from __future__ import annotations

from dataclasses import dataclass

from hueprint.core.color.models import Color
from hueprint.core.utils.math import band_lookup

NAME_TABLE_VERSION = 1

# (band start, word); each band runs up to the next start
LUMINOSITY_WORDS: tuple[tuple[float, str], ...] = (
    (0.00, "obsidian"),
    (0.15, "charcoal"),
    (0.30, "slate"),
    (0.45, "silver"),
    (0.60, "bone"),
    (0.75, "pearl"),
    (0.90, "snow"),
)

CHROMA_WORDS: tuple[tuple[float, str], ...] = (
    (0.00, "whisper"),
    (0.03, "muted"),
    (0.07, "soft"),
    (0.11, "honest"),
    (0.18, "bold"),
    (0.26, "vivid"),
)

HUE_WORDS: tuple[tuple[float, str], ...] = (
    (0.0, "red"),
    (20.0, "coral"),
    (40.0, "amber"),
    (60.0, "gold"),
    (80.0, "citron"),
    (100.0, "lime"),
    (120.0, "green"),
    (145.0, "jade"),
    (170.0, "arctic"),
    (195.0, "azure"),
    (220.0, "cobalt"),
    (245.0, "violet"),
    (275.0, "purple"),
    (300.0, "orchid"),
    (325.0, "magenta"),
    (345.0, "rose"),
)


@dataclass(frozen=True)
class SemanticHub:
    """Hue/chroma/lightness region whose names carry a semantic qualifier."""

    hue_start: float
    hue_end: float
    min_chroma: float
    min_lightness: float
    max_lightness: float
    qualifier: str

    def contains(self, color: Color) -> bool:
        return (
            self.hue_start <= color.h < self.hue_end
            and color.c >= self.min_chroma
            and self.min_lightness <= color.l <= self.max_lightness
        )


SEMANTIC_HUBS: tuple[SemanticHub, ...] = (
    SemanticHub(0.0, 20.0, 0.16, 0.35, 0.65, "warning"),
    SemanticHub(40.0, 60.0, 0.14, 0.60, 0.85, "caution"),
    SemanticHub(120.0, 145.0, 0.14, 0.45, 0.75, "success"),
    SemanticHub(220.0, 245.0, 0.14, 0.35, 0.65, "trust"),
)


def _lookup(value: float, table: tuple[tuple[float, str], ...]) -> str:
    starts = [start for start, _ in table]
    words = [word for _, word in table]
    return band_lookup(value, starts, words)


def luminosity_word(lightness: float) -> str:
    return _lookup(lightness, LUMINOSITY_WORDS)


def chroma_word(chroma: float) -> str:
    return _lookup(chroma, CHROMA_WORDS)


def hue_word(hue: float) -> str:
    return _lookup(hue, HUE_WORDS)


def semantic_qualifier(color: Color) -> str | None:
    """Return the qualifier of the first hub containing color, if any."""
    for hub in SEMANTIC_HUBS:
        if hub.contains(color):
            return hub.qualifier
    return None


def generate_name(color: Color) -> str:
    """Build the deterministic hyphenated name for a color.

    Example:
        >>> generate_name(Color(l=0.7, c=0.15, h=260))
        'bone-honest-violet'
        >>> generate_name(Color(l=0.5, c=0.2, h=10))
        'silver-bold-warning-red'
    """
    words = [luminosity_word(color.l), chroma_word(color.c)]
    qualifier = semantic_qualifier(color)
    if qualifier:
        words.append(qualifier)
    words.append(hue_word(color.h))
    return "-".join(words)
