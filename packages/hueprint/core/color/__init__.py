"""Color engine: deterministic OKLCH math.

Everything here is pure: scales, harmonies, contrast, weights, names.
"""

from hueprint.core.color.accessibility import (
    BLACK,
    WHITE,
    apca_contrast,
    relative_luminance,
    wcag_contrast_ratio,
)
from hueprint.core.color.conversion import clip_to_gamut, in_srgb_gamut, to_css, to_hex
from hueprint.core.color.engine import describe
from hueprint.core.color.models import (
    Accessibility,
    AtmosphericRole,
    AtmosphericWeight,
    Color,
    ColorAnalysis,
    ColorDescriptor,
    ColorIntelligence,
    ContrastResult,
    Density,
    Harmonies,
    PerceptualWeight,
    SemanticSuggestions,
    Temperature,
)
from hueprint.core.color.naming import NAME_TABLE_VERSION, generate_name

__all__ = [
    # Engine
    "describe",
    "generate_name",
    "NAME_TABLE_VERSION",
    # Models
    "Accessibility",
    "AtmosphericRole",
    "AtmosphericWeight",
    "Color",
    "ColorAnalysis",
    "ColorDescriptor",
    "ColorIntelligence",
    "ContrastResult",
    "Density",
    "Harmonies",
    "PerceptualWeight",
    "SemanticSuggestions",
    "Temperature",
    # Conversion / contrast
    "BLACK",
    "WHITE",
    "apca_contrast",
    "clip_to_gamut",
    "in_srgb_gamut",
    "relative_luminance",
    "to_css",
    "to_hex",
    "wcag_contrast_ratio",
]
