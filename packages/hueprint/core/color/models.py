"""Color value types and the computed descriptor.

All models are immutable. Serialized field names are camelCase so cached
descriptors stay compatible with other consumers of the vector cache.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_DESCRIPTOR_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    alias_generator=to_camel,
    populate_by_name=True,
)


class Color(BaseModel):
    """A color in OKLCH space.

    Immutable value type; equality and hashing are by value. Out-of-range or
    non-finite components raise pydantic.ValidationError at construction.

    Example:
        >>> Color(l=0.7, c=0.15, h=260)
        Color(l=0.7, c=0.15, h=260.0, alpha=None)
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    l: float = Field(ge=0.0, le=1.0, description="Perceptual lightness")  # noqa: E741
    c: float = Field(ge=0.0, description="Chroma")
    h: float = Field(ge=0.0, lt=360.0, description="Hue angle in degrees")
    alpha: float | None = Field(default=None, ge=0.0, le=1.0, description="Optional opacity")


class Temperature(str, Enum):
    WARM = "warm"
    COOL = "cool"
    NEUTRAL = "neutral"


class Density(str, Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class AtmosphericRole(str, Enum):
    BACKGROUND = "background"
    MIDGROUND = "midground"
    FOREGROUND = "foreground"


class ContrastResult(BaseModel):
    """Contrast of a color against one background."""

    model_config = _DESCRIPTOR_CONFIG

    wcag_aa: bool = Field(alias="wcagAA", description="Contrast ratio >= 4.5")
    wcag_aaa: bool = Field(alias="wcagAAA", description="Contrast ratio >= 7.0")
    contrast_ratio: float = Field(description="WCAG contrast ratio, 2 decimals")
    apca: float = Field(description="APCA lightness contrast (Lc), signed")
    aa: list[int] = Field(
        default_factory=list, description="Scale indices meeting AA against this background"
    )
    aaa: list[int] = Field(
        default_factory=list, description="Scale indices meeting AAA against this background"
    )


class Accessibility(BaseModel):
    model_config = _DESCRIPTOR_CONFIG

    on_white: ContrastResult
    on_black: ContrastResult


class ColorAnalysis(BaseModel):
    model_config = _DESCRIPTOR_CONFIG

    temperature: Temperature
    is_light: bool
    name: str = Field(description="Coordinate-based identifier, e.g. color-260-70-15")


class PerceptualWeight(BaseModel):
    """Visual heaviness of a color, used for layout balancing."""

    model_config = _DESCRIPTOR_CONFIG

    weight: float = Field(ge=0.0, le=1.0)
    density: Density
    balancing_recommendation: str


class AtmosphericWeight(BaseModel):
    """Apparent depth of a color (warm/dark/saturated colors advance)."""

    model_config = _DESCRIPTOR_CONFIG

    distance_weight: float = Field(ge=0.0, le=1.0)
    temperature: Temperature
    atmospheric_role: AtmosphericRole


class Harmonies(BaseModel):
    model_config = _DESCRIPTOR_CONFIG

    complementary: Color
    triadic: list[Color] = Field(min_length=2, max_length=2)
    analogous: list[Color] = Field(min_length=2, max_length=2)
    tetradic: list[Color] = Field(min_length=3, max_length=3)
    monochromatic: list[Color] = Field(min_length=4, max_length=5)


class SemanticSuggestions(BaseModel):
    model_config = _DESCRIPTOR_CONFIG

    danger: Color
    success: Color
    warning: Color
    info: Color


class ColorIntelligence(BaseModel):
    """Semantic guidance produced by the inference service.

    Missing required fields fall back to fixed placeholder strings.
    """

    model_config = _DESCRIPTOR_CONFIG

    suggested_name: str
    reasoning: str = "No reasoning provided"
    emotional_impact: str = "No emotional impact analysis"
    cultural_context: str = "No cultural context provided"
    accessibility_notes: str = "No accessibility notes"
    usage_guidance: str = "No usage guidance provided"
    balancing_guidance: str | None = None


class ColorDescriptor(BaseModel):
    """Full computed result for one color.

    Every field except `intelligence` is a pure function of `color`.
    """

    model_config = _DESCRIPTOR_CONFIG

    color: Color
    name: str
    scale: list[Color] = Field(min_length=11, max_length=11)
    harmonies: Harmonies
    accessibility: Accessibility
    analysis: ColorAnalysis
    perceptual_weight: PerceptualWeight
    atmospheric_weight: AtmosphericWeight
    semantic_suggestions: SemanticSuggestions
    intelligence: ColorIntelligence | None = None

    def with_intelligence(self, intelligence: ColorIntelligence) -> ColorDescriptor:
        """Return a copy carrying the given intelligence."""
        return self.model_copy(update={"intelligence": intelligence})

    def without_intelligence(self) -> ColorDescriptor:
        return self.model_copy(update={"intelligence": None})
