"""Color engine: one color in, full deterministic descriptor out."""

from __future__ import annotations

from hueprint.core.color.accessibility import BLACK, WHITE, contrast_against
from hueprint.core.color.analysis import analyze, atmospheric_weight, perceptual_weight
from hueprint.core.color.harmony import generate_harmonies, generate_scale, semantic_suggestions
from hueprint.core.color.models import Accessibility, Color, ColorDescriptor
from hueprint.core.color.naming import generate_name


def describe(color: Color) -> ColorDescriptor:
    """Compute the math-only descriptor for a color.

    Pure and synchronous: no I/O and no randomness, so equal colors always
    produce equal descriptors. `intelligence` is left unset.

    Args:
        color: Validated base color

    Returns:
        ColorDescriptor without intelligence

    Example:
        >>> describe(Color(l=0.7, c=0.15, h=260)).name
        'bone-honest-violet'
    """
    scale = generate_scale(color)
    accessibility = Accessibility(
        on_white=contrast_against(color, WHITE, scale),
        on_black=contrast_against(color, BLACK, scale),
    )
    return ColorDescriptor(
        color=color,
        name=generate_name(color),
        scale=scale,
        harmonies=generate_harmonies(color),
        accessibility=accessibility,
        analysis=analyze(color),
        perceptual_weight=perceptual_weight(color),
        atmospheric_weight=atmospheric_weight(color),
        semantic_suggestions=semantic_suggestions(color),
    )
