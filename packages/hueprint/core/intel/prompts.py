"""Prompt construction for color intelligence."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict

from hueprint.core.color.models import ColorDescriptor, PerceptualWeight

SYSTEM_PROMPT = (
    "You are a color theory expert and design systems specialist. "
    "Given an OKLCH color and its computed properties, explain its character, "
    "emotional impact, cultural associations, accessibility and practical usage. "
    "Respond with a single JSON object only."
)

_RESPONSE_TEMPLATE = {
    "suggestedName": "A short evocative name (2-3 words)",
    "reasoning": "Why this color works, based on its OKLCH values",
    "emotionalImpact": "The emotional response this color evokes",
    "culturalContext": "Relevant cultural associations",
    "accessibilityNotes": "Contrast and readability guidance",
    "usageGuidance": "Where and how to use this color in an interface",
}


class IntelligenceContext(BaseModel):
    """Optional semantic context for a request."""

    token: str | None = None
    name: str | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


def _num(value: float) -> str:
    return f"{value:g}"


def build_user_prompt(
    descriptor: ColorDescriptor,
    context: IntelligenceContext | None = None,
    perceptual_weight: PerceptualWeight | None = None,
) -> str:
    """Render the user message for one color.

    `balancingGuidance` is only requested when a perceptual weight hint is
    supplied.
    """
    color = descriptor.color
    on_white = descriptor.accessibility.on_white
    on_black = descriptor.accessibility.on_black

    lines = [
        f"Analyze the color OKLCH({_num(color.l)}, {_num(color.c)}, {_num(color.h)}).",
        f"Derived Name: {descriptor.name}",
        f"Temperature: {descriptor.analysis.temperature.value}",
        f"Contrast on white: {on_white.contrast_ratio}:1 (APCA {on_white.apca})",
        f"Contrast on black: {on_black.contrast_ratio}:1 (APCA {on_black.apca})",
    ]
    if context and context.token:
        lines.append(f"Semantic Role: {context.token}")
    if context and context.name:
        lines.append(f"Color Name: {context.name}")
    if perceptual_weight is not None:
        lines.append(
            f"Perceptual Weight: {_num(perceptual_weight.weight)} "
            f"({perceptual_weight.density.value})"
        )

    template = dict(_RESPONSE_TEMPLATE)
    if perceptual_weight is not None:
        template["balancingGuidance"] = (
            "How much surface area to give this color, given its perceptual weight "
            f"{_num(perceptual_weight.weight)} ({perceptual_weight.density.value} density)"
        )

    lines.append("")
    lines.append("Respond with JSON in exactly this shape:")
    lines.append(json.dumps(template, indent=2))
    return "\n".join(lines)


def build_messages(
    descriptor: ColorDescriptor,
    context: IntelligenceContext | None = None,
    perceptual_weight: PerceptualWeight | None = None,
) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(descriptor, context, perceptual_weight)},
    ]
