"""Extract structured intelligence from free-form model text."""

from __future__ import annotations

import json
from typing import Any

from hueprint.core.color.models import ColorIntelligence
from hueprint.core.intel.errors import InferenceErrorKind
from hueprint.core.intel.result import InferenceResult, failure_result, success_result

INVALID_FORMAT_MESSAGE = "Invalid AI response format"

_DECODER = json.JSONDecoder()

# camelCase response field -> model field with a placeholder default
_TEXT_FIELDS = {
    "reasoning": "reasoning",
    "emotionalImpact": "emotional_impact",
    "culturalContext": "cultural_context",
    "accessibilityNotes": "accessibility_notes",
    "usageGuidance": "usage_guidance",
}


def find_json_object(text: str) -> dict[str, Any] | None:
    """Return the first JSON object embedded in text, or None.

    Tries every `{` position in order, so objects wrapped in prose or code
    fences are found.
    """
    start = text.find("{")
    while start != -1:
        try:
            value, _ = _DECODER.raw_decode(text, start)
        except json.JSONDecodeError:
            value = None
        if isinstance(value, dict):
            return value
        start = text.find("{", start + 1)
    return None


def _text(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def extract_intelligence(text: str, fallback_name: str) -> InferenceResult:
    """Turn a model response into ColorIntelligence.

    Missing text fields get fixed placeholders; a missing suggested name
    falls back to `fallback_name`. Only a response with no JSON object at all
    is a failure.

    Args:
        text: Raw model output
        fallback_name: Name used when suggestedName is absent

    Returns:
        InferenceResult (malformed failure if no JSON object is found)
    """
    payload = find_json_object(text)
    if payload is None:
        return failure_result(InferenceErrorKind.MALFORMED, INVALID_FORMAT_MESSAGE)

    fields: dict[str, Any] = {"suggested_name": _text(payload, "suggestedName") or fallback_name}
    for key, field_name in _TEXT_FIELDS.items():
        value = _text(payload, key)
        if value is not None:
            fields[field_name] = value

    balancing = _text(payload, "balancingGuidance")
    if balancing is not None:
        fields["balancing_guidance"] = balancing

    return success_result(ColorIntelligence(**fields))
