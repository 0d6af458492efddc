"""Descriptor <-> vector cache metadata conversion.

Older cache entries may predate newer descriptor fields. Decoding fills
every absent field from a fresh `describe()` of the color, so a partial
record always reconstructs into a valid descriptor.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from hueprint.core.caching.errors import DescriptorDecodeError
from hueprint.core.caching.fingerprint import fingerprint
from hueprint.core.color.engine import describe
from hueprint.core.color.models import Color, ColorDescriptor
from hueprint.core.color.naming import NAME_TABLE_VERSION

logger = logging.getLogger(__name__)

DESCRIPTOR_FIELD = "descriptor"


def descriptor_to_dict(descriptor: ColorDescriptor) -> dict[str, Any]:
    """camelCase JSON-compatible dict, omitting unset optional fields."""
    return descriptor.model_dump(mode="json", by_alias=True, exclude_none=True)


def encode_descriptor(descriptor: ColorDescriptor) -> dict[str, Any]:
    """Build cache metadata for a descriptor.

    The descriptor itself is stored as a JSON string so flat-metadata vector
    stores can hold it; a few scalar fields sit alongside for filtering.
    """
    return {
        DESCRIPTOR_FIELD: json.dumps(descriptor_to_dict(descriptor), separators=(",", ":")),
        "fingerprint": fingerprint(descriptor.color),
        "name": descriptor.name,
        "nameTableVersion": NAME_TABLE_VERSION,
    }


def _deep_fill(stored: dict[str, Any], defaults: dict[str, Any]) -> dict[str, Any]:
    """Overlay stored values on defaults, recursing into nested objects."""
    merged = dict(defaults)
    for key, value in stored.items():
        default = defaults.get(key)
        if isinstance(value, dict) and isinstance(default, dict):
            merged[key] = _deep_fill(value, default)
        elif value is not None:
            merged[key] = value
    return merged


def _extract_payload(metadata: dict[str, Any]) -> dict[str, Any]:
    payload = metadata.get(DESCRIPTOR_FIELD, metadata)
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise DescriptorDecodeError(f"Descriptor metadata is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise DescriptorDecodeError(
            f"Descriptor metadata must be an object, got {type(payload).__name__}"
        )
    return payload


def decode_descriptor(metadata: dict[str, Any], color: Color) -> ColorDescriptor:
    """Reconstruct a descriptor from cache metadata.

    Args:
        metadata: Stored metadata, either the descriptor dict itself or a
            wrapper with a `descriptor` field (dict or JSON string)
        color: Color the entry was looked up for, used to default absent fields

    Returns:
        Valid ColorDescriptor

    Raises:
        DescriptorDecodeError: If metadata is present but not decodable
    """
    payload = _extract_payload(metadata)
    defaults = descriptor_to_dict(describe(color))
    merged = _deep_fill(payload, defaults)

    intelligence = merged.get("intelligence")
    if isinstance(intelligence, dict) and not intelligence.get("suggestedName"):
        merged["intelligence"] = {**intelligence, "suggestedName": merged["name"]}

    try:
        return ColorDescriptor.model_validate(merged)
    except ValidationError as e:
        raise DescriptorDecodeError(f"Stored descriptor failed validation: {e}") from e
