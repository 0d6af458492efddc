"""Descriptor embeddings for the vector cache."""

from __future__ import annotations

import math
from typing import Protocol

import numpy as np

from hueprint.core.agents.providers.base import EmbeddingProvider
from hueprint.core.color.conversion import oklch_to_oklab
from hueprint.core.color.models import ColorDescriptor, Temperature

FEATURE_DIMENSIONS = 16

_MAX_WCAG_RATIO = 21.0
_MAX_APCA = 108.0
_CHROMA_SPAN = 0.4


class Embedder(Protocol):
    """Maps a descriptor to a fixed-length vector."""

    async def embed(self, descriptor: ColorDescriptor) -> list[float]:
        ...


class ColorFeatureEmbedder:
    """Deterministic numeric embedding built from descriptor features.

    Needs no network; similar colors land close together under cosine
    similarity. Output is unit length.
    """

    dimensions = FEATURE_DIMENSIONS

    def vector(self, descriptor: ColorDescriptor) -> np.ndarray:
        color = descriptor.color
        lab = oklch_to_oklab(color)
        hue = math.radians(color.h)
        hue_strength = min(1.0, color.c / _CHROMA_SPAN)
        access = descriptor.accessibility
        temperature = descriptor.analysis.temperature

        features = np.array(
            [
                lab[0],
                lab[1],
                lab[2],
                math.cos(hue) * hue_strength,
                math.sin(hue) * hue_strength,
                color.c,
                descriptor.perceptual_weight.weight,
                descriptor.atmospheric_weight.distance_weight,
                1.0 if descriptor.analysis.is_light else 0.0,
                access.on_white.contrast_ratio / _MAX_WCAG_RATIO,
                access.on_black.contrast_ratio / _MAX_WCAG_RATIO,
                access.on_white.apca / _MAX_APCA,
                access.on_black.apca / _MAX_APCA,
                1.0 if temperature == Temperature.WARM else 0.0,
                1.0 if temperature == Temperature.NEUTRAL else 0.0,
                1.0 if temperature == Temperature.COOL else 0.0,
            ]
        )
        norm = np.linalg.norm(features)
        return features / norm if norm > 0 else features

    async def embed(self, descriptor: ColorDescriptor) -> list[float]:
        return [float(v) for v in self.vector(descriptor)]


def embedding_text(descriptor: ColorDescriptor) -> str:
    """Plain-text summary of a descriptor for text embedding models."""
    color = descriptor.color
    parts = [
        descriptor.name,
        f"OKLCH({color.l:g}, {color.c:g}, {color.h:g})",
        f"{descriptor.analysis.temperature.value} temperature",
        f"{descriptor.perceptual_weight.density.value} visual weight",
        f"{descriptor.atmospheric_weight.atmospheric_role.value} role",
    ]
    intelligence = descriptor.intelligence
    if intelligence is not None:
        parts.extend(
            [
                intelligence.suggested_name,
                intelligence.reasoning,
                intelligence.emotional_impact,
                intelligence.usage_guidance,
            ]
        )
    return ". ".join(parts)


class OpenAIEmbedder:
    """Text embedding of the descriptor summary via the provider."""

    def __init__(self, provider: EmbeddingProvider, model: str = "text-embedding-3-small"):
        self.provider = provider
        self.model = model

    async def embed(self, descriptor: ColorDescriptor) -> list[float]:
        return await self.provider.embed_async(embedding_text(descriptor), self.model)
