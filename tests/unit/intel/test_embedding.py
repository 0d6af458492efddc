"""Tests for descriptor embedders."""

from unittest.mock import AsyncMock, MagicMock

import numpy as np
import pytest

from hueprint.core.color.engine import describe
from hueprint.core.color.models import Color, ColorIntelligence
from hueprint.core.intel.embedding import (
    FEATURE_DIMENSIONS,
    ColorFeatureEmbedder,
    OpenAIEmbedder,
    embedding_text,
)


class TestColorFeatureEmbedder:
    """Deterministic feature vectors."""

    async def test_unit_length(self, ocean_blue):
        vector = await ColorFeatureEmbedder().embed(describe(ocean_blue))

        assert len(vector) == FEATURE_DIMENSIONS
        assert np.linalg.norm(vector) == pytest.approx(1.0)

    async def test_deterministic(self, ocean_blue):
        embedder = ColorFeatureEmbedder()
        assert await embedder.embed(describe(ocean_blue)) == await embedder.embed(
            describe(ocean_blue)
        )

    def test_similar_colors_are_closer(self, ocean_blue):
        embedder = ColorFeatureEmbedder()
        base = embedder.vector(describe(ocean_blue))
        near = embedder.vector(describe(Color(l=0.66, c=0.12, h=236)))
        far = embedder.vector(describe(Color(l=0.3, c=0.2, h=30)))

        assert float(base @ near) > float(base @ far)


def test_embedding_text_includes_intelligence(ocean_blue):
    descriptor = describe(ocean_blue)
    plain = embedding_text(descriptor)
    augmented = embedding_text(
        descriptor.with_intelligence(ColorIntelligence(suggested_name="Ocean Depth"))
    )

    assert descriptor.name in plain
    assert "Ocean Depth" not in plain
    assert "Ocean Depth" in augmented


async def test_openai_embedder_delegates(ocean_blue):
    provider = MagicMock()
    provider.embed_async = AsyncMock(return_value=[0.1, 0.2])
    embedder = OpenAIEmbedder(provider, model="text-embedding-3-small")

    assert await embedder.embed(describe(ocean_blue)) == [0.1, 0.2]
    text, model = provider.embed_async.call_args.args
    assert model == "text-embedding-3-small"
    assert describe(ocean_blue).name in text
