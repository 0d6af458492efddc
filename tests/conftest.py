"""Shared pytest fixtures for hueprint tests."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from hueprint.core.agents.providers.base import LLMResponse, ResponseMetadata, TokenUsage
from hueprint.core.caching.backends.memory import InMemoryVectorCache
from hueprint.core.color.models import Color
from hueprint.core.intel.embedding import ColorFeatureEmbedder
from hueprint.core.intel.generator import ColorIntelligenceGenerator
from hueprint.core.retrieval.pipeline import RetrievalPipeline

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


# ============================================================================
# Color Fixtures
# ============================================================================


@pytest.fixture
def ocean_blue() -> Color:
    """Mid-light blue used across tests."""
    return Color(l=0.65, c=0.12, h=240)


@pytest.fixture
def intelligence_payload() -> dict:
    """Complete inference response body."""
    return {
        "suggestedName": "Ocean Depth",
        "reasoning": "A restrained blue that balances trust and professionalism.",
        "emotionalImpact": "Calm, reliable, quietly authoritative.",
        "culturalContext": "Blue reads as trustworthy across most cultures.",
        "accessibilityNotes": "Meets AA on black; pair with dark text on white.",
        "usageGuidance": "Primary actions, navigation and links.",
        "balancingGuidance": "Keep coverage to roughly a quarter of the layout.",
    }


def make_llm_response(content: str, total_tokens: int = 150) -> LLMResponse:
    """Build an LLMResponse around raw text."""
    return LLMResponse(
        content=content,
        metadata=ResponseMetadata(
            token_usage=TokenUsage(
                prompt_tokens=total_tokens - 50, completion_tokens=50, total_tokens=total_tokens
            ),
            model="gpt-4.1-mini",
        ),
    )


# ============================================================================
# Provider / Pipeline Fixtures
# ============================================================================


@pytest.fixture
def mock_provider(intelligence_payload: dict) -> MagicMock:
    """Mock LLM provider answering with the intelligence payload."""
    provider = MagicMock()
    provider.generate_text_async = AsyncMock(
        return_value=make_llm_response(json.dumps(intelligence_payload))
    )
    provider.get_token_usage.return_value = TokenUsage()
    return provider


@pytest.fixture
def generator(mock_provider: MagicMock) -> ColorIntelligenceGenerator:
    return ColorIntelligenceGenerator(mock_provider, model="gpt-4.1-mini", timeout_seconds=5.0)


@pytest.fixture
def memory_cache() -> InMemoryVectorCache:
    return InMemoryVectorCache()


@pytest.fixture
def pipeline(
    memory_cache: InMemoryVectorCache, generator: ColorIntelligenceGenerator
) -> RetrievalPipeline:
    """Pipeline over an in-memory cache and a mocked provider."""
    return RetrievalPipeline(
        cache=memory_cache, generator=generator, embedder=ColorFeatureEmbedder()
    )


@pytest.fixture
def llm_response():
    """Factory for LLMResponse objects wrapping raw text."""
    return make_llm_response
