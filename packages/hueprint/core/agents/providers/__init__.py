"""LLM provider abstraction."""

from hueprint.core.agents.providers.base import (
    EmbeddingProvider,
    LLMProvider,
    LLMResponse,
    ProviderType,
    ResponseMetadata,
    TokenUsage,
)
from hueprint.core.agents.providers.errors import LLMProviderError
from hueprint.core.agents.providers.openai import OpenAIProvider

__all__ = [
    "EmbeddingProvider",
    "LLMProvider",
    "LLMProviderError",
    "LLMResponse",
    "OpenAIProvider",
    "ProviderType",
    "ResponseMetadata",
    "TokenUsage",
]
