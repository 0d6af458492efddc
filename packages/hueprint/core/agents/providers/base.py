"""Base types and protocol for LLM providers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class ProviderType(str, Enum):
    """Supported provider types."""

    OPENAI = "openai"


@dataclass(frozen=True)
class TokenUsage:
    """Standardized token usage."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def __add__(self, other: TokenUsage) -> TokenUsage:
        return TokenUsage(
            prompt_tokens=self.prompt_tokens + other.prompt_tokens,
            completion_tokens=self.completion_tokens + other.completion_tokens,
            total_tokens=self.total_tokens + other.total_tokens,
        )


@dataclass(frozen=True)
class ResponseMetadata:
    """Standardized response metadata."""

    response_id: str | None = None
    token_usage: TokenUsage = field(default_factory=TokenUsage)
    model: str | None = None
    finish_reason: str | None = None


@dataclass(frozen=True)
class LLMResponse:
    """Standardized LLM response."""

    content: str  # Raw model text; callers extract structure from it
    metadata: ResponseMetadata


class LLMProvider(Protocol):
    """Generic protocol for LLM providers.

    Implementations must handle:
    - Converting SDK responses to LLMResponse
    - Token usage tracking
    - Wrapping SDK failures in LLMProviderError
    """

    @property
    def provider_type(self) -> ProviderType:
        """Provider type identifier."""
        ...

    async def generate_text_async(
        self,
        messages: list[dict[str, str]],
        model: str,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Generate a free-form text response from messages.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: Model identifier
            temperature: Sampling temperature
            max_tokens: Completion token limit

        Returns:
            LLMResponse with raw text content and metadata

        Raises:
            LLMProviderError: On unrecoverable errors
        """
        ...

    def get_token_usage(self) -> TokenUsage:
        """Get cumulative token usage across all calls."""
        ...


class EmbeddingProvider(Protocol):
    """Protocol for providers that can embed text."""

    async def embed_async(self, text: str, model: str) -> list[float]:
        """Embed text into a vector.

        Raises:
            LLMProviderError: On unrecoverable errors
        """
        ...
