"""OpenAI provider implementation."""

from __future__ import annotations

import logging
import threading
from typing import Any

from openai import AsyncOpenAI

from hueprint.core.agents.providers.base import (
    LLMResponse,
    ProviderType,
    ResponseMetadata,
    TokenUsage,
)
from hueprint.core.agents.providers.errors import LLMProviderError

logger = logging.getLogger(__name__)


class OpenAIProvider:
    """OpenAI provider built on AsyncOpenAI.

    Responsibilities:
    - Async chat completion and embedding calls
    - Convert responses to standard format
    - Thread-safe token tracking
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = 60.0,
        max_retries: int = 2,
        client: AsyncOpenAI | None = None,
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key (uses env var if not provided)
            base_url: Optional API base URL (for compatible gateways)
            timeout: SDK request timeout in seconds
            max_retries: SDK-level retries for transient errors
            client: Pre-built client (tests inject a mock here)
        """
        self._async_client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
        )

        self._token_lock = threading.Lock()
        self._total_tokens = TokenUsage()

    @property
    def provider_type(self) -> ProviderType:
        """Provider type identifier."""
        return ProviderType.OPENAI

    def get_token_usage(self) -> TokenUsage:
        """Get cumulative token usage (thread-safe)."""
        with self._token_lock:
            return self._total_tokens

    def reset_token_tracking(self) -> None:
        """Reset token tracking (thread-safe)."""
        with self._token_lock:
            self._total_tokens = TokenUsage()

    def _update_token_usage(self, usage: TokenUsage) -> None:
        """Thread-safe token usage update."""
        with self._token_lock:
            self._total_tokens = self._total_tokens + usage

    async def generate_text_async(
        self,
        messages: list[dict[str, str]],
        model: str,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Generate a chat completion and return its raw text.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: Model identifier
            temperature: Sampling temperature
            max_tokens: Completion token limit

        Returns:
            LLMResponse with the first choice's text

        Raises:
            LLMProviderError: On SDK errors or an empty response
        """
        request_params: dict[str, Any] = {"model": model, "messages": messages}
        if temperature is not None:
            request_params["temperature"] = temperature
        if max_tokens is not None:
            request_params["max_tokens"] = max_tokens

        try:
            response = await self._async_client.chat.completions.create(**request_params)
        except Exception as e:
            logger.error(f"OpenAI provider error: {e}")
            raise LLMProviderError(f"Provider error: {e}") from e

        if not response.choices or not response.choices[0].message.content:
            raise LLMProviderError("Empty response from OpenAI API")

        choice = response.choices[0]
        token_usage = TokenUsage()
        usage = getattr(response, "usage", None)
        if usage:
            token_usage = TokenUsage(
                prompt_tokens=getattr(usage, "prompt_tokens", 0) or 0,
                completion_tokens=getattr(usage, "completion_tokens", 0) or 0,
                total_tokens=getattr(usage, "total_tokens", 0) or 0,
            )
            self._update_token_usage(token_usage)

        return LLMResponse(
            content=choice.message.content,
            metadata=ResponseMetadata(
                response_id=getattr(response, "id", None),
                token_usage=token_usage,
                model=model,
                finish_reason=getattr(choice, "finish_reason", None),
            ),
        )

    async def embed_async(self, text: str, model: str) -> list[float]:
        """Embed text with the embeddings endpoint.

        Raises:
            LLMProviderError: On SDK errors or an empty response
        """
        try:
            response = await self._async_client.embeddings.create(model=model, input=text)
        except Exception as e:
            logger.error(f"OpenAI embedding error: {e}")
            raise LLMProviderError(f"Embedding error: {e}") from e

        if not response.data:
            raise LLMProviderError("Empty embedding response from OpenAI API")
        return list(response.data[0].embedding)
