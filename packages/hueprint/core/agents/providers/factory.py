"""Provider factory for LLM provider dispatch."""

from __future__ import annotations

from hueprint.core.agents.providers.openai import OpenAIProvider
from hueprint.core.config.models import InferenceConfig


def create_llm_provider(inference: InferenceConfig) -> OpenAIProvider:
    """Create the configured LLM provider."""
    provider_name = inference.provider.lower().strip()

    if provider_name == "openai":
        return OpenAIProvider(
            api_key=inference.api_key,
            base_url=inference.base_url,
            timeout=inference.timeout_seconds,
        )

    raise ValueError(f"Unknown LLM provider configured: {inference.provider}")
