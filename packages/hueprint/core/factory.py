"""Builds the retrieval stack from application config."""

from __future__ import annotations

import logging

from hueprint.core.agents.providers.base import LLMProvider
from hueprint.core.agents.providers.factory import create_llm_provider
from hueprint.core.agents.providers.openai import OpenAIProvider
from hueprint.core.caching.backends.fs import FSVectorCache
from hueprint.core.caching.backends.memory import InMemoryVectorCache
from hueprint.core.caching.backends.null import NullVectorCache
from hueprint.core.caching.protocols import VectorCache
from hueprint.core.config.models import AppConfig, CacheConfig
from hueprint.core.intel.embedding import ColorFeatureEmbedder, Embedder, OpenAIEmbedder
from hueprint.core.intel.generator import ColorIntelligenceGenerator
from hueprint.core.retrieval.pipeline import RetrievalPipeline
from hueprint.core.seeding.consumer import SeedConsumer

logger = logging.getLogger(__name__)


def create_vector_cache(config: CacheConfig) -> VectorCache:
    """Create the configured vector cache backend."""
    if config.backend == "fs":
        return FSVectorCache(config.path)
    if config.backend == "null":
        return NullVectorCache()
    return InMemoryVectorCache()


def create_embedder(config: AppConfig, provider: LLMProvider | None = None) -> Embedder:
    """Create the configured embedder.

    The openai backend needs a provider that can embed; without one the
    deterministic feature embedder is used.
    """
    if config.embedding.backend == "openai":
        if isinstance(provider, OpenAIProvider):
            return OpenAIEmbedder(provider, model=config.embedding.model)
        logger.warning("OpenAI embeddings configured without an OpenAI provider; using features")
    return ColorFeatureEmbedder()


def create_pipeline(
    config: AppConfig,
    *,
    provider: LLMProvider | None = None,
    cache: VectorCache | None = None,
) -> RetrievalPipeline:
    """Wire cache, provider, generator and embedder into a pipeline.

    Args:
        config: Application config
        provider: LLM provider override (built from config if omitted)
        cache: Vector cache override (built from config if omitted)

    Returns:
        Ready-to-use RetrievalPipeline
    """
    if provider is None:
        provider = create_llm_provider(config.inference)
    generator = ColorIntelligenceGenerator(
        provider,
        model=config.inference.model,
        temperature=config.inference.temperature,
        max_tokens=config.inference.max_tokens,
        timeout_seconds=config.inference.timeout_seconds,
    )
    return RetrievalPipeline(
        cache=cache if cache is not None else create_vector_cache(config.cache),
        generator=generator,
        embedder=create_embedder(config, provider),
    )


def create_seed_consumer(config: AppConfig, pipeline: RetrievalPipeline) -> SeedConsumer:
    return SeedConsumer(pipeline, concurrency_limit=config.seeding.concurrency_limit)
