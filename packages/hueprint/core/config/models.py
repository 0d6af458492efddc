"""Configuration models for Hueprint."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file path (stdout if unset)")


class InferenceConfig(BaseModel):
    """Inference service (LLM) configuration."""

    provider: str = Field(default="openai", description="LLM provider name")

    model: str = Field(default="gpt-4.1-mini", description="LLM model name")

    temperature: float = Field(
        default=0.7, ge=0.0, le=2.0, description="LLM temperature (0=deterministic, 2=creative)"
    )

    max_tokens: int = Field(default=800, gt=0, description="Maximum tokens for LLM response")

    timeout_seconds: float = Field(
        default=30.0, gt=0, description="Upper bound on one inference call, including retries"
    )

    api_key: str | None = Field(default=None, description="API key (OPENAI_API_KEY if unset)")
    base_url: str | None = Field(default=None, description="Optional API base URL")


class EmbeddingConfig(BaseModel):
    """Descriptor embedding configuration."""

    backend: Literal["features", "openai"] = Field(
        default="features",
        description="'features' (deterministic numeric vector) or 'openai' (text embedding)",
    )
    model: str = Field(default="text-embedding-3-small", description="OpenAI embedding model")


class CacheConfig(BaseModel):
    """Vector cache configuration."""

    backend: Literal["memory", "fs", "null"] = Field(default="memory")
    path: str = Field(default=".hueprint/cache", description="Root directory for the fs backend")


class SeedingConfig(BaseModel):
    """Batch seeding configuration."""

    concurrency_limit: int = Field(
        default=10, ge=1, description="Items processed concurrently per chunk"
    )
    publish_chunk_size: int = Field(
        default=100, ge=1, description="Messages sent per queue batch call"
    )
    publish_delay_seconds: float = Field(
        default=0.25, ge=0.0, description="Pause between publish chunks"
    )
    max_attempts: int = Field(
        default=3, ge=1, description="Deliveries before a message is dead-lettered"
    )


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    inference: InferenceConfig = InferenceConfig()
    embedding: EmbeddingConfig = EmbeddingConfig()
    cache: CacheConfig = CacheConfig()
    seeding: SeedingConfig = SeedingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("hueprint.yaml")
