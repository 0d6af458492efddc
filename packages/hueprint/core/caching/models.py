"""Vector cache record types."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VectorRecord(BaseModel):
    """One cache entry: key, embedding and serialized descriptor metadata."""

    key: str = Field(description="Cache key, e.g. color-intel:0.65-0.12-240")
    embedding: list[float] = Field(default_factory=list, description="Descriptor embedding")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Serialized descriptor")

    model_config = ConfigDict(frozen=True, extra="forbid")


class VectorMatch(BaseModel):
    """Similarity search hit."""

    key: str
    score: float = Field(description="Cosine similarity in [-1, 1]")
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")
