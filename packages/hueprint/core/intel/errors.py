"""Inference failure kinds.

Failures are values, not exceptions: extraction and generation return an
InferenceResult carrying one of these.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class InferenceErrorKind(str, Enum):
    """Why an inference call produced no intelligence."""

    TIMEOUT = "timeout"
    MALFORMED = "malformed"
    UNAVAILABLE = "unavailable"


class InferenceError(BaseModel):
    kind: InferenceErrorKind
    message: str = Field(description="Human-readable error message")

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __str__(self) -> str:
        return self.message
