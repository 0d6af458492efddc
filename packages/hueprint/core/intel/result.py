"""Result type for inference.

Immutable result with success/failure semantics; never raises.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hueprint.core.color.models import ColorIntelligence
from hueprint.core.intel.errors import InferenceError, InferenceErrorKind


class InferenceResult(BaseModel):
    """Outcome of extracting or generating color intelligence.

    Attributes:
        success: Whether intelligence was produced
        output: Intelligence (if success=True)
        error: Failure kind and message (if success=False)
        metadata: Optional metadata (timing, tokens, etc.)

    Example:
        >>> result = failure_result(InferenceErrorKind.TIMEOUT, "Inference timed out")
        >>> result.success
        False
    """

    success: bool = Field(description="Whether intelligence was produced")
    output: ColorIntelligence | None = Field(default=None, description="Intelligence (if success)")
    error: InferenceError | None = Field(default=None, description="Error (if failure)")
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Optional metadata (timing, tokens, etc.)"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


def success_result(
    output: ColorIntelligence,
    metadata: dict[str, Any] | None = None,
) -> InferenceResult:
    """Create success result."""
    return InferenceResult(success=True, output=output, metadata=metadata or {})


def failure_result(
    kind: InferenceErrorKind,
    message: str,
    metadata: dict[str, Any] | None = None,
) -> InferenceResult:
    """Create failure result.

    Args:
        kind: Failure classification
        message: Error message
        metadata: Optional metadata

    Returns:
        InferenceResult with success=False
    """
    return InferenceResult(
        success=False,
        error=InferenceError(kind=kind, message=message),
        metadata=metadata or {},
    )
