"""Request/response types for color retrieval."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hueprint.core.color.models import Color, ColorDescriptor
from hueprint.core.intel.errors import InferenceErrorKind


class RetrievalState(str, Enum):
    """Steps a request passes through, recorded in order on the response."""

    FAST_PATH = "fast_path"
    CACHE_LOOKUP = "cache_lookup"
    CACHE_HIT = "cache_hit"
    MATH_FALLBACK = "math_fallback"
    AUGMENT = "augment"
    STORE = "store"
    ERROR_FALLBACK = "error_fallback"


class ResponseStatus(str, Enum):
    FOUND = "found"
    GENERATING = "generating"
    ERROR = "error"


class ColorRequest(BaseModel):
    """A color lookup.

    Attributes:
        color: Validated color (invalid input fails before any I/O)
        adhoc: Skip cache and inference, return pure math
        sync: On a cache miss, wait for augmentation instead of returning early
        token: Optional semantic role, e.g. "primary"
        name: Optional display name
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    color: Color
    adhoc: bool = False
    sync: bool = False
    token: str | None = None
    name: str | None = None


class ColorResponse(BaseModel):
    """Descriptor plus in-band status; failures never raise."""

    model_config = ConfigDict(
        frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True
    )

    status: ResponseStatus
    descriptor: ColorDescriptor
    fingerprint: str = Field(description="Exact-lookup fingerprint of the requested color")
    request_id: str | None = Field(
        default=None, description="Correlation id (pending-ai-<fingerprint>) while generating"
    )
    error: str | None = Field(default=None, description="Error message when status is error")
    error_kind: InferenceErrorKind | None = None
    states: list[RetrievalState] = Field(default_factory=list)
