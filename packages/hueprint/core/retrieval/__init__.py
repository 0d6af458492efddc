"""Cache-or-generate retrieval pipeline."""

from hueprint.core.retrieval.models import (
    ColorRequest,
    ColorResponse,
    ResponseStatus,
    RetrievalState,
)
from hueprint.core.retrieval.pipeline import RetrievalPipeline

__all__ = [
    "ColorRequest",
    "ColorResponse",
    "ResponseStatus",
    "RetrievalPipeline",
    "RetrievalState",
]
