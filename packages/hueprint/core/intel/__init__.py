"""Color intelligence: prompts, response extraction, generation, embeddings."""

from hueprint.core.intel.embedding import (
    ColorFeatureEmbedder,
    Embedder,
    OpenAIEmbedder,
    embedding_text,
)
from hueprint.core.intel.errors import InferenceError, InferenceErrorKind
from hueprint.core.intel.extraction import extract_intelligence, find_json_object
from hueprint.core.intel.generator import ColorIntelligenceGenerator
from hueprint.core.intel.prompts import IntelligenceContext, build_messages, build_user_prompt
from hueprint.core.intel.result import InferenceResult, failure_result, success_result

__all__ = [
    "ColorFeatureEmbedder",
    "ColorIntelligenceGenerator",
    "Embedder",
    "InferenceError",
    "InferenceErrorKind",
    "InferenceResult",
    "IntelligenceContext",
    "OpenAIEmbedder",
    "build_messages",
    "build_user_prompt",
    "embedding_text",
    "extract_intelligence",
    "failure_result",
    "find_json_object",
    "success_result",
]
