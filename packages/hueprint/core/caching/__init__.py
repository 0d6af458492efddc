"""Vector caching for augmented color descriptors.

Key features:
- Deterministic fingerprints (half-away-from-zero rounding)
- Async VectorCache protocol with memory, filesystem and null backends
- Tolerant descriptor decoding (absent fields defaulted, never fatal)
- Miss-on-error semantics for corrupt entries
"""

from hueprint.core.caching.backends.fs import FSVectorCache
from hueprint.core.caching.backends.memory import InMemoryVectorCache
from hueprint.core.caching.backends.null import NullVectorCache
from hueprint.core.caching.codec import decode_descriptor, encode_descriptor
from hueprint.core.caching.errors import (
    CacheError,
    CacheUnavailableError,
    CacheWriteError,
    DescriptorDecodeError,
)
from hueprint.core.caching.fingerprint import (
    cache_key,
    correlation_id,
    fingerprint,
    intelligence_fingerprint,
    quantize,
)
from hueprint.core.caching.models import VectorMatch, VectorRecord
from hueprint.core.caching.protocols import VectorCache

__all__ = [
    # Core
    "VectorCache",
    "VectorMatch",
    "VectorRecord",
    # Backends
    "FSVectorCache",
    "InMemoryVectorCache",
    "NullVectorCache",
    # Codec
    "decode_descriptor",
    "encode_descriptor",
    # Errors
    "CacheError",
    "CacheUnavailableError",
    "CacheWriteError",
    "DescriptorDecodeError",
    # Keys
    "cache_key",
    "correlation_id",
    "fingerprint",
    "intelligence_fingerprint",
    "quantize",
]
