"""Cache-or-generate retrieval of color descriptors.

    adhoc            -> FAST_PATH                         -> found
    cache hit        -> CACHE_LOOKUP, CACHE_HIT           -> found
    miss, not sync   -> CACHE_LOOKUP, MATH_FALLBACK       -> generating
    miss, sync, ok   -> CACHE_LOOKUP, AUGMENT, STORE      -> found
    miss, sync, fail -> CACHE_LOOKUP, AUGMENT, ERROR_FALLBACK -> error

Concurrent sync misses for the same fingerprint inside one pipeline share a
single augmentation task. Across processes or pipeline instances duplicate
augmentations can still happen; the cache only offers unconditional upsert,
so the last write wins and the duplicates are wasted work, not corruption.
"""

from __future__ import annotations

import asyncio
import logging

from hueprint.core.caching.codec import decode_descriptor, encode_descriptor
from hueprint.core.caching.errors import CacheError
from hueprint.core.caching.fingerprint import cache_key, correlation_id, fingerprint
from hueprint.core.caching.protocols import VectorCache
from hueprint.core.color.engine import describe
from hueprint.core.color.models import Color, ColorDescriptor
from hueprint.core.intel.embedding import Embedder
from hueprint.core.intel.errors import InferenceError, InferenceErrorKind
from hueprint.core.intel.generator import ColorIntelligenceGenerator
from hueprint.core.intel.prompts import IntelligenceContext
from hueprint.core.retrieval.models import (
    ColorRequest,
    ColorResponse,
    ResponseStatus,
    RetrievalState,
)

logger = logging.getLogger(__name__)


class RetrievalPipeline:
    """Serves descriptors from the vector cache, generating on demand.

    Args:
        cache: Vector cache backend
        generator: Intelligence generator (bounded by its own timeout)
        embedder: Descriptor embedder used when storing
    """

    def __init__(
        self,
        cache: VectorCache,
        generator: ColorIntelligenceGenerator,
        embedder: Embedder,
    ) -> None:
        self.cache = cache
        self.generator = generator
        self.embedder = embedder
        self._inflight: dict[str, asyncio.Task[ColorResponse]] = {}

    async def retrieve(self, request: ColorRequest) -> ColorResponse:
        """Resolve one request. Never raises for cache or inference failures."""
        color = request.color
        exact = fingerprint(color)

        if request.adhoc:
            return ColorResponse(
                status=ResponseStatus.FOUND,
                descriptor=describe(color),
                fingerprint=exact,
                states=[RetrievalState.FAST_PATH],
            )

        key = cache_key(color)
        cached = await self._lookup(key, color)
        if cached is not None:
            logger.debug(f"Cache hit for {key}")
            return ColorResponse(
                status=ResponseStatus.FOUND,
                descriptor=cached,
                fingerprint=exact,
                states=[RetrievalState.CACHE_LOOKUP, RetrievalState.CACHE_HIT],
            )

        logger.debug(f"Cache miss for {key}")
        if not request.sync:
            return ColorResponse(
                status=ResponseStatus.GENERATING,
                descriptor=describe(color),
                fingerprint=exact,
                request_id=correlation_id(color),
                states=[RetrievalState.CACHE_LOOKUP, RetrievalState.MATH_FALLBACK],
            )

        task = self._inflight.get(exact)
        if task is None:
            task = asyncio.create_task(self._augment(request, key, exact))
            self._inflight[exact] = task
            task.add_done_callback(lambda _: self._inflight.pop(exact, None))
        else:
            logger.debug(f"Joining in-flight augmentation for {exact}")

        return await asyncio.shield(task)

    async def _lookup(self, key: str, color: Color) -> ColorDescriptor | None:
        try:
            record = await self.cache.get(key)
            if record is None:
                return None
            return decode_descriptor(record.metadata, color)
        except CacheError as e:
            logger.warning(f"Cache read failed for {key}, treating as miss: {e}")
            return None
        except Exception as e:
            logger.warning(
                f"Unexpected cache read failure for {key}, treating as miss: {type(e).__name__}: {e}"
            )
            return None

    async def _augment(self, request: ColorRequest, key: str, exact: str) -> ColorResponse:
        base = describe(request.color)
        context = IntelligenceContext(token=request.token, name=request.name)

        result = await self.generator.generate(base, context, base.perceptual_weight)
        if not result.success or result.output is None:
            error = result.error or InferenceError(
                kind=InferenceErrorKind.UNAVAILABLE, message="Inference failed"
            )
            logger.warning(f"Augmentation failed for {exact}: {error.kind.value} {error.message}")
            return ColorResponse(
                status=ResponseStatus.ERROR,
                descriptor=base,
                fingerprint=exact,
                error=error.message,
                error_kind=error.kind,
                states=[
                    RetrievalState.CACHE_LOOKUP,
                    RetrievalState.AUGMENT,
                    RetrievalState.ERROR_FALLBACK,
                ],
            )

        augmented = base.with_intelligence(result.output)
        await self._store(key, augmented)
        return ColorResponse(
            status=ResponseStatus.FOUND,
            descriptor=augmented,
            fingerprint=exact,
            states=[RetrievalState.CACHE_LOOKUP, RetrievalState.AUGMENT, RetrievalState.STORE],
        )

    async def _store(self, key: str, descriptor: ColorDescriptor) -> None:
        """Best-effort persistence; failures are logged, never raised."""
        try:
            embedding = await self.embedder.embed(descriptor)
            await self.cache.upsert(key, embedding, encode_descriptor(descriptor))
        except Exception as e:
            logger.warning(f"Cache write failed for {key}: {type(e).__name__}: {e}")
        else:
            logger.debug(f"Stored {key}")
