"""Protocol for vector cache backends."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from hueprint.core.caching.models import VectorRecord


class VectorCache(Protocol):
    """
    Key -> (embedding, metadata) store.

    Implementations must:
    - Return None on a miss (never raise for absent keys)
    - Overwrite entries on upsert (no partial merge)
    - Raise CacheUnavailableError / CacheWriteError for backend failures
    """

    async def get(self, key: str) -> VectorRecord | None:
        """
        Fetch an entry by key.

        Args:
            key: Cache key

        Returns:
            The stored record, or None on miss
        """
        ...

    async def upsert(
        self,
        key: str,
        embedding: Sequence[float],
        metadata: dict[str, Any],
    ) -> None:
        """
        Insert or overwrite an entry.

        Args:
            key: Cache key
            embedding: Embedding vector
            metadata: JSON-serializable metadata
        """
        ...
