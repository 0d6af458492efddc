"""No-op vector cache for development/testing.

Always reports a miss, discards all writes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from hueprint.core.caching.models import VectorRecord


class NullVectorCache:
    """No-op async vector cache."""

    async def get(self, key: str) -> VectorRecord | None:
        """Always returns None."""
        return None

    async def upsert(
        self,
        key: str,
        embedding: Sequence[float],
        metadata: dict[str, Any],
    ) -> None:
        """Discard."""
        pass
