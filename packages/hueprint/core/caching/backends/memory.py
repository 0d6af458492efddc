"""In-process vector cache with cosine similarity search."""

from __future__ import annotations

import asyncio
import copy
from collections.abc import Sequence
from typing import Any

import numpy as np

from hueprint.core.caching.models import VectorMatch, VectorRecord


class InMemoryVectorCache:
    """
    Dict-backed vector cache.

    Stores deep copies so callers cannot mutate cached metadata. Counts reads
    and writes, which tests use to assert cache traffic.
    """

    def __init__(self) -> None:
        self._records: dict[str, VectorRecord] = {}
        self._lock = asyncio.Lock()
        self.get_calls = 0
        self.upsert_calls = 0

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    async def get(self, key: str) -> VectorRecord | None:
        self.get_calls += 1
        record = self._records.get(key)
        if record is None:
            return None
        return record.model_copy(deep=True)

    async def upsert(
        self,
        key: str,
        embedding: Sequence[float],
        metadata: dict[str, Any],
    ) -> None:
        record = VectorRecord(
            key=key,
            embedding=[float(v) for v in embedding],
            metadata=copy.deepcopy(metadata),
        )
        async with self._lock:
            self.upsert_calls += 1
            self._records[key] = record

    async def query(self, vector: Sequence[float], top_k: int = 5) -> list[VectorMatch]:
        """
        Rank stored entries by cosine similarity to vector.

        Args:
            vector: Query embedding
            top_k: Maximum number of matches

        Returns:
            Matches sorted by descending score
        """
        if not self._records or top_k <= 0:
            return []

        records = [r for r in self._records.values() if len(r.embedding) == len(vector)]
        if not records:
            return []

        query = np.asarray(vector, dtype=float)
        matrix = np.asarray([r.embedding for r in records], dtype=float)
        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
        scores = np.divide(
            matrix @ query, norms, out=np.zeros(len(records)), where=norms > 0
        )

        order = np.argsort(-scores)[:top_k]
        return [
            VectorMatch(
                key=records[i].key,
                score=float(scores[i]),
                metadata=copy.deepcopy(records[i].metadata),
            )
            for i in order
        ]
