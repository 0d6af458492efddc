"""Filesystem-backed vector cache.

One JSON file per key, written atomically (temp file + replace) so readers
never observe a partial entry. Corrupt files are treated as misses.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from hueprint.core.caching.errors import CacheUnavailableError, CacheWriteError
from hueprint.core.caching.models import VectorRecord

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_key(key: str) -> str:
    """Map a cache key to a safe file stem."""
    return _UNSAFE_CHARS.sub("_", key)


class FSVectorCache:
    """
    Async filesystem vector cache.

    The cache lazily creates its root directory on first write.
    """

    def __init__(self, root: Path | str) -> None:
        """
        Initialize filesystem cache.

        Args:
            root: Directory holding one <key>.json file per entry
        """
        self.root = Path(root)

    def _entry_path(self, key: str) -> Path:
        return self.root / f"{sanitize_key(key)}.json"

    def _read(self, key: str) -> VectorRecord | None:
        path = self._entry_path(key)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            logger.warning(f"Corrupt cache entry {path.name}, treating as miss: {e}")
            return None
        except OSError as e:
            raise CacheUnavailableError(f"Failed to read cache entry: {e}", key=key) from e

        try:
            record = VectorRecord.model_validate_json(text)
        except ValidationError as e:
            logger.warning(f"Corrupt cache entry {path.name}, treating as miss: {e}")
            return None

        if record.key != key:
            logger.warning(f"Cache entry {path.name} belongs to {record.key}, treating as miss")
            return None
        return record

    def _write(self, record: VectorRecord) -> None:
        path = self._entry_path(record.key)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=".tmp-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(record.model_dump_json())
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise CacheWriteError(f"Failed to write cache entry: {e}", key=record.key) from e

    async def get(self, key: str) -> VectorRecord | None:
        return await asyncio.to_thread(self._read, key)

    async def upsert(
        self,
        key: str,
        embedding: Sequence[float],
        metadata: dict[str, Any],
    ) -> None:
        record = VectorRecord(key=key, embedding=[float(v) for v in embedding], metadata=metadata)
        await asyncio.to_thread(self._write, record)

    async def invalidate(self, key: str) -> None:
        """Remove an entry if present."""
        await asyncio.to_thread(self._entry_path(key).unlink, missing_ok=True)
