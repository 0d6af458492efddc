"""Tests for the in-memory, filesystem and null vector caches."""

from pathlib import Path

import pytest

from hueprint.core.caching.backends.fs import FSVectorCache, sanitize_key
from hueprint.core.caching.backends.memory import InMemoryVectorCache
from hueprint.core.caching.backends.null import NullVectorCache
from hueprint.core.caching.errors import CacheWriteError


class TestInMemoryVectorCache:
    """Dict-backed cache."""

    async def test_miss_returns_none(self):
        assert await InMemoryVectorCache().get("missing") is None

    async def test_upsert_then_get(self):
        cache = InMemoryVectorCache()
        await cache.upsert("k", [1.0, 0.0], {"name": "a"})

        record = await cache.get("k")

        assert record is not None
        assert record.key == "k"
        assert record.embedding == [1.0, 0.0]
        assert record.metadata == {"name": "a"}

    async def test_upsert_overwrites(self):
        cache = InMemoryVectorCache()
        await cache.upsert("k", [1.0], {"v": 1, "old": True})
        await cache.upsert("k", [2.0], {"v": 2})

        record = await cache.get("k")

        assert record.metadata == {"v": 2}
        assert len(cache) == 1
        assert cache.upsert_calls == 2

    async def test_stored_metadata_is_isolated(self):
        cache = InMemoryVectorCache()
        metadata = {"nested": {"a": 1}}
        await cache.upsert("k", [1.0], metadata)
        metadata["nested"]["a"] = 2

        record = await cache.get("k")
        assert record.metadata == {"nested": {"a": 1}}

    async def test_query_ranks_by_cosine_similarity(self):
        cache = InMemoryVectorCache()
        await cache.upsert("x", [1.0, 0.0], {})
        await cache.upsert("y", [0.0, 1.0], {})
        await cache.upsert("xy", [1.0, 1.0], {})

        matches = await cache.query([1.0, 0.1], top_k=2)

        assert [m.key for m in matches] == ["x", "xy"]
        assert matches[0].score == pytest.approx(0.995, abs=1e-3)

    async def test_query_empty(self):
        assert await InMemoryVectorCache().query([1.0]) == []


class TestFSVectorCache:
    """One JSON file per key."""

    async def test_miss_returns_none(self, tmp_path: Path):
        assert await FSVectorCache(tmp_path).get("color-intel:0.5-0.1-10") is None

    async def test_round_trip(self, tmp_path: Path):
        cache = FSVectorCache(tmp_path / "cache")
        await cache.upsert("color-intel:0.5-0.1-10", [0.5, 0.25], {"descriptor": "{}"})

        record = await cache.get("color-intel:0.5-0.1-10")

        assert record is not None
        assert record.embedding == [0.5, 0.25]
        assert record.metadata == {"descriptor": "{}"}
        assert (tmp_path / "cache" / "color-intel_0.5-0.1-10.json").exists()

    async def test_no_temp_files_left(self, tmp_path: Path):
        cache = FSVectorCache(tmp_path)
        await cache.upsert("k", [1.0], {})
        await cache.upsert("k", [2.0], {})

        assert [p.name for p in tmp_path.iterdir()] == ["k.json"]

    async def test_corrupt_entry_is_miss(self, tmp_path: Path):
        (tmp_path / "k.json").write_text("{not json", encoding="utf-8")
        assert await FSVectorCache(tmp_path).get("k") is None

    async def test_undecodable_bytes_are_miss(self, tmp_path: Path):
        (tmp_path / "k.json").write_bytes(b"\xff\xfe{bad")
        assert await FSVectorCache(tmp_path).get("k") is None

    async def test_entry_for_other_key_is_miss(self, tmp_path: Path):
        cache = FSVectorCache(tmp_path)
        await cache.upsert("a:b", [1.0], {})

        # "a_b" sanitizes to the same file name as "a:b"
        assert await cache.get("a_b") is None

    async def test_write_failure_raises_cache_write_error(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")
        cache = FSVectorCache(blocker / "cache")

        with pytest.raises(CacheWriteError):
            await cache.upsert("k", [1.0], {})

    async def test_invalidate(self, tmp_path: Path):
        cache = FSVectorCache(tmp_path)
        await cache.upsert("k", [1.0], {})
        await cache.invalidate("k")

        assert await cache.get("k") is None

    def test_sanitize_key(self):
        assert sanitize_key("color-intel:0.65-0.12-240") == "color-intel_0.65-0.12-240"
        assert sanitize_key("../etc/passwd") == ".._etc_passwd"


class TestNullVectorCache:
    """Always misses."""

    async def test_discards_writes(self):
        cache = NullVectorCache()
        await cache.upsert("k", [1.0], {"a": 1})

        assert await cache.get("k") is None
