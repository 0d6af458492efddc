"""End-to-end: publish a spectrum, drain it, then serve lookups from the cache."""

from pathlib import Path

from hueprint.core.caching.backends.fs import FSVectorCache
from hueprint.core.color.models import Color
from hueprint.core.intel.embedding import ColorFeatureEmbedder
from hueprint.core.retrieval.models import ColorRequest, ResponseStatus, RetrievalState
from hueprint.core.retrieval.pipeline import RetrievalPipeline
from hueprint.core.seeding.consumer import SeedConsumer
from hueprint.core.seeding.models import SpectrumConfig
from hueprint.core.seeding.publisher import ColorSeedPublisher
from hueprint.core.seeding.queue import InMemorySeedQueue


async def test_seeded_colors_are_cache_hits(tmp_path: Path, generator, mock_provider):
    cache = FSVectorCache(tmp_path / "cache")
    pipeline = RetrievalPipeline(cache, generator, ColorFeatureEmbedder())
    queue = InMemorySeedQueue()
    publisher = ColorSeedPublisher(queue, delay_seconds=0)

    published = await publisher.publish_spectrum(
        SpectrumConfig(lightness_steps=3, chroma_steps=2, hue_steps=4)
    )
    stats = await queue.drain(SeedConsumer(pipeline, concurrency_limit=5).process_batch)

    assert published.queued_count == 24
    assert stats.acked == 24
    assert stats.dead_lettered == 0
    assert mock_provider.generate_text_async.await_count == 24
    assert len(list((tmp_path / "cache").glob("*.json"))) == 24

    response = await pipeline.retrieve(ColorRequest(color=Color(l=0.5, c=0.4, h=90)))

    assert response.status == ResponseStatus.FOUND
    assert response.states == [RetrievalState.CACHE_LOOKUP, RetrievalState.CACHE_HIT]
    assert response.descriptor.intelligence.suggested_name == "Ocean Depth"
    assert mock_provider.generate_text_async.await_count == 24


async def test_failed_items_are_dead_lettered(generator, mock_provider, memory_cache):
    mock_provider.generate_text_async.side_effect = TimeoutError("upstream slow")
    pipeline = RetrievalPipeline(memory_cache, generator, ColorFeatureEmbedder())
    queue = InMemorySeedQueue(max_attempts=2)
    publisher = ColorSeedPublisher(queue, delay_seconds=0)

    await publisher.publish_batch([(Color(l=0.5, c=0.1, h=10), None, None)])
    stats = await queue.drain(SeedConsumer(pipeline).process_batch)

    assert stats.acked == 0
    assert stats.dead_lettered == 1
    assert mock_provider.generate_text_async.await_count == 2
    assert len(memory_cache) == 0
