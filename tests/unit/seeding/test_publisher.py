"""Tests for ColorSeedPublisher."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from hueprint.core.color.models import Color
from hueprint.core.seeding.models import SPECTRUM_TOKEN, SpectrumConfig
from hueprint.core.seeding.publisher import ColorSeedPublisher
from hueprint.core.seeding.queue import InMemorySeedQueue


def _colors(count: int) -> list[tuple[Color, str | None, str | None]]:
    return [(Color(l=0.5, c=0.1, h=float(i)), "primary", f"c{i}") for i in range(count)]


class TestPublishSingle:
    """Single message publishing."""

    async def test_enqueues_item(self):
        queue = InMemorySeedQueue()
        publisher = ColorSeedPublisher(queue)

        result = await publisher.publish_single(
            Color(l=0.5, c=0.1, h=10), token="primary", request_id="req-1"
        )

        assert result.success
        assert result.request_id == "req-1"
        assert result.queued_count == 1
        [message] = queue.receive()
        assert message.body.token == "primary"
        assert message.body.request_id == "req-1"

    async def test_generates_request_id(self):
        result = await ColorSeedPublisher(InMemorySeedQueue()).publish_single(
            Color(l=0.5, c=0.1, h=10)
        )
        assert result.request_id

    async def test_queue_error_is_reported(self):
        queue = MagicMock()
        queue.send = AsyncMock(side_effect=ConnectionError("queue offline"))

        result = await ColorSeedPublisher(queue).publish_single(Color(l=0.5, c=0.1, h=10))

        assert not result.success
        assert result.error == "queue offline"

    async def test_empty_error_message(self):
        queue = MagicMock()
        queue.send = AsyncMock(side_effect=RuntimeError())

        result = await ColorSeedPublisher(queue).publish_single(Color(l=0.5, c=0.1, h=10))

        assert result.error == "Unknown error"


class TestPublishBatch:
    """Chunked publishing."""

    async def test_chunks_and_request_ids(self):
        queue = MagicMock()
        queue.send_batch = AsyncMock()
        publisher = ColorSeedPublisher(queue, chunk_size=100, delay_seconds=0)

        result = await publisher.publish_batch(_colors(250), batch_id="b1")

        assert result.success
        assert result.queued_count == 250
        assert result.request_id == "b1"
        sizes = [len(call.args[0]) for call in queue.send_batch.await_args_list]
        assert sizes == [100, 100, 50]
        last_chunk = queue.send_batch.await_args_list[2].args[0]
        assert all(item.request_id.startswith("b1-2-") for item in last_chunk)

    async def test_empty_batch(self):
        queue = MagicMock()
        queue.send_batch = AsyncMock()

        result = await ColorSeedPublisher(queue).publish_batch([])

        assert result.success
        assert result.queued_count == 0
        queue.send_batch.assert_not_called()

    async def test_failure_mid_batch(self):
        queue = MagicMock()
        queue.send_batch = AsyncMock(side_effect=[None, TimeoutError("throttled")])
        publisher = ColorSeedPublisher(queue, chunk_size=10, delay_seconds=0)

        result = await publisher.publish_batch(_colors(25), batch_id="b2")

        assert not result.success
        assert result.request_id == "b2"
        assert result.error == "throttled"

    def test_rejects_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            ColorSeedPublisher(InMemorySeedQueue(), chunk_size=0)


async def test_publish_spectrum():
    queue = InMemorySeedQueue()
    publisher = ColorSeedPublisher(queue, delay_seconds=0)
    config = SpectrumConfig(lightness_steps=2, chroma_steps=2, hue_steps=3, base_name="grid")

    result = await publisher.publish_spectrum(config)

    assert result.success
    assert result.queued_count == 12
    assert result.request_id.startswith("grid-")
    items = [m.body for m in queue.receive(max_messages=20)]
    assert len(items) == 12
    assert all(item.token == SPECTRUM_TOKEN for item in items)
    assert items[0].name == "grid-l10-c0-h0"
