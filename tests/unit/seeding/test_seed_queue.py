"""Tests for InMemorySeedQueue."""

import pytest

from hueprint.core.color.models import Color
from hueprint.core.seeding.models import SeedItem
from hueprint.core.seeding.queue import InMemorySeedQueue


def _item(index: int) -> SeedItem:
    return SeedItem(color=Color(l=0.5, c=0.1, h=float(index)), request_id=f"req-{index}")


class TestDelivery:
    """receive/ack/retry bookkeeping."""

    async def test_receive_increments_attempts(self):
        queue = InMemorySeedQueue()
        await queue.send(_item(0))

        [message] = queue.receive()

        assert message.body.attempts == 1
        assert queue.stats().in_flight == 1

    async def test_ack_is_idempotent(self):
        queue = InMemorySeedQueue()
        await queue.send(_item(0))
        [message] = queue.receive()

        message.ack()
        message.ack()
        message.retry()

        stats = queue.stats()
        assert stats.acked == 1
        assert stats.retried == 0
        assert stats.in_flight == 0

    async def test_retry_requeues_until_max_attempts(self):
        queue = InMemorySeedQueue(max_attempts=2)
        await queue.send(_item(0))

        queue.receive()[0].retry()
        assert len(queue) == 1

        queue.receive()[0].retry()
        assert len(queue) == 0
        assert [item.request_id for item in queue.dead_letters] == ["req-0"]
        assert queue.dead_letters[0].attempts == 2

    async def test_receive_respects_max_messages(self):
        queue = InMemorySeedQueue()
        await queue.send_batch([_item(i) for i in range(5)])

        assert len(queue.receive(max_messages=3)) == 3
        assert len(queue) == 2

    def test_rejects_invalid_max_attempts(self):
        with pytest.raises(ValueError):
            InMemorySeedQueue(max_attempts=0)


class TestDrain:
    """Handler-driven draining."""

    async def test_unsettled_messages_are_retried(self):
        queue = InMemorySeedQueue(max_attempts=2)
        await queue.send_batch([_item(0), _item(1)])
        calls = []

        async def handler(messages):
            calls.append(len(messages))
            for message in messages:
                if message.body.request_id == "req-0":
                    message.ack()

        stats = await queue.drain(handler, batch_size=10)

        assert calls == [2, 1]
        assert stats.acked == 1
        assert stats.retried == 2
        assert stats.dead_lettered == 1
        assert stats.pending == 0

    async def test_handler_failure_requeues_unsettled(self):
        queue = InMemorySeedQueue(max_attempts=3)
        await queue.send_batch([_item(0), _item(1)])

        async def handler(messages):
            messages[0].ack()
            raise RuntimeError("consumer crashed")

        with pytest.raises(RuntimeError, match="consumer crashed"):
            await queue.drain(handler, batch_size=10)

        stats = queue.stats()
        assert stats.in_flight == 0
        assert stats.acked == 1
        assert stats.retried == 1
        assert stats.pending == 1
        assert queue.receive()[0].body.request_id == "req-1"
