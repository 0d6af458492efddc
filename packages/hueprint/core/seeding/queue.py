"""In-process seeding queue with redelivery and dead-lettering.

Stands in for a hosted message queue: delivers batches, counts attempts,
requeues retried messages and dead-letters them after `max_attempts`.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import Awaitable, Callable, Sequence

from hueprint.core.seeding.models import QueueStats, SeedItem

logger = logging.getLogger(__name__)


class QueueMessage:
    """A delivered message; settle it once with ack() or retry()."""

    def __init__(self, queue: InMemorySeedQueue, item: SeedItem) -> None:
        self._queue = queue
        self._item = item
        self.settled = False

    @property
    def body(self) -> SeedItem:
        return self._item

    def ack(self) -> None:
        if not self.settled:
            self.settled = True
            self._queue._on_ack(self._item)

    def retry(self) -> None:
        if not self.settled:
            self.settled = True
            self._queue._on_retry(self._item)


class InMemorySeedQueue:
    """FIFO queue implementing both producer and delivery sides.

    Args:
        max_attempts: Deliveries before a retried message is dead-lettered
    """

    def __init__(self, max_attempts: int = 3) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.max_attempts = max_attempts
        self._pending: deque[SeedItem] = deque()
        self._in_flight = 0
        self._acked = 0
        self._retried = 0
        self.dead_letters: list[SeedItem] = []

    async def send(self, item: SeedItem) -> None:
        self._pending.append(item)

    async def send_batch(self, items: list[SeedItem]) -> None:
        self._pending.extend(items)

    def __len__(self) -> int:
        return len(self._pending)

    def receive(self, max_messages: int = 10) -> list[QueueMessage]:
        """Deliver up to max_messages, bumping each item's attempt count."""
        messages: list[QueueMessage] = []
        while self._pending and len(messages) < max_messages:
            item = self._pending.popleft()
            delivered = item.model_copy(update={"attempts": item.attempts + 1})
            messages.append(QueueMessage(self, delivered))
        self._in_flight += len(messages)
        return messages

    def _on_ack(self, item: SeedItem) -> None:
        self._in_flight -= 1
        self._acked += 1

    def _on_retry(self, item: SeedItem) -> None:
        self._in_flight -= 1
        self._retried += 1
        if item.attempts >= self.max_attempts:
            logger.warning(f"Dead-lettering {item.request_id} after {item.attempts} attempts")
            self.dead_letters.append(item)
        else:
            self._pending.append(item)

    def stats(self) -> QueueStats:
        return QueueStats(
            pending=len(self._pending),
            in_flight=self._in_flight,
            acked=self._acked,
            retried=self._retried,
            dead_lettered=len(self.dead_letters),
        )

    async def drain(
        self,
        handler: Callable[[Sequence[QueueMessage]], Awaitable[object]],
        batch_size: int = 100,
        retry_delay_seconds: float = 0.0,
    ) -> QueueStats:
        """Deliver batches to handler until nothing is pending.

        Messages the handler leaves unsettled are retried, like a hosted
        queue whose consumer returned without acknowledging.

        Args:
            handler: Batch consumer, e.g. SeedConsumer.process_batch
            batch_size: Messages per delivery
            retry_delay_seconds: Pause before redelivering a batch with retries

        Returns:
            Final queue stats
        """
        while self._pending:
            retried_before = self._retried
            batch = self.receive(batch_size)
            try:
                await handler(batch)
            finally:
                for message in batch:
                    if not message.settled:
                        message.retry()
            if self._retried > retried_before and retry_delay_seconds > 0 and self._pending:
                await asyncio.sleep(retry_delay_seconds)
        return self.stats()
