"""Batch consumer: drains seed messages through the retrieval pipeline.

Messages are split into chunks of `concurrency_limit`; chunks run one after
another and messages inside a chunk run concurrently. Each message is
acknowledged when the pipeline returns `found` and retried otherwise.
Attempt limits and backoff belong to the queue, not to this consumer.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from hueprint.core.retrieval.models import ColorRequest, ResponseStatus
from hueprint.core.retrieval.pipeline import RetrievalPipeline
from hueprint.core.seeding.models import BatchReport, SeedMessage

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY_LIMIT = 10


class SeedConsumer:
    """Classifies each seed message as ack or retry.

    Args:
        pipeline: Retrieval pipeline, called in sync mode per message
        concurrency_limit: Maximum messages in flight at once
    """

    def __init__(
        self,
        pipeline: RetrievalPipeline,
        concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
    ) -> None:
        if concurrency_limit < 1:
            raise ValueError(f"concurrency_limit must be >= 1, got {concurrency_limit}")
        self.pipeline = pipeline
        self.concurrency_limit = concurrency_limit

    async def process_batch(self, messages: Sequence[SeedMessage]) -> BatchReport:
        """Process a batch; item failures never abort it.

        Args:
            messages: Delivered messages (may be empty)

        Returns:
            BatchReport with ack/retry counts
        """
        if not messages:
            return BatchReport()

        acked = 0
        chunks = 0
        for start in range(0, len(messages), self.concurrency_limit):
            chunk = messages[start : start + self.concurrency_limit]
            outcomes = await asyncio.gather(*(self._process_message(m) for m in chunk))
            chunks += 1
            acked += sum(outcomes)
            logger.info(
                f"Seed chunk {chunks}: {sum(outcomes)}/{len(chunk)} acknowledged "
                f"({start + len(chunk)}/{len(messages)} processed)"
            )

        return BatchReport(
            total=len(messages),
            acked=acked,
            retried=len(messages) - acked,
            chunks=chunks,
        )

    async def _process_message(self, message: SeedMessage) -> bool:
        """Run one message through the pipeline; True if acknowledged."""
        item = message.body
        try:
            response = await self.pipeline.retrieve(
                ColorRequest(color=item.color, sync=True, token=item.token, name=item.name)
            )
        except Exception as e:
            logger.warning(f"Seed {item.request_id} raised, retrying: {e}")
            message.retry()
            return False

        if response.status == ResponseStatus.FOUND:
            message.ack()
            return True

        logger.warning(
            f"Seed {item.request_id} returned {response.status.value}, retrying: {response.error}"
        )
        message.retry()
        return False


async def process_seed_batch(
    messages: Sequence[SeedMessage],
    pipeline: RetrievalPipeline,
    concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
) -> BatchReport:
    """Functional entry point for queue triggers."""
    return await SeedConsumer(pipeline, concurrency_limit).process_batch(messages)
