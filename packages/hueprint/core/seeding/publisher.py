"""Publishes colors onto the seeding queue."""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Sequence

from hueprint.core.color.models import Color
from hueprint.core.seeding.models import (
    SPECTRUM_TOKEN,
    PublishResult,
    SeedItem,
    SeedQueue,
    SpectrumConfig,
)
from hueprint.core.seeding.spectrum import spectrum_colors

logger = logging.getLogger(__name__)


def _error_message(error: Exception) -> str:
    return str(error) or "Unknown error"


class ColorSeedPublisher:
    """Enqueues SeedItems, chunking large batches to respect queue limits.

    Args:
        queue: Queue producer
        chunk_size: Maximum messages per send_batch call
        delay_seconds: Pause between chunks (rate limiting)
    """

    def __init__(
        self,
        queue: SeedQueue,
        *,
        chunk_size: int = 100,
        delay_seconds: float = 0.25,
    ) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self.queue = queue
        self.chunk_size = chunk_size
        self.delay_seconds = delay_seconds

    async def publish_single(
        self,
        color: Color,
        *,
        token: str | None = None,
        name: str | None = None,
        request_id: str | None = None,
    ) -> PublishResult:
        request_id = request_id or str(uuid.uuid4())
        item = SeedItem(color=color, token=token, name=name, request_id=request_id)
        try:
            await self.queue.send(item)
        except Exception as e:
            logger.error(f"Failed to publish {request_id}: {e}")
            return PublishResult(success=False, error=_error_message(e))
        return PublishResult(success=True, request_id=request_id, queued_count=1)

    async def publish_batch(
        self,
        colors: Sequence[tuple[Color, str | None, str | None]],
        *,
        batch_id: str | None = None,
    ) -> PublishResult:
        """Publish (color, token, name) triples in chunks.

        Request ids are `<batch_id>-<chunk index>-<uuid>`.

        Args:
            colors: Colors with optional token and name
            batch_id: Batch identifier (random UUID if omitted)

        Returns:
            PublishResult with the batch id and number of queued items
        """
        batch_id = batch_id or str(uuid.uuid4())
        if not colors:
            return PublishResult(success=True, request_id=batch_id, queued_count=0)

        queued = 0
        try:
            for chunk_index, start in enumerate(range(0, len(colors), self.chunk_size)):
                if chunk_index > 0 and self.delay_seconds > 0:
                    await asyncio.sleep(self.delay_seconds)
                chunk = colors[start : start + self.chunk_size]
                items = [
                    SeedItem(
                        color=color,
                        token=token,
                        name=name,
                        request_id=f"{batch_id}-{chunk_index}-{uuid.uuid4()}",
                    )
                    for color, token, name in chunk
                ]
                await self.queue.send_batch(items)
                queued += len(items)
                logger.info(f"Published chunk {chunk_index} of batch {batch_id} ({queued} queued)")
        except Exception as e:
            logger.error(f"Failed to publish batch {batch_id} after {queued} items: {e}")
            return PublishResult(success=False, request_id=batch_id, error=_error_message(e))

        return PublishResult(success=True, request_id=batch_id, queued_count=queued)

    async def publish_spectrum(self, config: SpectrumConfig | None = None) -> PublishResult:
        """Publish a full lightness x chroma x hue grid tagged `spectrum-seed`."""
        config = config or SpectrumConfig()
        colors = [(color, SPECTRUM_TOKEN, name) for color, name in spectrum_colors(config)]
        logger.info(f"Publishing spectrum of {len(colors)} colors")
        return await self.publish_batch(colors, batch_id=f"{config.base_name}-{uuid.uuid4()}")
