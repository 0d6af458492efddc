"""Seeding data types."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hueprint.core.color.models import Color

SPECTRUM_TOKEN = "spectrum-seed"


class SeedItem(BaseModel):
    """One backlog entry awaiting augmentation."""

    model_config = ConfigDict(
        frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True
    )

    color: Color
    token: str | None = None
    name: str | None = None
    request_id: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    attempts: int = Field(default=0, ge=0, description="Delivery attempts so far")


class SeedMessage(Protocol):
    """A delivered queue message.

    The consumer settles each message exactly once with ack() or retry();
    redelivery cadence and attempt limits belong to the queue.
    """

    @property
    def body(self) -> SeedItem: ...

    def ack(self) -> None: ...

    def retry(self) -> None: ...


class SeedQueue(Protocol):
    """Producer side of the seeding queue."""

    async def send(self, item: SeedItem) -> None: ...

    async def send_batch(self, items: list[SeedItem]) -> None: ...


class SpectrumConfig(BaseModel):
    """Grid of colors to seed.

    Lightness spans 0.1..0.9, chroma 0..0.4 and hue i * 360 / hue_steps.
    A single step uses the midpoint of its range.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    lightness_steps: int = Field(default=9, ge=1, le=20)
    chroma_steps: int = Field(default=5, ge=1, le=20)
    hue_steps: int = Field(default=12, ge=1, le=36)
    base_name: str = Field(default="spectrum", min_length=1)

    @property
    def total(self) -> int:
        return self.lightness_steps * self.chroma_steps * self.hue_steps


class PublishResult(BaseModel):
    """Outcome of a publish call; queue errors are reported, not raised."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    success: bool
    request_id: str | None = None
    queued_count: int | None = None
    error: str | None = None


class BatchReport(BaseModel):
    """Per-batch ack/retry tally from the consumer."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    acked: int = 0
    retried: int = 0
    chunks: int = 0


class QueueStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    pending: int = 0
    in_flight: int = 0
    acked: int = 0
    retried: int = 0
    dead_lettered: int = 0
