"""Cache seeding: publish colors to a queue and drain them through retrieval."""

from hueprint.core.seeding.consumer import SeedConsumer, process_seed_batch
from hueprint.core.seeding.models import (
    SPECTRUM_TOKEN,
    BatchReport,
    PublishResult,
    QueueStats,
    SeedItem,
    SeedMessage,
    SeedQueue,
    SpectrumConfig,
)
from hueprint.core.seeding.publisher import ColorSeedPublisher
from hueprint.core.seeding.queue import InMemorySeedQueue, QueueMessage
from hueprint.core.seeding.spectrum import spectrum_colors

__all__ = [
    "SPECTRUM_TOKEN",
    "BatchReport",
    "ColorSeedPublisher",
    "InMemorySeedQueue",
    "PublishResult",
    "QueueMessage",
    "QueueStats",
    "SeedConsumer",
    "SeedItem",
    "SeedMessage",
    "SeedQueue",
    "SpectrumConfig",
    "process_seed_batch",
    "spectrum_colors",
]
