"""Configuration models and loaders."""

from hueprint.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    reset_app_config_cache,
)
from hueprint.core.config.models import (
    AppConfig,
    CacheConfig,
    EmbeddingConfig,
    InferenceConfig,
    LoggingConfig,
    SeedingConfig,
)

__all__ = [
    "AppConfig",
    "CacheConfig",
    "EmbeddingConfig",
    "InferenceConfig",
    "LoggingConfig",
    "SeedingConfig",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "reset_app_config_cache",
]
