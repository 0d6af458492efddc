"""Vector cache error hierarchy."""


class CacheError(Exception):
    """Base class for vector cache failures."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key


class CacheUnavailableError(CacheError):
    """Cache could not be read; callers treat this as a miss."""


class CacheWriteError(CacheError):
    """Cache entry could not be persisted; callers log and continue."""


class DescriptorDecodeError(CacheError):
    """Stored metadata could not be turned back into a descriptor."""
