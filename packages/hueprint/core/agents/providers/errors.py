"""Provider error types."""


class LLMProviderError(Exception):
    """Raised when a provider call fails after SDK-level retries."""
