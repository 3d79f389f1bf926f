"""Exceptions raised by language model providers.

Public API (the "studs"):
    LLMError: Base exception for all provider errors
    LLMAuthenticationError: Missing or rejected credentials
    LLMRateLimitError: Rate limit exceeded (retryable)
    LLMInvalidRequestError: Endpoint rejected the request parameters
    LLMTimeoutError: Inference endpoint did not answer in time
    LLMProviderError: Any other upstream failure
"""


class LLMError(Exception):
    """Base exception for all provider errors."""

    pass


class LLMAuthenticationError(LLMError):
    """Hugging Face token missing, invalid or lacking access to the model."""

    pass


class LLMRateLimitError(LLMError):
    """Rate limit exceeded. This error is typically retryable."""

    pass


class LLMInvalidRequestError(LLMError):
    """Invalid request parameters."""

    pass


class LLMTimeoutError(LLMError):
    """The inference endpoint did not respond within the configured timeout."""

    pass


class LLMProviderError(LLMError):
    """Upstream error that doesn't fit other categories."""

    pass


__all__ = [
    "LLMError",
    "LLMAuthenticationError",
    "LLMRateLimitError",
    "LLMInvalidRequestError",
    "LLMTimeoutError",
    "LLMProviderError",
]
