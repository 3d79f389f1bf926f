"""Hugging Face text generation provider implementation.

Public API (the "studs"):
    HuggingFaceModel: Language model backed by a Hugging Face inference endpoint
    create_huggingface_model: Build a HuggingFaceModel from a model identifier
"""

import logging
from collections.abc import AsyncIterator
from typing import Any, Protocol

from huggingface_hub import AsyncInferenceClient
from huggingface_hub.errors import HfHubHTTPError, InferenceTimeoutError
from pydantic import SecretStr

from hf_chat.config import LLMConfig
from hf_chat.exceptions import (
    LLMAuthenticationError,
    LLMError,
    LLMInvalidRequestError,
    LLMProviderError,
    LLMRateLimitError,
    LLMTimeoutError,
)
from hf_chat.prompt import build_parameters, encode_prompt
from hf_chat.providers.base import BaseLanguageModel
from hf_chat.streaming import decode_response, error_result, simulate_stream
from hf_chat.types import GenerationRequest, GenerationResult, StreamEvent

_logger = logging.getLogger(__name__)


class TextGenerationClient(Protocol):
    """The part of ``AsyncInferenceClient`` this provider depends on."""

    async def text_generation(self, prompt: str, *, model: str | None = None, **kwargs: Any) -> Any:
        ...


def _map_http_error(e: HfHubHTTPError) -> LLMError:
    status = getattr(e.response, "status_code", None)
    if status in (401, 403):
        return LLMAuthenticationError(f"Hugging Face authentication failed: {e}")
    if status == 429:
        return LLMRateLimitError(f"Hugging Face rate limit exceeded: {e}")
    if status is not None and 400 <= status < 500:
        return LLMInvalidRequestError(f"Hugging Face rejected the request: {e}")
    return LLMProviderError(f"Hugging Face error: {e}")


class HuggingFaceModel(BaseLanguageModel):
    """Language model backed by the Hugging Face text generation task.

    The endpoint is a plain completion API: the conversation is flattened
    into one prompt and the completion comes back in a single response.
    Streaming is simulated by replaying that response word by word.

    ``do_generate`` never raises on upstream failures; it logs them and
    returns an apology result. ``do_stream`` raises them before the first
    event, since a stream has no way to signal an apology.
    """

    provider = "huggingface"

    def __init__(self, config: LLMConfig, client: TextGenerationClient | None = None) -> None:
        if config.provider != "huggingface":
            raise ValueError(
                f"HuggingFaceModel requires a huggingface config, got {config.provider!r}"
            )
        if not config.model:
            raise ValueError("model is required for Hugging Face provider")

        self._config = config
        self.model_id: str = config.model
        self._stream_delay_seconds = config.stream_delay_seconds

        if client is None:
            api_key = config.api_key.get_secret_value() if config.api_key else None
            client = AsyncInferenceClient(token=api_key, timeout=config.timeout_seconds)
        self._client = client

    async def _complete(self, request: GenerationRequest) -> GenerationResult:
        prompt = encode_prompt(request.prompt)
        parameters = build_parameters(request)
        _logger.debug(
            "Requesting completion from %s (prompt chars=%d, max_new_tokens=%d)",
            self.model_id,
            len(prompt),
            parameters.max_new_tokens,
        )

        try:
            raw = await self._client.text_generation(
                prompt, model=self.model_id, **parameters.model_dump()
            )
        except HfHubHTTPError as e:
            raise _map_http_error(e) from e
        except InferenceTimeoutError as e:
            raise LLMTimeoutError(f"Hugging Face request timed out: {e}") from e
        except Exception as e:
            raise LLMProviderError(f"Hugging Face error: {e}") from e

        if raw is not None and not isinstance(raw, str):
            raise LLMProviderError(
                f"Hugging Face returned an unexpected payload: {type(raw).__name__}"
            )

        return decode_response(raw, self.model_id)

    async def do_generate(self, request: GenerationRequest) -> GenerationResult:
        try:
            return await self._complete(request)
        except LLMError as e:
            _logger.warning(
                "Hugging Face generation failed for %s: %s", self.model_id, e, exc_info=True
            )
            return error_result(self.model_id)

    async def do_stream(self, request: GenerationRequest) -> AsyncIterator[StreamEvent]:
        try:
            result = await self._complete(request)
        except LLMError as e:
            _logger.error("Hugging Face streaming failed for %s: %s", self.model_id, e)
            raise

        async for event in simulate_stream(result, self._stream_delay_seconds):
            yield event


def create_huggingface_model(
    model_id: str,
    api_key: str | None = None,
    client: TextGenerationClient | None = None,
    **overrides: Any,
) -> HuggingFaceModel:
    """Build a HuggingFaceModel from a model identifier.

    Args:
        model_id: Model identifier on the Hugging Face Hub
        api_key: Access token; falls back to HUGGINGFACE_API_KEY when omitted
        client: Inference client to use instead of a new AsyncInferenceClient
        **overrides: Additional LLMConfig fields (timeout_seconds, ...)

    Example:
        >>> model = create_huggingface_model("google/flan-t5-base")
        >>> result = await model.do_generate(request)
    """
    config = LLMConfig(
        provider="huggingface",
        model=model_id,
        api_key=SecretStr(api_key) if api_key else None,
        **overrides,
    )
    return HuggingFaceModel(config, client=client)


__all__ = ["HuggingFaceModel", "TextGenerationClient", "create_huggingface_model"]
