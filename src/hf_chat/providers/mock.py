"""Deterministic language model for tests and offline runs.

Public API (the "studs"):
    MockLanguageModel: Language model returning a canned response
"""

from collections.abc import AsyncIterator

from hf_chat.config import DEFAULT_MOCK_MODEL, LLMConfig
from hf_chat.prompt import build_parameters, encode_prompt
from hf_chat.providers.base import BaseLanguageModel
from hf_chat.streaming import decode_response, simulate_stream
from hf_chat.types import (
    GenerationRequest,
    GenerationResult,
    StreamEvent,
    TextGenerationParameters,
)

DEFAULT_MOCK_RESPONSE = "Hello, world!"


class MockLanguageModel(BaseLanguageModel):
    """Language model that answers every request with the same text.

    Requests still go through the prompt encoder, and the encoded prompt
    and parameters of the most recent call are kept for inspection.
    """

    provider = "mock"

    def __init__(self, config: LLMConfig) -> None:
        self._config = config
        self.model_id: str = config.model or DEFAULT_MOCK_MODEL
        self._response = config.mock_response or DEFAULT_MOCK_RESPONSE
        self._stream_delay_seconds = config.stream_delay_seconds
        self.last_prompt: str | None = None
        self.last_parameters: TextGenerationParameters | None = None

    async def do_generate(self, request: GenerationRequest) -> GenerationResult:
        self.last_prompt = encode_prompt(request.prompt)
        self.last_parameters = build_parameters(request)
        return decode_response(self._response, self.model_id)

    async def do_stream(self, request: GenerationRequest) -> AsyncIterator[StreamEvent]:
        result = await self.do_generate(request)
        async for event in simulate_stream(result, self._stream_delay_seconds):
            yield event


__all__ = ["MockLanguageModel", "DEFAULT_MOCK_RESPONSE"]
