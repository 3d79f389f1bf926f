"""Response decoding and simulated streaming.

The inference endpoint returns a single completion, so streaming is
replayed from a finished ``GenerationResult``: the text is split into
words and emitted one delta at a time with a short pause in between.
Nothing here touches the transport, so a backend with real incremental
output can replace the generation step without changing the replay.

Public API (the "studs"):
    decode_response: Turn raw completion text into a GenerationResult
    error_result: Apology result used when generation fails
    simulate_stream: Replay a GenerationResult as stream events
"""

import asyncio
from collections.abc import AsyncIterator

from hf_chat.types import (
    Finish,
    FinishReason,
    GenerationResult,
    StreamEvent,
    TextDelta,
    TextPart,
    Usage,
)

EMPTY_RESPONSE_TEXT = "I apologize, but I could not generate a response."
ERROR_RESPONSE_TEXT = "I apologize, but I encountered an error. Please try again."

DEFAULT_STREAM_DELAY_SECONDS = 0.03


def _result(text: str, model: str | None) -> GenerationResult:
    # The endpoint reports neither a finish reason nor token counts.
    return GenerationResult(
        content=[TextPart(text=text)],
        finish_reason=FinishReason.STOP,
        usage=Usage(),
        model=model,
    )


def decode_response(raw_text: str | None, model: str | None = None) -> GenerationResult:
    """Build a result from raw completion text.

    Surrounding whitespace is stripped. An empty completion is replaced by
    ``EMPTY_RESPONSE_TEXT`` so callers never see an empty answer.
    """
    text = (raw_text or "").strip()
    return _result(text or EMPTY_RESPONSE_TEXT, model)


def error_result(model: str | None = None) -> GenerationResult:
    """Result returned in place of a failed one-shot generation."""
    return _result(ERROR_RESPONSE_TEXT, model)


def split_words(text: str) -> list[str]:
    """Split text into stream fragments that concatenate back to ``text``.

    Splits on single spaces and re-appends one space to every fragment but
    the last. Runs of other whitespace stay inside their fragment.
    """
    words = text.split(" ")
    return [word + " " for word in words[:-1]] + words[-1:]


async def simulate_stream(
    result: GenerationResult,
    delay_seconds: float = DEFAULT_STREAM_DELAY_SECONDS,
) -> AsyncIterator[StreamEvent]:
    """Replay a finished result as text deltas followed by one finish event.

    Sleeps ``delay_seconds`` after every delta. Closing the iterator or
    cancelling the consumer interrupts the pending sleep.

    Args:
        result: Completed generation to replay
        delay_seconds: Pause after each delta

    Yields:
        TextDelta per word, then a single Finish
    """
    for fragment in split_words(result.text):
        yield TextDelta(text_delta=fragment)
        await asyncio.sleep(delay_seconds)

    yield Finish(finish_reason=result.finish_reason, usage=result.usage)


__all__ = [
    "decode_response",
    "error_result",
    "split_words",
    "simulate_stream",
    "EMPTY_RESPONSE_TEXT",
    "ERROR_RESPONSE_TEXT",
    "DEFAULT_STREAM_DELAY_SECONDS",
]
