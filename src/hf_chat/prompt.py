"""Prompt encoding for plain completion models.

Text generation endpoints have no native chat format, so role information
is encoded lexically: each turn becomes one ``Label: body`` line and the
prompt ends with an ``Assistant:`` cue so the model continues as the
assistant.

Public API (the "studs"):
    encode_prompt: Flatten conversation turns into a single prompt string
    build_parameters: Derive endpoint generation parameters from a request
"""

import json
from collections.abc import Iterable
from typing import Any

from hf_chat.types import (
    AssistantTurn,
    ContentPart,
    ConversationTurn,
    GenerationRequest,
    SystemTurn,
    TextGenerationParameters,
    TextPart,
    ToolResultPart,
    ToolTurn,
    UserTurn,
)

ROLE_LABELS: dict[str, str] = {
    "system": "System",
    "user": "Human",
    "assistant": "Assistant",
    "tool": "Tool",
}

ASSISTANT_CUE = "Assistant:"
FILE_PLACEHOLDER = "[File]"
TOOL_RESULT_PLACEHOLDER = "[Tool Result]"

DEFAULT_MAX_NEW_TOKENS = 150
MAX_NEW_TOKENS_LIMIT = 512
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TOP_P = 0.95


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def _render_part(part: ContentPart, placeholder: str) -> str:
    if isinstance(part, TextPart):
        return part.text
    if isinstance(part, ToolResultPart):
        return _to_json(part.output)
    return placeholder


def _render_parts(parts: Iterable[ContentPart], placeholder: str) -> str:
    return " ".join(_render_part(part, placeholder) for part in parts)


def _render_turn(turn: ConversationTurn) -> str:
    # Unrecognized turns render empty and are dropped by the caller.
    if isinstance(turn, SystemTurn):
        body = turn.content
    elif isinstance(turn, (UserTurn, AssistantTurn)):
        body = _render_parts(turn.content, FILE_PLACEHOLDER)
    elif isinstance(turn, ToolTurn):
        body = _render_parts(turn.content, TOOL_RESULT_PLACEHOLDER)
    else:
        return ""
    return f"{ROLE_LABELS[turn.role]}: {body}"


def encode_prompt(turns: Iterable[ConversationTurn]) -> str:
    """Flatten conversation turns into a single completion prompt.

    Turns are rendered in order as ``<Label>: <body>``. Parts of array-shaped
    content are joined with single spaces; text parts render verbatim, tool
    results as compact JSON, and anything else as a placeholder. A turn with
    an empty body still renders its label; only turns that render to an
    empty string (unrecognized turn types) are dropped.

    Args:
        turns: Ordered conversation turns

    Returns:
        Prompt string ending with ``"\\nAssistant:"``

    Example:
        >>> encode_prompt([UserTurn(content=[TextPart(text="Hi")])])
        'Human: Hi\\nAssistant:'
    """
    lines = [line for line in map(_render_turn, turns) if line]
    return "\n".join(lines) + "\n" + ASSISTANT_CUE


def build_parameters(request: GenerationRequest) -> TextGenerationParameters:
    """Apply defaults and the completion length cap to a request's settings.

    Unset values fall back to the defaults. An explicit temperature or top_p
    is kept as given, while a ``max_output_tokens`` of 0 counts as unset.
    ``max_new_tokens`` never exceeds ``MAX_NEW_TOKENS_LIMIT``.
    """
    max_new_tokens = request.max_output_tokens
    if max_new_tokens is None or max_new_tokens <= 0:
        max_new_tokens = DEFAULT_MAX_NEW_TOKENS

    return TextGenerationParameters(
        max_new_tokens=min(max_new_tokens, MAX_NEW_TOKENS_LIMIT),
        temperature=(
            DEFAULT_TEMPERATURE if request.temperature is None else request.temperature
        ),
        top_p=DEFAULT_TOP_P if request.top_p is None else request.top_p,
    )


__all__ = [
    "encode_prompt",
    "build_parameters",
    "ROLE_LABELS",
    "ASSISTANT_CUE",
    "FILE_PLACEHOLDER",
    "TOOL_RESULT_PLACEHOLDER",
    "DEFAULT_MAX_NEW_TOKENS",
    "MAX_NEW_TOKENS_LIMIT",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_TOP_P",
]
