"""Type definitions for the provider interface.

Conversation turns are a tagged union on ``role`` so every role's content
shape is explicit: system turns carry a plain string, all other roles carry
an ordered list of content parts. Field names are snake_case in Python and
accept the camelCase spelling used by the host payload (``toolCallId``,
``maxOutputTokens``, ...).

Public API (the "studs"):
    ConversationTurn: Union of SystemTurn, UserTurn, AssistantTurn, ToolTurn
    ContentPart: Union of the content part variants
    GenerationRequest: Input to do_generate / do_stream
    TextGenerationParameters: Parameters sent to the inference endpoint
    GenerationResult: Output of do_generate
    StreamEvent: Union of TextDelta and Finish
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FinishReason(str, Enum):
    """Why generation stopped."""

    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content-filter"
    TOOL_CALLS = "tool-calls"
    ERROR = "error"
    OTHER = "other"
    UNKNOWN = "unknown"


# =============================================================================
# Content parts
# =============================================================================


class TextPart(_Model):
    type: Literal["text"] = "text"
    text: str


class ReasoningPart(_Model):
    type: Literal["reasoning"] = "reasoning"
    text: str


class FilePart(_Model):
    type: Literal["file"] = "file"
    data: Any = None
    media_type: str | None = None
    filename: str | None = None


class ToolCallPart(_Model):
    type: Literal["tool-call"] = "tool-call"
    tool_call_id: str
    tool_name: str
    input: Any = None


class ToolResultPart(_Model):
    """Result of a tool call. ``output`` is any JSON-serializable value."""

    type: Literal["tool-result"] = "tool-result"
    tool_call_id: str | None = None
    tool_name: str | None = None
    output: Any = None


class OtherPart(_Model):
    """Any part type this adapter has no dedicated model for."""

    model_config = ConfigDict(extra="allow")

    type: str


ContentPart = Annotated[
    Union[TextPart, ReasoningPart, FilePart, ToolCallPart, ToolResultPart, OtherPart],
    Field(union_mode="left_to_right"),
]


# =============================================================================
# Conversation turns
# =============================================================================


class SystemTurn(_Model):
    role: Literal["system"] = "system"
    content: str


class UserTurn(_Model):
    role: Literal["user"] = "user"
    content: list[ContentPart] = Field(default_factory=list)


class AssistantTurn(_Model):
    role: Literal["assistant"] = "assistant"
    content: list[ContentPart] = Field(default_factory=list)


class ToolTurn(_Model):
    role: Literal["tool"] = "tool"
    content: list[ContentPart] = Field(default_factory=list)


ConversationTurn = Annotated[
    Union[SystemTurn, UserTurn, AssistantTurn, ToolTurn],
    Field(discriminator="role"),
]


# =============================================================================
# Requests and results
# =============================================================================


class GenerationRequest(_Model):
    """A generation call: the conversation plus optional sampling settings.

    Attributes:
        prompt: Ordered conversation turns
        max_output_tokens: Requested completion length (clamped by the encoder)
        temperature: Sampling temperature
        top_p: Nucleus sampling probability mass
    """

    prompt: list[ConversationTurn] = Field(..., description="Ordered conversation turns")
    max_output_tokens: int | None = Field(
        None, ge=0, description="Maximum tokens to generate (0 means unset)"
    )
    temperature: float | None = Field(None, ge=0.0, description="Sampling temperature")
    top_p: float | None = Field(None, gt=0.0, le=1.0, description="Nucleus sampling mass")


class TextGenerationParameters(BaseModel):
    """Parameters passed to the inference endpoint's text generation task."""

    max_new_tokens: int
    temperature: float
    top_p: float
    return_full_text: bool = False
    do_sample: bool = True


class Usage(_Model):
    """Token usage. ``None`` means the endpoint did not report the counter."""

    input_tokens: int | None = None
    output_tokens: int | None = None
    total_tokens: int | None = None


class GenerationResult(_Model):
    """Response from a language model.

    Attributes:
        content: Generated content parts (a single text part for this adapter)
        finish_reason: Why generation stopped
        usage: Token usage counters
        warnings: Call warnings
        model: Model that generated the response
    """

    content: list[TextPart] = Field(..., description="Generated content")
    finish_reason: FinishReason = Field(FinishReason.STOP, description="Why generation stopped")
    usage: Usage = Field(default_factory=Usage, description="Token usage counters")
    warnings: list[str] = Field(default_factory=list, description="Call warnings")
    model: str | None = Field(None, description="Model that generated the response")

    @property
    def text(self) -> str:
        return "".join(part.text for part in self.content)


class TextDelta(_Model):
    type: Literal["text-delta"] = "text-delta"
    text_delta: str


class Finish(_Model):
    type: Literal["finish"] = "finish"
    finish_reason: FinishReason
    usage: Usage


StreamEvent = Annotated[Union[TextDelta, Finish], Field(discriminator="type")]


__all__ = [
    "FinishReason",
    "TextPart",
    "ReasoningPart",
    "FilePart",
    "ToolCallPart",
    "ToolResultPart",
    "OtherPart",
    "ContentPart",
    "SystemTurn",
    "UserTurn",
    "AssistantTurn",
    "ToolTurn",
    "ConversationTurn",
    "GenerationRequest",
    "TextGenerationParameters",
    "Usage",
    "GenerationResult",
    "TextDelta",
    "Finish",
    "StreamEvent",
]
