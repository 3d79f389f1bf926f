"""Abstract base class for language models.

Public API (the "studs"):
    BaseLanguageModel: Abstract base class for language models
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Mapping
from types import MappingProxyType
from typing import ClassVar

from hf_chat.types import GenerationRequest, GenerationResult, StreamEvent


class BaseLanguageModel(ABC):
    """Abstract base class for language models.

    This is the contract the orchestration layer calls. Instances hold only
    read-only configuration, so one instance can serve concurrent calls.
    """

    specification_version: ClassVar[str] = "v2"
    provider: ClassVar[str] = "base"
    supported_urls: ClassVar[Mapping[str, list[str]]] = MappingProxyType({})

    model_id: str

    @abstractmethod
    async def do_generate(self, request: GenerationRequest) -> GenerationResult:
        """Generate a complete response.

        Args:
            request: Conversation and sampling settings

        Returns:
            GenerationResult with generated content
        """
        ...

    @abstractmethod
    def do_stream(self, request: GenerationRequest) -> AsyncIterator[StreamEvent]:
        """Generate a response as a stream of events.

        Args:
            request: Conversation and sampling settings

        Returns:
            Async iterator of TextDelta events ending with one Finish
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self.provider!r}, model_id={self.model_id!r})"


__all__ = ["BaseLanguageModel"]
