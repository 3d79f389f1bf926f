"""hf-chat - Hugging Face text generation behind a chat model interface.

Exposes Hugging Face text generation endpoints through the language model
contract used by chat orchestration code: a role-tagged conversation goes
in, one completion (or a simulated word-by-word stream) comes out.

Public API (the "studs"):
    create_language_model: Factory function to create model instances
    create_huggingface_model: Build a Hugging Face model from a model id
    create_default_provider: Alias -> model provider used by the application
    LLMConfig: Configuration model for providers
    GenerationRequest / GenerationResult: Call input and output
    BaseLanguageModel: Abstract base class (for custom models)

Example:
    >>> from hf_chat import GenerationRequest, create_huggingface_model
    >>>
    >>> model = create_huggingface_model("google/flan-t5-base")
    >>> request = GenerationRequest(
    ...     prompt=[{"role": "user", "content": [{"type": "text", "text": "Hello!"}]}]
    ... )
    >>> result = await model.do_generate(request)
    >>> print(result.text)
    >>>
    >>> async for event in model.do_stream(request):
    ...     print(event)
"""

from hf_chat.config import LLMConfig
from hf_chat.exceptions import (
    LLMAuthenticationError,
    LLMError,
    LLMInvalidRequestError,
    LLMProviderError,
    LLMRateLimitError,
    LLMTimeoutError,
)
from hf_chat.factory import create_language_model
from hf_chat.models import DEFAULT_MODEL_ALIASES, FREE_MODELS
from hf_chat.prompt import build_parameters, encode_prompt
from hf_chat.providers.base import BaseLanguageModel
from hf_chat.providers.huggingface import HuggingFaceModel, create_huggingface_model
from hf_chat.registry import CustomProvider, NoSuchModelError, create_default_provider
from hf_chat.streaming import decode_response, simulate_stream
from hf_chat.types import (
    AssistantTurn,
    Finish,
    FinishReason,
    GenerationRequest,
    GenerationResult,
    SystemTurn,
    TextDelta,
    TextPart,
    ToolResultPart,
    ToolTurn,
    Usage,
    UserTurn,
)

__version__ = "0.1.0"

__all__ = [
    # Factory
    "create_language_model",
    "create_huggingface_model",
    "HuggingFaceModel",
    "create_default_provider",
    "CustomProvider",
    "NoSuchModelError",
    # Config
    "LLMConfig",
    "FREE_MODELS",
    "DEFAULT_MODEL_ALIASES",
    # Adaptation
    "encode_prompt",
    "build_parameters",
    "decode_response",
    "simulate_stream",
    # Types
    "SystemTurn",
    "UserTurn",
    "AssistantTurn",
    "ToolTurn",
    "TextPart",
    "ToolResultPart",
    "GenerationRequest",
    "GenerationResult",
    "FinishReason",
    "Usage",
    "TextDelta",
    "Finish",
    # Base class (for custom models)
    "BaseLanguageModel",
    # Exceptions
    "LLMError",
    "LLMAuthenticationError",
    "LLMRateLimitError",
    "LLMInvalidRequestError",
    "LLMTimeoutError",
    "LLMProviderError",
    "__version__",
]
