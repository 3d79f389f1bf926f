"""Factory function for creating language models.

Public API (the "studs"):
    create_language_model: Factory function to create provider instances
"""

from hf_chat.config import LLMConfig
from hf_chat.providers.base import BaseLanguageModel


def create_language_model(config: LLMConfig) -> BaseLanguageModel:
    """Create a language model based on configuration.

    Args:
        config: LLMConfig specifying provider and settings

    Returns:
        BaseLanguageModel: Configured model instance

    Raises:
        ValueError: If provider is unknown

    Example:
        >>> config = LLMConfig(provider="huggingface", model="google/flan-t5-base")
        >>> model = create_language_model(config)
    """
    if config.provider == "huggingface":
        from hf_chat.providers.huggingface import HuggingFaceModel

        return HuggingFaceModel(config)
    elif config.provider == "mock":
        from hf_chat.providers.mock import MockLanguageModel

        return MockLanguageModel(config)
    else:
        raise ValueError(f"Unknown provider: {config.provider}")


__all__ = ["create_language_model"]
