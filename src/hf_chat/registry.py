"""Provider registry - maps application model aliases to language models.

The orchestration layer asks for models by alias ("chat-model",
"title-model", ...) rather than by Hub identifier. In test mode every alias
resolves to a mock model so no network calls are made.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from .config import LLMConfig
from .factory import create_language_model
from .models import DEFAULT_MODEL_ALIASES
from .providers.base import BaseLanguageModel

_logger = logging.getLogger(__name__)

TEST_MODE_ENV_VAR = "LLM_TEST_MODE"

# Canned answers for the mock models used in test mode
_MOCK_RESPONSES: dict[str, str] = {
    "chat-model": "Hello, world!",
    "chat-model-reasoning": "I have thought about it. Hello, world!",
    "title-model": "This is a test title",
    "artifact-model": "This is a test artifact",
}


class NoSuchModelError(KeyError):
    """Requested model alias is not registered."""

    def __init__(self, alias: str, available: list[str]) -> None:
        self.alias = alias
        self.available = available
        super().__init__(alias)

    def __str__(self) -> str:
        return f"No such language model: {self.alias!r}. Available: {', '.join(self.available)}"


class CustomProvider:
    """Fixed set of language models addressed by alias."""

    def __init__(self, language_models: Mapping[str, BaseLanguageModel]) -> None:
        self._language_models = dict(language_models)

    def language_model(self, alias: str) -> BaseLanguageModel:
        """Get the model registered under an alias.

        Raises:
            NoSuchModelError: If the alias is not registered
        """
        try:
            return self._language_models[alias]
        except KeyError:
            raise NoSuchModelError(alias, self.list_models()) from None

    def list_models(self) -> list[str]:
        """List registered aliases."""
        return sorted(self._language_models)

    def __contains__(self, alias: object) -> bool:
        return alias in self._language_models


def is_test_environment() -> bool:
    """Whether LLM_TEST_MODE is set to a truthy value."""
    return os.environ.get(TEST_MODE_ENV_VAR, "").strip().lower() in ("1", "true", "yes")


def create_default_provider(
    test_mode: bool | None = None,
    aliases: Mapping[str, str] | None = None,
    stream_delay_seconds: float | None = None,
) -> CustomProvider:
    """Build the application's provider.

    Args:
        test_mode: Use mock models; defaults to is_test_environment()
        aliases: Alias -> Hub model identifier (default: DEFAULT_MODEL_ALIASES)
        stream_delay_seconds: Override the simulated stream pacing

    Returns:
        CustomProvider with one model per alias
    """
    if test_mode is None:
        test_mode = is_test_environment()
    aliases = DEFAULT_MODEL_ALIASES if aliases is None else aliases

    extra = {} if stream_delay_seconds is None else {"stream_delay_seconds": stream_delay_seconds}
    models: dict[str, BaseLanguageModel] = {}
    for alias, model_id in aliases.items():
        if test_mode:
            config = LLMConfig(
                provider="mock",
                model=f"mock-{alias}",
                mock_response=_MOCK_RESPONSES.get(alias),
                **extra,
            )
        else:
            config = LLMConfig(provider="huggingface", model=model_id, **extra)
        models[alias] = create_language_model(config)

    _logger.debug(
        "Created provider with %d models (test_mode=%s)", len(models), test_mode
    )
    return CustomProvider(models)


__all__ = [
    "CustomProvider",
    "NoSuchModelError",
    "create_default_provider",
    "is_test_environment",
    "TEST_MODE_ENV_VAR",
]
