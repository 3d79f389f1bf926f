"""Configuration model for language model providers.

Public API (the "studs"):
    LLMConfig: Configuration model for language model providers
"""

import os
from typing import Any, Literal

from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator

from hf_chat.streaming import DEFAULT_STREAM_DELAY_SECONDS

API_KEY_ENV_VAR = "HUGGINGFACE_API_KEY"
DEFAULT_MOCK_MODEL = "mock-model"

# Data-driven mapping: provider -> {config_field: env_var}
_PROVIDER_ENV_MAP: dict[str, dict[str, str]] = {
    "huggingface": {
        "model": "HUGGINGFACE_MODEL",
        "api_key": API_KEY_ENV_VAR,
        "timeout_seconds": "HUGGINGFACE_TIMEOUT_SECONDS",
        "stream_delay_seconds": "LLM_STREAM_DELAY_SECONDS",
    },
    "mock": {
        "model": "MOCK_MODEL",
        "mock_response": "MOCK_RESPONSE",
        "stream_delay_seconds": "LLM_STREAM_DELAY_SECONDS",
    },
}

# Fields that are required per provider (must be set in env)
_PROVIDER_REQUIRED_FIELDS: dict[str, set[str]] = {
    "huggingface": {"model"},
    "mock": set(),
}


class LLMConfig(BaseModel):
    """Configuration model for language model providers.

    The credential is resolved once here: when ``api_key`` is omitted for the
    huggingface provider, ``HUGGINGFACE_API_KEY`` is read from the
    environment. It may remain unset, in which case requests are anonymous.

    Attributes:
        provider: Provider name
        model: Model identifier on the Hugging Face Hub
        api_key: Hugging Face access token
        timeout_seconds: Request timeout
        stream_delay_seconds: Pause between simulated stream chunks
        mock_response: Canned answer for the mock provider
    """

    provider: Literal["huggingface", "mock"] = Field(..., description="Provider name")
    model: str | None = Field(None, description="Model identifier")
    api_key: SecretStr | None = Field(None, description="Hugging Face access token")
    timeout_seconds: int = Field(120, ge=1, le=600, description="Request timeout in seconds")
    stream_delay_seconds: float = Field(
        DEFAULT_STREAM_DELAY_SECONDS,
        ge=0.0,
        le=5.0,
        description="Pause between simulated stream chunks in seconds",
    )
    mock_response: str | None = Field(None, description="Canned answer for the mock provider")

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str | None) -> str | None:
        """Reject blank model identifiers."""
        if v is not None and not v.strip():
            raise ValueError("model must not be blank")
        return v

    @model_validator(mode="after")
    def validate_provider_config(self) -> "LLMConfig":
        """Validate provider-specific requirements."""
        if self.provider == "huggingface":
            if not self.model:
                raise ValueError("model is required for huggingface provider")
            if self.api_key is None:
                env_key = os.environ.get(API_KEY_ENV_VAR)
                if env_key:
                    self.api_key = SecretStr(env_key)

        elif self.provider == "mock":
            if not self.model:
                self.model = DEFAULT_MOCK_MODEL

        return self

    @classmethod
    def from_env(cls) -> "LLMConfig":
        """Create LLMConfig from environment variables.

        Environment variables:
            LLM_PROVIDER: Provider name (default: huggingface)
            HUGGINGFACE_MODEL: Model identifier
            HUGGINGFACE_API_KEY: Hugging Face access token (optional)
            HUGGINGFACE_TIMEOUT_SECONDS: Request timeout (optional)
            LLM_STREAM_DELAY_SECONDS: Simulated stream pacing (optional)
            MOCK_MODEL: Mock model name (optional)
            MOCK_RESPONSE: Mock provider answer (optional)

        Returns:
            LLMConfig instance

        Raises:
            ValueError: If provider is unknown or required env vars are missing
        """
        provider = os.environ.get("LLM_PROVIDER", "huggingface")

        if provider not in _PROVIDER_ENV_MAP:
            raise ValueError(f"Unknown provider: {provider}")

        env_map = _PROVIDER_ENV_MAP[provider]
        required = _PROVIDER_REQUIRED_FIELDS.get(provider, set())

        kwargs: dict[str, Any] = {"provider": provider}
        for field, env_var in env_map.items():
            value = os.environ.get(env_var)
            if value is None and field in required:
                raise ValueError(
                    f"{env_var} environment variable is required when LLM_PROVIDER={provider}"
                )
            if value is not None:
                kwargs[field] = value

        return cls(**kwargs)


__all__ = ["LLMConfig"]
