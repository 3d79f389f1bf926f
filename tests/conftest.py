"""Shared test fixtures."""

import pytest

_ENV_VARS = (
    "HUGGINGFACE_API_KEY",
    "HUGGINGFACE_MODEL",
    "HUGGINGFACE_TIMEOUT_SECONDS",
    "LLM_PROVIDER",
    "LLM_STREAM_DELAY_SECONDS",
    "LLM_TEST_MODE",
    "MOCK_MODEL",
    "MOCK_RESPONSE",
)


@pytest.fixture(autouse=True)
def _clean_llm_env(monkeypatch):
    """Keep provider settings from the developer's shell out of tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
