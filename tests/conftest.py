"""Shared test fixtures for the archivist tools."""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "GPT_API_URL",
    "GPT_API_KEY",
    "MEMORY_REGISTRY_PATH",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def clean_llm_env(monkeypatch):
    """Start every test unconfigured with a fresh client resolution."""
    from llm import reset_client_config

    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_client_config()
    yield
    # env files loaded by the CLI write straight to os.environ
    for var in ENV_VARS:
        os.environ.pop(var, None)
    reset_client_config()


def make_completion(content):
    """Fake OpenAI SDK chat completion with a single choice."""
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


@pytest.fixture
def mock_openai_client():
    """Mock OpenAI SDK client answering "borrowed silence"."""
    client = MagicMock()
    client.chat.completions.create.return_value = make_completion("borrowed silence")
    return client


@pytest.fixture
def llm_provider(mock_openai_client):
    from llm.providers.openai import OpenAIProvider

    return OpenAIProvider(model="gpt-4o-mini", client=mock_openai_client)


@pytest.fixture
def stub_provider():
    """Provider double returning canned text from generate()."""
    provider = MagicMock()
    provider.model = "gpt-4o-mini"
    provider.generate.return_value = "borrowed silence"
    return provider


@pytest.fixture
def sample_thoughts():
    return {
        "first-light": {
            "slug": "first-light",
            "meta": {"date": "2024-03-01", "title": "First Light", "mood": "hopeful"},
            "content": "Woke before dawn and watched the city slowly assemble itself.",
        },
        "static": {
            "slug": "static",
            "meta": {"date": "2024-03-05", "title": "Static", "mood": None},
            "content": "Debugged a race condition for six hours. The bug was a missing await.",
        },
    }
