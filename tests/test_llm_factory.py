"""Tests for LLM client resolution."""

from unittest.mock import MagicMock

import pytest

from llm import (
    ClientConfig,
    LLMError,
    create_llm_provider,
    get_client_config,
    get_llm_provider,
    is_configured,
    reset_client_config,
)
from llm.providers.openai import OpenAIProvider


class TestGetClientConfig:
    def test_unconfigured_returns_none(self):
        assert get_client_config() is None
        assert is_configured() is False

    def test_default_base_url(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

        config = get_client_config()

        assert config == ClientConfig(api_key="sk-test", base_url="https://api.openai.com")

    def test_base_url_override(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:8080")

        assert get_client_config().base_url == "http://localhost:8080"

    def test_empty_base_url_uses_default(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("OPENAI_BASE_URL", "")

        assert get_client_config().base_url == "https://api.openai.com"

    def test_success_is_cached(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-first")
        first = get_client_config()

        monkeypatch.setenv("OPENAI_API_KEY", "sk-second")

        assert get_client_config() is first
        assert get_client_config().api_key == "sk-first"

    def test_absence_is_cached(self, monkeypatch):
        assert get_client_config() is None

        monkeypatch.setenv("OPENAI_API_KEY", "sk-late")

        assert get_client_config() is None

    def test_reset_rereads_environment(self, monkeypatch):
        assert get_client_config() is None
        monkeypatch.setenv("OPENAI_API_KEY", "sk-late")

        reset_client_config()

        assert get_client_config().api_key == "sk-late"


class TestProviders:
    def test_get_llm_provider_unconfigured(self):
        assert get_llm_provider() is None

    def test_get_llm_provider_configured(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

        provider = get_llm_provider()

        assert isinstance(provider, OpenAIProvider)
        assert provider.model == "gpt-4o-mini"

    def test_create_with_client(self):
        client = MagicMock()
        provider = create_llm_provider(ClientConfig(api_key="sk-test"), model="gpt-4o", client=client)

        assert provider.client is client
        assert provider.model == "gpt-4o"
        assert provider.base_url == "https://api.openai.com"

    def test_create_without_config_or_client(self):
        with pytest.raises(LLMError):
            create_llm_provider()
