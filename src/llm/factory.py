"""LLM client resolution.

The credential and base URL are read from the environment once per process.
A missing credential is cached as well: callers treat ``None`` as "feature
disabled" and fall back on their own.
"""

import os
from dataclasses import dataclass

import structlog

from .base import LLMError, LLMProvider
from .providers.openai import DEFAULT_BASE_URL, OpenAIProvider

logger = structlog.get_logger().bind(source="llm")

API_KEY_ENV = "OPENAI_API_KEY"
BASE_URL_ENV = "OPENAI_BASE_URL"
DEFAULT_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class ClientConfig:
    """Resolved credentials for the chat-completion endpoint."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL


_client_config: ClientConfig | None = None
_initialization_attempted = False


def get_client_config() -> ClientConfig | None:
    """Resolve the client config, reading the environment only on first call."""
    global _client_config, _initialization_attempted
    if _initialization_attempted:
        return _client_config

    _initialization_attempted = True
    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        logger.warning("llm_not_configured", env_var=API_KEY_ENV, detail="title generation disabled")
        return None

    _client_config = ClientConfig(
        api_key=api_key,
        base_url=os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL,
    )
    return _client_config


def reset_client_config() -> None:
    """Forget the cached resolution so the next call re-reads the environment."""
    global _client_config, _initialization_attempted
    _client_config = None
    _initialization_attempted = False


def is_configured() -> bool:
    return get_client_config() is not None


def create_llm_provider(
    config: ClientConfig | None = None,
    model: str | None = None,
    client=None,
) -> LLMProvider:
    """Create a provider from an explicit config.

    Args:
        config: Credentials (None only valid together with ``client``)
        model: Model name (None = DEFAULT_MODEL)
        client: Pre-built SDK client for testing/DI

    Returns:
        LLMProvider instance
    """
    if config is None:
        if client is None:
            raise LLMError(f"No LLM credentials. Set {API_KEY_ENV}")
        return OpenAIProvider(model=model or DEFAULT_MODEL, client=client)
    return OpenAIProvider(
        api_key=config.api_key,
        model=model or DEFAULT_MODEL,
        base_url=config.base_url,
        client=client,
    )


def get_llm_provider(model: str | None = None) -> LLMProvider | None:
    """Provider for the process-wide config, or None when unconfigured."""
    config = get_client_config()
    if config is None:
        return None
    return create_llm_provider(config, model=model)
