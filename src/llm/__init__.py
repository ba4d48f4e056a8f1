"""Chat-completion provider layer and client resolution."""

from .base import LLMAuthError, LLMError, LLMProvider, LLMRateLimitError
from .factory import (
    DEFAULT_MODEL,
    ClientConfig,
    create_llm_provider,
    get_client_config,
    get_llm_provider,
    is_configured,
    reset_client_config,
)

__all__ = [
    "LLMProvider",
    "LLMError",
    "LLMRateLimitError",
    "LLMAuthError",
    "ClientConfig",
    "DEFAULT_MODEL",
    "create_llm_provider",
    "get_client_config",
    "get_llm_provider",
    "is_configured",
    "reset_client_config",
]
