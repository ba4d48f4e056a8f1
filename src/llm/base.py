"""Base LLM provider abstraction."""

from abc import ABC, abstractmethod


class LLMError(Exception):
    """Base LLM error."""


class LLMRateLimitError(LLMError):
    """Rate limit hit."""


class LLMAuthError(LLMError):
    """Authentication failure."""


class LLMProvider(ABC):
    """Abstract chat-completion provider."""

    provider_name: str = "base"
    model: str

    @abstractmethod
    def generate(
        self,
        messages: list[dict],
        system: str | None = None,
        max_tokens: int = 2000,
        temperature: float | None = None,
        response_format: dict | None = None,
        request_timeout: float | None = None,
    ) -> str:
        """Generate a response from messages.

        Args:
            messages: List of {"role": ..., "content": ...} dicts
            system: Optional system prompt
            max_tokens: Max response tokens
            temperature: Sampling temperature (None = provider default)
            response_format: Optional provider response format, e.g. {"type": "json_object"}
            request_timeout: Per-request deadline in seconds (None = client default)

        Returns:
            Text of the first choice ("" when the provider returned none)
        """
        ...
