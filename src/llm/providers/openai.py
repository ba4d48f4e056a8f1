"""OpenAI-compatible chat-completion provider."""

from ..base import LLMAuthError, LLMError, LLMProvider, LLMRateLimitError

DEFAULT_BASE_URL = "https://api.openai.com"

# Lazy exception references — set when package available
_openai_exceptions = None


def _get_openai_exceptions():
    global _openai_exceptions
    if _openai_exceptions is None:
        try:
            from openai import APIError, AuthenticationError, RateLimitError

            _openai_exceptions = (AuthenticationError, RateLimitError, APIError)
        except ImportError:
            _openai_exceptions = ()
    return _openai_exceptions


def _handle_openai_error(e: Exception):
    exc = _get_openai_exceptions()
    if exc and len(exc) == 3:
        AuthErr, RateErr, ApiErr = exc
        if isinstance(e, AuthErr):
            raise LLMAuthError(f"OpenAI auth failed: {e}") from e
        if isinstance(e, RateErr):
            raise LLMRateLimitError(f"OpenAI rate limit: {e}") from e
        if isinstance(e, ApiErr):
            raise LLMError(f"OpenAI API error: {e}") from e
    raise LLMError(f"OpenAI error: {e}") from e


def api_base(base_url: str) -> str:
    """SDK base URL for a host root, e.g. https://api.openai.com -> .../v1."""
    return f"{base_url.rstrip('/')}/v1"


class OpenAIProvider(LLMProvider):
    """Chat completions against OpenAI or any compatible endpoint.

    SDK retries are disabled: every generate() is exactly one request.
    """

    provider_name = "openai"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        client=None,
    ):
        self.model = model or "gpt-4o-mini"
        self.base_url = base_url or DEFAULT_BASE_URL

        if client:
            self.client = client
            return

        try:
            from openai import OpenAI
        except ImportError:
            raise LLMError("openai package not installed. Run: pip install openai")

        self.client = OpenAI(api_key=api_key, base_url=api_base(self.base_url), max_retries=0)

    def generate(
        self,
        messages: list[dict],
        system: str | None = None,
        max_tokens: int = 2000,
        temperature: float | None = None,
        response_format: dict | None = None,
        request_timeout: float | None = None,
    ) -> str:
        full_messages = []
        if system:
            full_messages.append({"role": "system", "content": system})
        full_messages.extend(messages)

        params = {
            "model": self.model,
            "max_tokens": max_tokens,
            "messages": full_messages,
        }
        if temperature is not None:
            params["temperature"] = temperature
        if response_format is not None:
            params["response_format"] = response_format
        if request_timeout is not None:
            params["timeout"] = request_timeout

        try:
            response = self.client.chat.completions.create(**params)
        except Exception as e:
            _handle_openai_error(e)

        choices = response.choices or []
        if not choices or choices[0].message is None:
            return ""
        return choices[0].message.content or ""
