"""Client for the site's content API (thought listing and detail)."""

from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from .models import ThoughtDetail, ThoughtSummary

logger = structlog.get_logger().bind(source="content_api")


class ContentAPIError(Exception):
    """Content API unreachable, misconfigured, or returned an error status."""


class ContentAPIClient:
    """Read-only access to ``/api/v1/content/thoughts``.

    Every failure raises ContentAPIError; batch callers are expected to
    abort rather than continue with partial data.
    """

    def __init__(
        self,
        api_url: Optional[str],
        api_key: Optional[str],
        client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ):
        if not api_url or not api_key:
            raise ContentAPIError("Missing GPT_API_URL or GPT_API_KEY")

        self.api_url = api_url.rstrip("/")
        self.client = client or httpx.Client(timeout=timeout)
        self.headers = {"X-API-Key": api_key, "Content-Type": "application/json"}

    def _get(self, path: str, what: str):
        url = f"{self.api_url}/api/v1/content/{path}"
        try:
            response = self.client.get(url, headers=self.headers)
        except httpx.RequestError as e:
            raise ContentAPIError(f"Failed to fetch {what}: {e}") from e

        if response.is_error:
            raise ContentAPIError(f"Failed to fetch {what}: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise ContentAPIError(f"Invalid JSON for {what}: {e}") from e

    def list_thoughts(self) -> list[ThoughtSummary]:
        data = self._get("thoughts", "thoughts")
        if not isinstance(data, list):
            raise ContentAPIError("Failed to fetch thoughts: expected a list")
        try:
            return [ThoughtSummary.model_validate(item) for item in data]
        except ValidationError as e:
            raise ContentAPIError(f"Malformed thought list: {e}") from e

    def get_thought(self, slug: str) -> ThoughtDetail:
        data = self._get(f"thoughts/{slug}", f"thought {slug}")
        try:
            return ThoughtDetail.model_validate(data)
        except ValidationError as e:
            raise ContentAPIError(f"Malformed thought {slug}: {e}") from e

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
