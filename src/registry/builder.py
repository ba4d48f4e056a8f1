"""Batch title generation into the memory registry."""

import hashlib
import json
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import structlog

from journal.titler import generate_title
from llm import DEFAULT_MODEL, ClientConfig, LLMProvider, create_llm_provider

from .content_api import ContentAPIClient
from .models import MemoryEntry, Registry, utc_timestamp

logger = structlog.get_logger().bind(source="registry")


def hash_content(content: str) -> str:
    """SHA-256 hex digest of the UTF-8 encoded content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def original_path(slug: str) -> str:
    return f"thoughts/{slug}.md"


def build_registry(
    content_api: ContentAPIClient,
    llm_provider: LLMProvider,
    model: str = DEFAULT_MODEL,
    now: Optional[Callable[[], datetime]] = None,
) -> Registry:
    """Title every thought the content API lists, one at a time, in list order.

    Content API errors propagate; titles fall back to the placeholder.
    """
    thoughts = content_api.list_thoughts()
    logger.info("thoughts_listed", count=len(thoughts))

    registry = Registry()
    for thought in thoughts:
        logger.info("processing_thought", slug=thought.slug)
        detail = content_api.get_thought(thought.slug)
        content_hash = hash_content(detail.content)

        title = generate_title(detail.content, llm_provider)
        logger.info("title_generated", slug=thought.slug, title=title)

        registry.memories[content_hash] = MemoryEntry(
            title=title,
            model=model,
            created=utc_timestamp(now() if now else None),
            original_path=original_path(thought.slug),
        )

    return registry


def write_registry(registry: Registry, path: Path) -> Path:
    """Overwrite ``path`` with the full registry as indented JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(registry.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("registry_saved", path=str(path), memories=len(registry.memories))
    return path


def run_batch(
    client_config: ClientConfig,
    api_url: Optional[str],
    api_key: Optional[str],
    output: Path,
    model: str = DEFAULT_MODEL,
    http_client=None,
    llm_client=None,
) -> Registry:
    """Fetch, title, and persist the whole registry.

    The registry file is written only after every thought was fetched.

    Args:
        client_config: Chat-completion credentials
        api_url: Content API root URL
        api_key: Content API key
        output: Registry file to overwrite
        model: Model used for titles and recorded in each entry
        http_client: Pre-built httpx.Client for testing/DI
        llm_client: Pre-built OpenAI SDK client for testing/DI
    """
    provider = create_llm_provider(client_config, model=model, client=llm_client)
    with ContentAPIClient(api_url, api_key, client=http_client) as content_api:
        registry = build_registry(content_api, provider, model=model)
    write_registry(registry, output)
    return registry
