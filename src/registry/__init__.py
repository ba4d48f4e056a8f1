"""Content-addressed registry of generated memory titles."""

from .builder import build_registry, hash_content, run_batch, write_registry
from .content_api import ContentAPIClient, ContentAPIError
from .models import MemoryEntry, Registry, ThoughtDetail, ThoughtSummary

__all__ = [
    "ContentAPIClient",
    "ContentAPIError",
    "MemoryEntry",
    "Registry",
    "ThoughtDetail",
    "ThoughtSummary",
    "build_registry",
    "hash_content",
    "run_batch",
    "write_registry",
]
