"""CLI command modules."""

from .moderate import moderate
from .registry import registry
from .title import title

__all__ = ["moderate", "registry", "title"]
