"""Visitor message moderation."""

from .models import FAIL_CLOSED_RESULT, ModerationResult
from .moderator import moderate_content, moderate_content_sync

__all__ = ["ModerationResult", "FAIL_CLOSED_RESULT", "moderate_content", "moderate_content_sync"]
