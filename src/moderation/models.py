"""Moderation result schema."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, StrictBool

Reason = Literal["toxicity", "off_topic", "injection", "approved"]
Sentiment = Literal["positive", "neutral", "negative"]


class ModerationResult(BaseModel):
    """Allow/deny decision for a visitor message.

    Unknown keys in model output are dropped; ``allowed`` must be a real
    JSON boolean.
    """

    model_config = ConfigDict(frozen=True)

    allowed: StrictBool
    reason: Reason
    sentiment: Sentiment


FAIL_CLOSED_RESULT = ModerationResult(allowed=False, reason="off_topic", sentiment="neutral")
