"""Registry and content API data models."""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-01-02T03:04:05.678Z."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MemoryEntry(BaseModel):
    """One titled thought, keyed by content hash in the registry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    model: str
    created: str = Field(default_factory=utc_timestamp)
    original_path: str = Field(alias="originalPath")


class Registry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    registry_version: Literal[1] = Field(default=1, alias="registryVersion")
    memories: dict[str, MemoryEntry] = Field(default_factory=dict)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


# --- Content API ---


class ThoughtSummary(BaseModel):
    slug: str


class ThoughtMeta(BaseModel):
    date: Optional[str] = None
    title: Optional[str] = None
    mood: Optional[str] = None


class ThoughtDetail(BaseModel):
    slug: str
    meta: ThoughtMeta = Field(default_factory=ThoughtMeta)
    content: str
