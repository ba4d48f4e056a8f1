"""Pydantic configuration models for the archivist tools."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from llm import DEFAULT_MODEL
from llm.providers.openai import DEFAULT_BASE_URL

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LLMConfig(BaseModel):
    """Chat-completion endpoint configuration."""

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL: {v}. Must start with http:// or https://")
        return v.rstrip("/")


class ContentAPIConfig(BaseModel):
    """Content API (thought listing) configuration."""

    url: Optional[str] = None
    api_key: Optional[str] = None


class PathsConfig(BaseModel):
    registry_path: Path = Path("mocks/data/memory-registry.json")


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {sorted(VALID_LOG_LEVELS)}")
        return v


class ArchivistConfig(BaseModel):
    """Root configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    content_api: ContentAPIConfig = Field(default_factory=ContentAPIConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "ArchivistConfig":
        return cls.model_validate(data)
