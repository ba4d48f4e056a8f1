"""Configuration loading from the process environment."""

import os
from pathlib import Path
from typing import Mapping, Optional

import structlog
from dotenv import load_dotenv

from .config_models import ArchivistConfig

logger = structlog.get_logger()

DEFAULT_ENV_FILE = Path(".env.local")

# config section -> field -> environment variable
ENV_VARS = {
    "llm": {"api_key": "OPENAI_API_KEY", "base_url": "OPENAI_BASE_URL"},
    "content_api": {"url": "GPT_API_URL", "api_key": "GPT_API_KEY"},
    "paths": {"registry_path": "MEMORY_REGISTRY_PATH"},
    "logging": {"level": "LOG_LEVEL", "json_mode": "LOG_JSON"},
}


def load_env_file(path: Optional[Path] = None) -> bool:
    """Seed os.environ from a key=value file. Values in the file win.

    Returns False when the file does not exist.
    """
    path = Path(path or DEFAULT_ENV_FILE)
    if not path.is_file():
        logger.debug("env_file_missing", path=str(path))
        return False
    load_dotenv(path, override=True)
    logger.debug("env_file_loaded", path=str(path))
    return True


def load_config_model(env: Optional[Mapping[str, str]] = None) -> ArchivistConfig:
    """Build the typed config from environment variables.

    Empty values count as unset so the model defaults apply.
    """
    env = os.environ if env is None else env
    data: dict = {}
    for section, fields in ENV_VARS.items():
        values = {field: env[var] for field, var in fields.items() if env.get(var)}
        if values:
            data[section] = values

    try:
        return ArchivistConfig.from_dict(data)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}")

