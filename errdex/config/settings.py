"""Configuration utilities for errdex."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from dotenv import find_dotenv, load_dotenv

from errdex.exceptions import ConfigurationError

from .constants import ENV_VAR_DEFINITIONS, ERRDEX_CONFIG_DIR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Backend settings, built once at startup and handed to the repository."""

    meilisearch_url: str
    meilisearch_key: str
    index_name: str
    task_timeout_ms: int

    @property
    def masked_key(self) -> str:
        return mask_value(self.meilisearch_key)


def mask_value(value: str) -> str:
    """Hide all but the first few characters of a secret."""
    return value[:4] + "..." if len(value) > 4 else "***"


def load_env_files(config_dir: Optional[Path] = None) -> None:
    """Load .env files: user config directory first, then the working directory.

    Values already present in the environment win over both files.
    """
    user_env = (config_dir or ERRDEX_CONFIG_DIR) / ".env"
    if user_env.exists():
        load_dotenv(user_env)
    load_dotenv(find_dotenv(usecwd=True))


def get_env_var(name: str) -> Optional[str]:
    """Get an environment variable, falling back to its documented default."""
    value = os.environ.get(name)
    if not value and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")
    return value


def load_settings() -> Settings:
    """Build Settings from the environment.

    Raises:
        ConfigurationError: If ERRDEX_TASK_TIMEOUT_MS is not a positive integer.
    """
    raw_timeout = get_env_var("ERRDEX_TASK_TIMEOUT_MS")
    try:
        timeout = int(raw_timeout)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            "Task timeout must be an integer", setting="ERRDEX_TASK_TIMEOUT_MS", value=raw_timeout
        ) from e
    if timeout <= 0:
        raise ConfigurationError(
            "Task timeout must be positive", setting="ERRDEX_TASK_TIMEOUT_MS", value=timeout
        )

    settings = Settings(
        meilisearch_url=get_env_var("MEILISEARCH_URL"),
        meilisearch_key=get_env_var("MEILISEARCH_KEY"),
        index_name=get_env_var("MEILISEARCH_INDEX"),
        task_timeout_ms=timeout,
    )
    logger.debug(
        "Settings loaded - URL: %s, Key: %s, Index: %s",
        settings.meilisearch_url,
        settings.masked_key,
        settings.index_name,
    )
    return settings


def get_env_info() -> Dict[str, Dict]:
    """Get information about all errdex environment variables.

    Returns:
        Dictionary mapping env var names to description, value (masked for
        sensitive vars), whether it is set, and its default.
    """
    info = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = os.environ.get(name)

        display_value = value
        if value and definition.get("sensitive"):
            display_value = mask_value(value)

        info[name] = {
            "description": definition.get("description", ""),
            "value": display_value,
            "is_set": value is not None,
            "default": definition.get("default"),
            "sensitive": definition.get("sensitive", False),
        }
    return info
