"""
Configuration Management.

Loads overrides from NSADMIN_* environment variables and settings from
YAML files. No hardcoded values in code. All configuration comes from
these sources.

Environment (NSADMIN_ prefix):
    CONFIG_DIR  - Directory holding the YAML settings files.
                  Defaults to the settings bundled with the package.
    LOG_LEVEL   - Overrides the level from logging.yaml.

Settings (YAML):
    client.yaml   - HTTP timeout, user agent, redirect policy
    logging.yaml  - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from nsadmin.core.config_schema import ClientSchema, LoggingSchema

BUNDLED_SETTINGS_DIR = Path(__file__).resolve().parent.parent / "config" / "settings"


class Settings(BaseSettings):
    """Overrides read from the environment."""

    config_dir: str | None = None
    log_level: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="NSADMIN_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached environment settings."""
    return Settings()


def find_config_dir() -> Path:
    """
    Locate the directory holding the YAML settings files.

    Uses NSADMIN_CONFIG_DIR when set, otherwise the bundled defaults.

    Raises:
        RuntimeError: If NSADMIN_CONFIG_DIR points at a missing directory
    """
    configured = get_settings().config_dir
    if configured is None:
        return BUNDLED_SETTINGS_DIR

    config_dir = Path(configured).expanduser()
    if not config_dir.is_dir():
        raise RuntimeError(f"Configuration directory not found: {config_dir}")
    return config_dir


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from the settings directory."""
    config_path = find_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Missing keys, wrong types, or unknown fields raise a clear error
    immediately instead of causing cryptic KeyErrors later.
    """

    def __init__(self) -> None:
        self._client = _load_validated(ClientSchema, "client.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def client(self) -> ClientSchema:
        """HTTP client settings."""
        return self._client

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_client_defaults() -> tuple[float, str, bool]:
    """
    Get the HTTP client defaults from client.yaml.

    Returns:
        Tuple of (timeout_seconds, user_agent, follow_redirects).
    """
    client = get_app_config().client
    return client.timeout, client.user_agent, client.follow_redirects
