from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from layerconf.common import AppInfo, LoggingConfig
from layerconf.constants import DEFAULT_CACHE_TIMEOUT_SECONDS, ENV_PREFIX


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    logging: LoggingConfig = LoggingConfig()
    cache_timeout: float = Field(default=DEFAULT_CACHE_TIMEOUT_SECONDS, ge=0.0)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        nested_model_default_partial_update=True,
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
]
