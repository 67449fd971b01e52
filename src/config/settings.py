"""Application settings loaded from environment variables via pydantic-settings.

Values are read (highest priority first) from:

  1. Environment variables, e.g. ``CACHE_TTL_SECONDS=60``
  2. A ``.env`` file in the working directory
  3. The defaults declared below

``src.config.loader.load_settings`` layers ``config/config.yaml`` underneath
the environment for deployments that prefer a checked-in file.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.logging import DEFAULT_LOG_LEVEL, LOG_LEVELS

# Library-wide defaults; the fetcher and the service import these too.
DEFAULT_WORLD_STATUS_URL = "https://na.finalfantasyxiv.com/lodestone/worldstatus/"
DEFAULT_CACHE_TTL_SECONDS = 300.0
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (compatible; lodestone-world-status/0.1; "
    "+https://github.com/lodestone-world-status)"
)


class Settings(BaseSettings):
    """World-status library settings.

    Environment variables override defaults.  Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Origin ===
    world_status_url: str = DEFAULT_WORLD_STATUS_URL

    # === Cache ===
    # Must be positive; TtlCache refuses anything else at construction.
    cache_ttl_seconds: float = Field(default=DEFAULT_CACHE_TTL_SECONDS, gt=0)

    # === HTTP ===
    http_timeout_seconds: float = Field(default=DEFAULT_HTTP_TIMEOUT_SECONDS, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    # === App Config ===
    app_env: str = "development"
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level
