"""YAML configuration loader with environment variable overrides.

Configuration is layered (later layers win):

  1. config/config.yaml - static defaults checked into the repo
  2. .env file          - local developer overrides (not committed)
  3. Environment vars   - set at deploy time

The YAML file is grouped by concern::

    status:
      url: https://na.finalfantasyxiv.com/lodestone/worldstatus/
      cache_ttl_seconds: 300
    http:
      timeout_seconds: 10
      user_agent: "..."
    logging:
      level: INFO

Only the keys listed in ``_YAML_FIELDS`` are read; anything else in the
file is ignored.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from src.config.settings import Settings
from src.utils.errors import ConfigurationError

# (section, key) in the YAML file -> Settings field name
_YAML_FIELDS: dict[tuple[str, str], str] = {
    ("status", "url"): "world_status_url",
    ("status", "cache_ttl_seconds"): "cache_ttl_seconds",
    ("http", "timeout_seconds"): "http_timeout_seconds",
    ("http", "user_agent"): "user_agent",
    ("app", "env"): "app_env",
    ("logging", "level"): "log_level",
}


def load_config(path: str = "config/config.yaml") -> dict[str, Any]:
    """Read the YAML config at *path*, returning ``{}`` when the file is absent."""
    config_path = Path(path)
    if not config_path.exists():
        return {}
    with open(config_path, encoding="utf-8") as f:
        try:
            loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Could not parse {config_path}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ConfigurationError(f"{config_path} must contain a mapping at the top level")
    return loaded


def load_settings(path: str = "config/config.yaml") -> Settings:
    """Build :class:`Settings` from YAML defaults with environment overrides.

    Fields explicitly provided by the environment (or ``.env``) win over the
    YAML file; YAML wins over the declared defaults.

    Raises:
        ConfigurationError: If the YAML is malformed or a value is invalid
            (e.g. a non-positive cache TTL).
    """
    yaml_config = load_config(path)
    yaml_values: dict[str, Any] = {}
    for (section, key), field_name in _YAML_FIELDS.items():
        block = yaml_config.get(section)
        if isinstance(block, dict) and block.get(key) is not None:
            yaml_values[field_name] = block[key]

    try:
        env_settings = Settings()
        env_overrides = env_settings.model_dump(include=env_settings.model_fields_set)
        return Settings(**{**yaml_values, **env_overrides})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings: {exc}") from exc
