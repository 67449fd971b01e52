"""Configuration module: exports Settings and the YAML-aware loaders."""

from src.config.loader import load_config, load_settings
from src.config.settings import DEFAULT_WORLD_STATUS_URL, Settings

__all__ = ["DEFAULT_WORLD_STATUS_URL", "Settings", "load_config", "load_settings"]
