"""
Application configuration following kkb_fastapi pattern.

Settings are read from TOML files in ``app/cfg``.
"""
import logging
import os
from functools import lru_cache
from pathlib import Path

import toml

from app.utils.constants import ConfigFile

CONFIG_DIR = Path(__file__).resolve().parent.parent / "cfg"

logger = logging.getLogger(__name__)

__all__ = ["Config", "ConfigFile", "get_config", "get_config_file_for_environment"]


class Config:
    """Parsed TOML configuration."""

    def __init__(self, config_file: str):
        """
        Load configuration.

        Args:
            config_file: File name inside app/cfg (e.g., "development.toml")
        """
        self.config_file = config_file
        self.path = CONFIG_DIR / config_file
        if not self.path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.path}")
        self.data = toml.load(self.path)

    def section(self, name: str) -> dict:
        """Return a config section, or an empty dict if it is absent."""
        return self.data.get(name, {})

    def __repr__(self):
        return f"<Config: {self.config_file}>"


@lru_cache(maxsize=8)
def get_config(config_file: str) -> Config:
    """
    Get (cached) configuration for a config file.

    Args:
        config_file: Configuration file name (e.g., "production.toml")
    """
    logger.debug(f"Loading configuration from {config_file}")
    return Config(config_file)


def get_config_file_for_environment() -> str:
    """Pick the config file from the ENVIRONMENT env var (default: development)."""
    env = os.getenv("ENVIRONMENT", "development")
    return f"{env}.toml"
