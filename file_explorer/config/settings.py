"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from file_explorer.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: int = self._get_log_level("FILE_EXPLORER_LOG_LEVEL", "WARNING")
        self.color: bool = not self._get_env("NO_COLOR", "")

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level name from the environment, raise error if unknown."""
        name = self._get_env(key, default).strip().upper()
        if name not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid value for {key}: {name} (expected one of {', '.join(_LOG_LEVELS)})"
            )
        return getattr(logging, name)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

