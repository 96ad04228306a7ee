"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from portfolio_shell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.content_path: Optional[str] = self._get_env("PORTFOLIO_CONTENT_PATH", "") or None
        self.log_level: str = self._get_log_level("PORTFOLIO_LOG_LEVEL", "INFO")
        self.show_banner: bool = self._get_bool("PORTFOLIO_SHOW_BANNER", True)
        self.max_sessions: int = self._get_positive_int("PORTFOLIO_MAX_SESSIONS", 100)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None or value == "":
            return default
        return value.strip().lower() not in ("0", "false", "no", "off")

    def _get_positive_int(self, key: str, default: int) -> int:
        """Get a positive integer, raise error if the value is malformed."""
        value = os.getenv(key)
        if not value:
            return default
        try:
            number = int(value)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {value!r}")
        if number <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {number}")
        return number

    def _get_log_level(self, key: str, default: str) -> str:
        level = self._get_env(key, default).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Unknown log level in {key}: {level}")
        return level


# Global settings instance
settings = Settings()
