"""Settings Manager - Handles cache location, endpoint and logging configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Manages runtime configuration.

    Values are read from the environment after loading a .env file from the
    project root, so either source can supply them.
    """

    DEFAULT_CACHE_DIR = Path.home() / ".xkcd_reader" / "cache"
    DEFAULT_ENDPOINT = "https://xkcd.com"
    DEFAULT_TIMEOUT = 20.0
    DEFAULT_LOG_LEVEL = "WARNING"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_cache_dir(self) -> Path:
        """Directory holding cached documents, images and pointers."""
        value = os.getenv("XKCD_CACHE_DIR")
        if value and value.strip():
            return Path(value.strip()).expanduser()
        return self.DEFAULT_CACHE_DIR

    def get_endpoint(self) -> str:
        """Base URL of the JSON endpoint, without a trailing slash."""
        value = os.getenv("XKCD_ENDPOINT")
        endpoint = value.strip() if value and value.strip() else self.DEFAULT_ENDPOINT
        return endpoint.rstrip("/")

    def get_timeout(self) -> float:
        """Per-request network timeout in seconds."""
        value = os.getenv("XKCD_TIMEOUT")
        if not value or not value.strip():
            return self.DEFAULT_TIMEOUT
        try:
            timeout = float(value)
        except ValueError:
            logger.warning("Invalid XKCD_TIMEOUT %r, using %s", value, self.DEFAULT_TIMEOUT)
            return self.DEFAULT_TIMEOUT
        if timeout <= 0:
            logger.warning("Non-positive XKCD_TIMEOUT %r, using %s", value, self.DEFAULT_TIMEOUT)
            return self.DEFAULT_TIMEOUT
        return timeout

    def get_log_level(self) -> str:
        """Logging level name; unknown names fall back to the default."""
        return self.normalize_log_level(os.getenv("XKCD_LOG_LEVEL"))

    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> str:
        if not value or not value.strip():
            return cls.DEFAULT_LOG_LEVEL
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            logger.warning("Invalid log level %r, using %s", value, cls.DEFAULT_LOG_LEVEL)
            return cls.DEFAULT_LOG_LEVEL
        return level

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
