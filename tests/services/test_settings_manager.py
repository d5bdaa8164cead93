"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from xkcd_reader.services import SettingsManager

ENV_KEYS = ("XKCD_CACHE_DIR", "XKCD_ENDPOINT", "XKCD_TIMEOUT", "XKCD_LOG_LEVEL")


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Clean up XKCD_* variables from environment before and after test."""
    old_values = {key: os.environ.pop(key, None) for key in ENV_KEYS}
    yield
    for key, value in old_values.items():
        if value is not None:
            os.environ[key] = value
        else:
            os.environ.pop(key, None)


class TestSettingsManagerDefaults:
    """Tests for values used when nothing is configured."""

    def test_missing_env_file_uses_defaults(self, temp_env_dir, clean_env):
        """SettingsManager should handle missing .env file gracefully."""
        settings = SettingsManager(project_root=temp_env_dir)

        assert settings.get_cache_dir() == SettingsManager.DEFAULT_CACHE_DIR
        assert settings.get_endpoint() == "https://xkcd.com"
        assert settings.get_timeout() == 20.0
        assert settings.get_log_level() == "WARNING"

    def test_empty_values_use_defaults(self, temp_env_dir, clean_env):
        (temp_env_dir / ".env").write_text("XKCD_CACHE_DIR=\nXKCD_ENDPOINT=  \n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_cache_dir() == SettingsManager.DEFAULT_CACHE_DIR
        assert settings.get_endpoint() == "https://xkcd.com"


class TestSettingsManagerFromEnvFile:
    """Tests for values read from the .env file."""

    def test_reads_values_from_env_file(self, temp_env_dir, clean_env):
        cache_dir = temp_env_dir / "comics"
        (temp_env_dir / ".env").write_text(
            f"XKCD_CACHE_DIR={cache_dir}\n"
            "XKCD_ENDPOINT=https://mirror.example.org/\n"
            "XKCD_TIMEOUT=5\n"
            "XKCD_LOG_LEVEL=debug\n"
        )

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_cache_dir() == cache_dir
        assert settings.get_endpoint() == "https://mirror.example.org"
        assert settings.get_timeout() == 5.0
        assert settings.get_log_level() == "DEBUG"

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_timeout_falls_back(self, temp_env_dir, clean_env, value):
        (temp_env_dir / ".env").write_text(f"XKCD_TIMEOUT={value}\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_timeout() == SettingsManager.DEFAULT_TIMEOUT

    def test_reload_env_updates_values(self, temp_env_dir, clean_env):
        """reload_env should pick up changes to .env file."""
        env_file = temp_env_dir / ".env"
        env_file.write_text("XKCD_ENDPOINT=https://old.example.org\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_endpoint() == "https://old.example.org"

        env_file.write_text("XKCD_ENDPOINT=https://new.example.org\n")
        settings.reload_env()
        assert settings.get_endpoint() == "https://new.example.org"


class TestSettingsManagerLogLevel:
    """Tests for log level validation."""

    @pytest.mark.parametrize("value", ["verbose", "LOUD", "12"])
    def test_unknown_log_level_falls_back(self, temp_env_dir, clean_env, value):
        (temp_env_dir / ".env").write_text(f"XKCD_LOG_LEVEL={value}\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_log_level() == SettingsManager.DEFAULT_LOG_LEVEL

    def test_normalize_log_level(self):
        assert SettingsManager.normalize_log_level(" info ") == "INFO"
        assert SettingsManager.normalize_log_level(None) == "WARNING"
        assert SettingsManager.normalize_log_level("nope") == "WARNING"
