"""Services layer - network access and configuration."""

from xkcd_reader.services.comic_client import ComicClient
from xkcd_reader.services.settings_manager import SettingsManager

__all__ = ["ComicClient", "SettingsManager"]
