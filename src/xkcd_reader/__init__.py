"""
xkcd Reader - A desktop browser for xkcd comics with a local cache.

This package provides:
- A write-once disk cache of comic documents and images
- Sequential, random and latest navigation across sessions
- A PySide6 window for reading comics and their alt text
"""

__version__ = "0.1.0"

# Make key components available at package level
from xkcd_reader.core import Comic, ImageFormat, ResolvedComic
from xkcd_reader.io import FileComicStore, InMemoryComicStore

__all__ = [
    "Comic",
    "ImageFormat",
    "ResolvedComic",
    "FileComicStore",
    "InMemoryComicStore",
]
