"""I/O layer - local persistence of comic documents, images and pointers."""

from .comic_store import ComicStore, Downloader
from .file_comic_store import FileComicStore
from .in_memory_comic_store import InMemoryComicStore

__all__ = ["ComicStore", "Downloader", "FileComicStore", "InMemoryComicStore"]
