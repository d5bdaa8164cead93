"""In-memory comic store for testing and session-level caching."""

from pathlib import Path
from typing import Optional

from xkcd_reader.core import NotFoundError, image_extension_for_url
from xkcd_reader.io.comic_store import ComicStore, Downloader


class InMemoryComicStore(ComicStore):
    """
    Simple in-memory store implementation.

    Used for testing and session-level caching. No persistence: image paths
    are synthetic paths under ``root`` and nothing is written to disk.
    """

    def __init__(self, root: Path = Path("memory")):
        self.root = Path(root)
        self.documents: dict[int, bytes] = {}
        # Structure: {number: (path, image_bytes)}
        self.images: dict[int, tuple[Path, bytes]] = {}
        self.latest_pointer: Optional[int] = None
        self.last_pointer: Optional[int] = None

    def has_json(self, number: int) -> bool:
        return number in self.documents

    def read_json(self, number: int) -> bytes:
        if number not in self.documents:
            raise NotFoundError(f"No cached document for comic {number}")
        return self.documents[number]

    def put_json_if_absent(self, number: int, raw: bytes) -> None:
        self.documents.setdefault(number, bytes(raw))

    def has_image(self, number: int) -> bool:
        return number in self.images

    def image_path(self, number: int) -> Path:
        if number not in self.images:
            raise NotFoundError(f"No cached image for comic {number}")
        return self.images[number][0]

    def put_image_if_absent(
        self, number: int, source_url: str, download: Downloader
    ) -> Path:
        if number not in self.images:
            path = self.root / f"{number}.{image_extension_for_url(source_url)}"
            self.images[number] = (path, download(source_url))
        return self.images[number][0]

    def read_latest_pointer(self) -> int:
        if self.latest_pointer is None:
            raise NotFoundError("Latest pointer not written yet")
        return self.latest_pointer

    def write_latest_pointer(self, number: int) -> None:
        self.latest_pointer = number

    def read_last_pointer(self) -> int:
        if self.last_pointer is None:
            raise NotFoundError("Last pointer not written yet")
        return self.last_pointer

    def write_last_pointer(self, number: int) -> None:
        self.last_pointer = number

    def cached_numbers(self) -> list[int]:
        return sorted(self.documents)
