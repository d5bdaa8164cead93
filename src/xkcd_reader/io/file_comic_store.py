"""File-based comic store keeping every artifact in a single cache directory."""

import logging
import os
from pathlib import Path

from xkcd_reader.core import NotFoundError, image_extension_for_url
from xkcd_reader.io.comic_store import ComicStore, Downloader

logger = logging.getLogger(__name__)


class FileComicStore(ComicStore):
    """
    Disk-backed cache storing comics under one directory.

    Layout:
        {number}.json   raw fetched document
        {number}.{ext}  downloaded image, ext taken from the source URL
        latest          decimal latest-known pointer
        last            decimal last-viewed pointer

    Every file is written to a hidden temporary sibling and renamed into
    place, so an interrupted write never leaves a partial artifact behind.
    No locking is performed: one process owns the directory.
    """

    LATEST_FILENAME = "latest"
    LAST_FILENAME = "last"
    JSON_SUFFIX = ".json"

    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = Path(cache_dir).expanduser()

    def has_json(self, number: int) -> bool:
        return self._json_path(number).exists()

    def read_json(self, number: int) -> bytes:
        path = self._json_path(number)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError(f"No cached document for comic {number}") from e

    def put_json_if_absent(self, number: int, raw: bytes) -> None:
        path = self._json_path(number)
        if path.exists():
            logger.debug("Document for comic %d already cached, keeping it", number)
            return
        self._write_atomic(path, raw)
        logger.debug("Cached document for comic %d at %s", number, path)

    def has_image(self, number: int) -> bool:
        return self._find_image(number) is not None

    def image_path(self, number: int) -> Path:
        path = self._find_image(number)
        if path is None:
            raise NotFoundError(f"No cached image for comic {number}")
        return path

    def put_image_if_absent(
        self, number: int, source_url: str, download: Downloader
    ) -> Path:
        existing = self._find_image(number)
        if existing is not None:
            return existing

        path = self.cache_dir / f"{number}.{image_extension_for_url(source_url)}"
        body = download(source_url)
        self._write_atomic(path, body)
        logger.debug("Cached image for comic %d at %s", number, path)
        return path

    def read_latest_pointer(self) -> int:
        return self._read_pointer(self.LATEST_FILENAME)

    def write_latest_pointer(self, number: int) -> None:
        self._write_pointer(self.LATEST_FILENAME, number)

    def read_last_pointer(self) -> int:
        return self._read_pointer(self.LAST_FILENAME)

    def write_last_pointer(self, number: int) -> None:
        self._write_pointer(self.LAST_FILENAME, number)

    def cached_numbers(self) -> list[int]:
        if not self.cache_dir.exists():
            return []
        numbers = []
        for path in self.cache_dir.glob(f"*{self.JSON_SUFFIX}"):
            if path.stem.isdigit():
                numbers.append(int(path.stem))
        return sorted(numbers)

    def _json_path(self, number: int) -> Path:
        return self.cache_dir / f"{number}{self.JSON_SUFFIX}"

    def _find_image(self, number: int) -> Path | None:
        if not self.cache_dir.exists():
            return None
        for path in sorted(self.cache_dir.glob(f"{number}.*")):
            if path.suffix != self.JSON_SUFFIX and path.is_file():
                return path
        return None

    def _read_pointer(self, filename: str) -> int:
        path = self.cache_dir / filename
        try:
            text = path.read_text(encoding="utf-8").strip()
        except FileNotFoundError as e:
            raise NotFoundError(f"Pointer file not written yet: {path}") from e
        try:
            return int(text)
        except ValueError as e:
            logger.warning("Ignoring unreadable pointer file %s: %r", path, text)
            raise NotFoundError(f"Pointer file is not a number: {path}") from e

    def _write_pointer(self, filename: str, number: int) -> None:
        self._write_atomic(self.cache_dir / filename, str(number).encode("utf-8"))
        logger.debug("Pointer %s set to %d", filename, number)

    def _write_atomic(self, path: Path, data: bytes) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            tmp_path.write_bytes(data)
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
