"""Comic Store abstraction - plugin interface for cached documents, images and pointers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable

# Network collaborator used to download an image body by URL.
Downloader = Callable[[str], bytes]


class ComicStore(ABC):
    """
    Abstract interface for the local comic cache.

    Implementations (FileComicStore, InMemoryComicStore) handle storage details.
    Entries are write-once per comic number: nothing in this interface
    overwrites or deletes a cached document or image. The two pointers
    ("latest" and "last") are plain scalars overwritten on every write.
    """

    @abstractmethod
    def has_json(self, number: int) -> bool:
        """Return True if a document for ``number`` is cached."""
        pass

    @abstractmethod
    def read_json(self, number: int) -> bytes:
        """
        Return the cached document bytes exactly as they were fetched.

        Raises:
            NotFoundError: If no document for ``number`` is cached.
        """
        pass

    @abstractmethod
    def put_json_if_absent(self, number: int, raw: bytes) -> None:
        """
        Persist ``raw`` as the document for ``number`` unless one exists.

        A second call for the same number is a no-op, whatever its content.
        """
        pass

    @abstractmethod
    def has_image(self, number: int) -> bool:
        """Return True if an image for ``number`` is cached."""
        pass

    @abstractmethod
    def image_path(self, number: int) -> Path:
        """
        Return the local path of the cached image for ``number``.

        Raises:
            NotFoundError: If no image for ``number`` is cached.
        """
        pass

    @abstractmethod
    def put_image_if_absent(
        self, number: int, source_url: str, download: Downloader
    ) -> Path:
        """
        Ensure the image for ``number`` is cached and return its local path.

        Args:
            number: Comic number the image belongs to.
            source_url: Remote image URL; its last three characters become
                the file extension.
            download: Called with ``source_url`` only when the image is not
                cached yet. Exceptions it raises propagate and nothing is
                written.

        Returns:
            Path of the cached image, whether it was just written or not.
        """
        pass

    @abstractmethod
    def read_latest_pointer(self) -> int:
        """
        Return the highest comic number ever cached.

        Raises:
            NotFoundError: If the pointer was never written.
        """
        pass

    @abstractmethod
    def write_latest_pointer(self, number: int) -> None:
        """Overwrite the latest-known pointer."""
        pass

    @abstractmethod
    def read_last_pointer(self) -> int:
        """
        Return the number of the most recently viewed comic.

        Raises:
            NotFoundError: If the pointer was never written.
        """
        pass

    @abstractmethod
    def write_last_pointer(self, number: int) -> None:
        """Overwrite the last-viewed pointer."""
        pass

    @abstractmethod
    def cached_numbers(self) -> list[int]:
        """
        List every comic number with a cached document, ascending.

        Useful for diagnostics and testing.
        """
        pass
