"""HTTP client for the comic JSON endpoint and image downloads."""

import logging
from typing import Optional

import requests

from xkcd_reader.core import FetchError

logger = logging.getLogger(__name__)


class ComicClient:
    """Fetches comic documents and images over HTTP.

    One blocking request per call, no retries. Any transport failure or
    non-success status is raised as FetchError.
    """

    BASE_URL = "https://xkcd.com"
    INFO_FILENAME = "info.0.json"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 20.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def latest_url(self) -> str:
        return f"{self.base_url}/{self.INFO_FILENAME}"

    def comic_url(self, number: int) -> str:
        return f"{self.base_url}/{number}/{self.INFO_FILENAME}"

    def fetch_latest_json(self) -> bytes:
        """Fetch the document of the current latest comic."""
        return self.fetch_json(self.latest_url())

    def fetch_comic_json(self, number: int) -> bytes:
        return self.fetch_json(self.comic_url(number))

    def fetch_json(self, url: str) -> bytes:
        """Fetch a document and return its body verbatim."""
        return self._get(url)

    def fetch_bytes(self, url: str) -> bytes:
        """Download an arbitrary resource, typically a comic image."""
        return self._get(url)

    def _get(self, url: str) -> bytes:
        logger.debug("GET %s", url)
        try:
            response = self._session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise FetchError(f"Failed to fetch {url}: {e}") from e
        return response.content

    def close(self) -> None:
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
