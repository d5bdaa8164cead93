"""Shared fixtures: comic documents and a fake network collaborator."""

import json

import pytest

from xkcd_reader.core import FetchError


def make_document(number: int, image_ext: str = "png", title: str | None = None) -> bytes:
    """Build a raw comic document the way the endpoint serves it."""
    doc = {
        "month": "1",
        "num": number,
        "link": "",
        "year": "2009",
        "news": "",
        "safe_title": title or f"Comic {number}",
        "transcript": "",
        "alt": f"Alt text for {number}",
        "img": f"https://imgs.xkcd.com/comics/comic_{number}.{image_ext}",
        "title": title or f"Comic {number}",
        "day": "5",
    }
    return json.dumps(doc).encode("utf-8")


class FakeFetcher:
    """In-memory stand-in for ComicClient that records every request."""

    def __init__(self, latest: int, missing: tuple[int, ...] = ()):
        self.latest = latest
        self.missing = set(missing)
        self.fail_images = False
        self.json_requests: list[int] = []
        self.image_requests: list[str] = []

    def fetch_latest_json(self) -> bytes:
        self.json_requests.append(0)
        return make_document(self.latest)

    def fetch_comic_json(self, number: int) -> bytes:
        self.json_requests.append(number)
        if number in self.missing or number > self.latest:
            raise FetchError(f"Failed to fetch comic {number}: 404")
        return make_document(number)

    def fetch_bytes(self, url: str) -> bytes:
        self.image_requests.append(url)
        if self.fail_images:
            raise FetchError(f"Failed to fetch {url}: connection reset")
        return b"\x89PNG" + url.encode("utf-8")


@pytest.fixture
def fetcher():
    """Fake network with 1000 published comics."""
    return FakeFetcher(latest=1000)


@pytest.fixture
def document():
    """Factory building raw comic documents."""
    return make_document


@pytest.fixture
def make_fetcher():
    """Factory for fake networks with a custom latest number or missing comics."""
    return FakeFetcher
