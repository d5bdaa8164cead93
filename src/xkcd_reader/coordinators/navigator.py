"""Navigator - resolves navigation requests into displayable comics."""

import logging
from random import Random
import re
from typing import Optional, Protocol

from xkcd_reader.core import (
    Comic,
    InvalidInputError,
    NotFoundError,
    ResolvedComic,
    explain_url,
    viewer_url,
)
from xkcd_reader.io import ComicStore

logger = logging.getLogger(__name__)

LATEST = 0
_DIGITS_RE = re.compile(r"[0-9]+")


class ComicFetcher(Protocol):
    """Network collaborator the Navigator depends on."""

    def fetch_latest_json(self) -> bytes: ...

    def fetch_comic_json(self, number: int) -> bytes: ...

    def fetch_bytes(self, url: str) -> bytes: ...


class Navigator:
    """
    Owns the reading session: the displayed comic and the two cache pointers.

    ``latest_known`` is the highest comic number ever cached and
    ``last_viewed`` the most recently displayed one. Both are loaded from the
    store at construction (absent pointers count as 0) and written back
    whenever they change.

    Comic number 0 is the "latest" sentinel: requesting it always goes to the
    network and resolves to a concrete number before anything is cached.
    """

    def __init__(
        self,
        store: ComicStore,
        fetcher: ComicFetcher,
        rng: Optional[Random] = None,
    ) -> None:
        self.store = store
        self.fetcher = fetcher
        self._rng = rng or Random()

        self.latest_known = self._load_pointer(self.store.read_latest_pointer)
        self.last_viewed = self._load_pointer(self.store.read_last_pointer)
        self.current_number = self.last_viewed

    def get(self, number: int) -> ResolvedComic:
        """
        Resolve ``number`` to a comic with its image cached locally.

        Args:
            number: Comic number, or 0 for the current latest comic.

        Returns:
            ResolvedComic: The comic and the local path of its image.

        Raises:
            InvalidInputError: If ``number`` is negative.
            FetchError: If a document or image download fails.
            ParseError: If the document is malformed.
        """
        if number < 0:
            raise InvalidInputError(f"Comic numbers start at 1, got {number}")

        raw = self._resolve_document(number)
        comic = Comic.from_json(raw)
        key = comic.number if number == LATEST else number

        # Image first: a failed download leaves neither artifact behind.
        image_path = self.store.put_image_if_absent(
            key, comic.image_url, self.fetcher.fetch_bytes
        )
        self.store.put_json_if_absent(key, raw)

        self._record_viewed(comic.number)
        return ResolvedComic(comic=comic, image_path=image_path)

    def get_latest(self) -> ResolvedComic:
        """Fetch the current latest comic from the network."""
        return self.get(LATEST)

    def next(self) -> ResolvedComic:
        """Advance one comic, never past the latest known one."""
        self.reload_latest_known()
        return self.get(min(self.current_number + 1, self.latest_known))

    def prev(self) -> ResolvedComic:
        """Go back one comic, never below the first."""
        return self.get(max(self.current_number - 1, 1))

    def random(self) -> ResolvedComic:
        """
        Show a random comic drawn from ``[0, N)`` where N is the live latest number.

        N itself is never drawn directly; a draw of 0 resolves to the latest
        comic through the sentinel.
        """
        latest = Comic.from_json(self.fetcher.fetch_latest_json())
        return self.get(self._rng.randrange(latest.number))

    def get_latest_cached(self) -> ResolvedComic:
        """Show the highest-numbered comic ever cached."""
        self.reload_latest_known()
        return self.get(self.latest_known)

    def get_last_viewed(self) -> ResolvedComic:
        """Show the comic that was displayed most recently, even in a prior session."""
        self.last_viewed = self._load_pointer(self.store.read_last_pointer)
        return self.get(self.last_viewed)

    def get_from_url(self, url: str) -> ResolvedComic:
        """
        Show the comic whose number is the first run of digits in ``url``.

        Raises:
            InvalidInputError: If ``url`` contains no digits.
        """
        return self.get(number_from_url(url))

    def viewer_url(self) -> str:
        """Canonical comic page for the displayed comic."""
        return viewer_url(self._require_current())

    def explain_url(self) -> str:
        """Explanation wiki page for the displayed comic."""
        return explain_url(self._require_current())

    def reload_latest_known(self) -> int:
        """Refresh ``latest_known`` from the store, never lowering it."""
        persisted = self._load_pointer(self.store.read_latest_pointer)
        self.latest_known = max(self.latest_known, persisted)
        return self.latest_known

    def _resolve_document(self, number: int) -> bytes:
        if number == LATEST:
            logger.debug("Fetching latest comic document")
            return self.fetcher.fetch_latest_json()
        if self.store.has_json(number):
            logger.debug("Cache hit for comic %d", number)
            return self.store.read_json(number)
        logger.debug("Cache miss for comic %d, fetching", number)
        return self.fetcher.fetch_comic_json(number)

    def _record_viewed(self, number: int) -> None:
        self.reload_latest_known()
        if number > self.latest_known:
            self.latest_known = number
            self.store.write_latest_pointer(number)
            logger.debug("Latest known comic is now %d", number)
        if number != self.last_viewed:
            self.last_viewed = number
            self.store.write_last_pointer(number)
        self.current_number = number

    def _require_current(self) -> int:
        if self.current_number < 1:
            raise InvalidInputError("No comic has been displayed yet")
        return self.current_number

    @staticmethod
    def _load_pointer(read) -> int:
        try:
            return read()
        except NotFoundError:
            return 0


def number_from_url(url: str) -> int:
    """Extract the first run of decimal digits in ``url`` as a comic number."""
    match = _DIGITS_RE.search(url)
    if match is None:
        raise InvalidInputError(f"No comic number found in URL: {url}")
    return parse_comic_number(match.group())


def parse_comic_number(text: str) -> int:
    """Convert an ASCII digit string to a comic number.

    Raises:
        InvalidInputError: If ``text`` is not plain ASCII digits or is too long
            to convert.
    """
    if not _DIGITS_RE.fullmatch(text):
        raise InvalidInputError(f"Not a comic number: {text!r}")
    try:
        return int(text)
    except ValueError as e:
        raise InvalidInputError(f"Comic number is too large: {text[:20]}...") from e
