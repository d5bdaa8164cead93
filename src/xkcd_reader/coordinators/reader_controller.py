"""Reader Controller - Connects the comic window to the navigator."""

import logging
import re
from typing import Callable, Optional

from PySide6.QtCore import QObject, Slot

from xkcd_reader.core import ComicReaderError, InvalidInputError, ResolvedComic
from xkcd_reader.coordinators.navigator import Navigator, parse_comic_number

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[0-9]+")


class ReaderController(QObject):
    """
    Routes window signals to navigator requests and renders the outcome.

    Every navigation failure is scoped to its request: it is reported to the
    user and the previously displayed comic stays on screen.
    """

    def __init__(self, window, navigator: Navigator):
        super().__init__()

        self.window = window
        self.navigator = navigator

        # Session state
        self.current: Optional[ResolvedComic] = None

    @Slot()
    def show_next(self):
        self._navigate(self.navigator.next)

    @Slot()
    def show_previous(self):
        self._navigate(self.navigator.prev)

    @Slot()
    def show_random(self):
        self._navigate(self.navigator.random)

    @Slot()
    def show_latest(self):
        self._navigate(self.navigator.get_latest)

    @Slot()
    def show_latest_cached(self):
        self._navigate(self.navigator.get_latest_cached)

    @Slot()
    def show_last_viewed(self):
        self._navigate(self.navigator.get_last_viewed)

    @Slot(int)
    def show_number(self, number: int):
        self._navigate(lambda: self.navigator.get(number))

    @Slot(str)
    def show_from_input(self, text: str):
        """
        Handle a number or URL typed by the user.

        Args:
            text: Either a bare comic number or a URL containing one.
        """
        text = text.strip()
        if _NUMBER_RE.fullmatch(text):
            self._navigate(lambda: self.navigator.get(parse_comic_number(text)))
        else:
            self._navigate(lambda: self.navigator.get_from_url(text))

    @Slot()
    def show_alt_text(self):
        if self.current is None:
            return
        self.window.show_info(self.current.title, self.current.alt_text)

    @Slot()
    def open_viewer(self):
        self._open(lambda: self._require_current().viewer_url)

    @Slot()
    def open_explanation(self):
        self._open(lambda: self._require_current().explain_url)

    def _require_current(self) -> ResolvedComic:
        if self.current is None:
            raise InvalidInputError("No comic has been displayed yet")
        return self.current

    def _navigate(self, request: Callable[[], ResolvedComic]) -> Optional[ResolvedComic]:
        try:
            resolved = request()
        except ComicReaderError as e:
            logger.warning("Navigation failed: %s", e)
            self.window.show_error("Comic Unavailable", str(e))
            return None

        self.current = resolved
        self.window.render_comic(resolved)
        return resolved

    def _open(self, build_url: Callable[[], str]):
        try:
            url = build_url()
        except ComicReaderError as e:
            self.window.show_error("No Comic", str(e))
            return
        self.window.open_url(url)
