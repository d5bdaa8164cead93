"""Domain entities for a single comic and its resolved local artifacts."""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from .errors import ParseError

VIEWER_URL_TEMPLATE = "https://xkcd.com/{number}/"
EXPLAIN_URL_TEMPLATE = "https://www.explainxkcd.com/wiki/index.php/{number}"


class ImageFormat(Enum):
    """Image encodings the display layer knows how to render."""

    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"

    @classmethod
    def fallback(cls) -> "ImageFormat":
        """Format assumed when the URL suffix is not recognised."""
        return cls.GIF

    @property
    def is_animated(self) -> bool:
        return self is ImageFormat.GIF


def image_format_for_url(url: str) -> ImageFormat:
    """Map an image URL to its format by suffix, defaulting to GIF."""
    lowered = url.lower()
    if lowered.endswith("png"):
        return ImageFormat.PNG
    if lowered.endswith("jpg") or lowered.endswith("jpeg"):
        return ImageFormat.JPEG
    return ImageFormat.fallback()


def image_extension_for_url(url: str) -> str:
    """Local file extension for an image: the last three characters of its URL."""
    return url[-3:]


def viewer_url(number: int) -> str:
    return VIEWER_URL_TEMPLATE.format(number=number)


def explain_url(number: int) -> str:
    return EXPLAIN_URL_TEMPLATE.format(number=number)


@dataclass(frozen=True)
class Comic:
    """A comic document as published by the JSON endpoint.

    Attributes:
        number: Positive comic identifier.
        title: Display title (``safe_title`` on the wire).
        image_url: Absolute URL of the comic image.
        alt_text: Hover text shown separately from the image.
        raw_json: Exact bytes of the fetched document, never re-serialized.
        year: Publication year, when present.
        month: Publication month, when present.
        day: Publication day, when present.
    """

    number: int
    title: str
    image_url: str
    alt_text: str
    raw_json: bytes = field(repr=False)
    year: Optional[str] = None
    month: Optional[str] = None
    day: Optional[str] = None

    @classmethod
    def from_json(cls, raw: bytes) -> "Comic":
        """Parse a raw document.

        Raises:
            ParseError: If ``raw`` is not a JSON object carrying ``num``,
                ``img``, ``safe_title`` and ``alt`` with the expected types.
        """
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Comic document is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ParseError("Comic document is not a JSON object")

        number = data.get("num")
        if not isinstance(number, int) or isinstance(number, bool) or number < 1:
            raise ParseError(f"Comic document has an invalid 'num': {number!r}")

        for key in ("img", "safe_title", "alt"):
            if not isinstance(data.get(key), str):
                raise ParseError(f"Comic {number} is missing string field '{key}'")

        return cls(
            number=number,
            title=data["safe_title"],
            image_url=data["img"],
            alt_text=data["alt"],
            raw_json=bytes(raw),
            year=_optional_str(data.get("year")),
            month=_optional_str(data.get("month")),
            day=_optional_str(data.get("day")),
        )

    @property
    def image_format(self) -> ImageFormat:
        return image_format_for_url(self.image_url)

    @property
    def published(self) -> Optional[str]:
        """ISO-style publication date, or None when the document has none."""
        if not (self.year and self.month and self.day):
            return None
        return f"{self.year}-{self.month.zfill(2)}-{self.day.zfill(2)}"


def _optional_str(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class ResolvedComic:
    """A comic together with its locally cached image, ready for display."""

    comic: Comic
    image_path: Path

    @property
    def number(self) -> int:
        return self.comic.number

    @property
    def title(self) -> str:
        return self.comic.title

    @property
    def alt_text(self) -> str:
        return self.comic.alt_text

    @property
    def image_format(self) -> ImageFormat:
        return self.comic.image_format

    @property
    def viewer_url(self) -> str:
        return viewer_url(self.number)

    @property
    def explain_url(self) -> str:
        return explain_url(self.number)
