"""Domain layer - comic entities and the error taxonomy."""

from .comic import (
    Comic,
    ImageFormat,
    ResolvedComic,
    explain_url,
    image_extension_for_url,
    image_format_for_url,
    viewer_url,
)
from .errors import (
    ComicReaderError,
    FetchError,
    InvalidInputError,
    NotFoundError,
    ParseError,
)

__all__ = [
    "Comic",
    "ResolvedComic",
    "ImageFormat",
    "image_format_for_url",
    "image_extension_for_url",
    "viewer_url",
    "explain_url",
    "ComicReaderError",
    "NotFoundError",
    "FetchError",
    "ParseError",
    "InvalidInputError",
]
