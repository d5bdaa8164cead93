"""Coordinators - Orchestration layer connecting the UI with the comic cache."""

from .navigator import LATEST, ComicFetcher, Navigator, number_from_url, parse_comic_number
from .reader_controller import ReaderController

__all__ = [
    "LATEST",
    "ComicFetcher",
    "Navigator",
    "number_from_url",
    "parse_comic_number",
    "ReaderController",
]
