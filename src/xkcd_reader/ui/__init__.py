"""UI layer - PySide6 presentation components."""

from .comic_window import ComicWindow

__all__ = ["ComicWindow"]
