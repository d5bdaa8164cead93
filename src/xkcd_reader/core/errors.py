"""Error taxonomy shared by the store, client and navigator."""


class ComicReaderError(Exception):
    """Base class for every failure scoped to a single navigation request."""


class NotFoundError(ComicReaderError):
    """A requested local artifact (document, image or pointer) is absent."""


class FetchError(ComicReaderError):
    """A network request failed or returned a non-success status."""


class ParseError(ComicReaderError):
    """A comic document is not valid JSON or lacks a required field."""


class InvalidInputError(ComicReaderError):
    """A caller passed a malformed URL or an out-of-range comic number."""
