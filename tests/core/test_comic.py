"""Unit tests for the Comic entity and image format mapping."""

import json

import pytest

from xkcd_reader.core import (
    Comic,
    ImageFormat,
    ParseError,
    ResolvedComic,
    explain_url,
    image_extension_for_url,
    image_format_for_url,
    viewer_url,
)


class TestImageFormatForUrl:
    """Tests for URL suffix to ImageFormat mapping."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://imgs.xkcd.com/comics/barrel_cropped_(1).jpg", ImageFormat.JPEG),
            ("https://imgs.xkcd.com/comics/photo.jpeg", ImageFormat.JPEG),
            ("https://imgs.xkcd.com/comics/woodpecker.png", ImageFormat.PNG),
            ("https://imgs.xkcd.com/comics/WOODPECKER.PNG", ImageFormat.PNG),
            ("https://imgs.xkcd.com/comics/a_bunch_of_rocks.gif", ImageFormat.GIF),
        ],
    )
    def test_known_suffixes(self, url, expected):
        assert image_format_for_url(url) is expected

    def test_unknown_suffix_uses_fallback(self):
        """Anything unrecognised falls back to the named GIF variant."""
        assert image_format_for_url("https://imgs.xkcd.com/comics/x.webp") is ImageFormat.fallback()
        assert ImageFormat.fallback() is ImageFormat.GIF

    def test_only_gif_is_animated(self):
        assert ImageFormat.GIF.is_animated
        assert not ImageFormat.PNG.is_animated
        assert not ImageFormat.JPEG.is_animated

    def test_extension_is_last_three_characters(self):
        assert image_extension_for_url("https://imgs.xkcd.com/comics/woodpecker.png") == "png"
        assert image_extension_for_url("https://imgs.xkcd.com/comics/photo.jpeg") == "peg"


class TestComicFromJson:
    """Tests for parsing raw comic documents."""

    def test_parses_required_fields(self, document):
        raw = document(614, title="Woodpecker")
        comic = Comic.from_json(raw)

        assert comic.number == 614
        assert comic.title == "Woodpecker"
        assert comic.alt_text == "Alt text for 614"
        assert comic.image_url.endswith("comic_614.png")
        assert comic.image_format is ImageFormat.PNG

    def test_preserves_raw_bytes_verbatim(self):
        """The raw document is kept exactly, including formatting."""
        raw = b'{"num": 1,   "img": "a.png", "safe_title": "B", "alt": "C"}\n'
        assert Comic.from_json(raw).raw_json == raw

    def test_optional_fields(self, document):
        comic = Comic.from_json(document(1))
        assert comic.published == "2009-01-05"

    def test_missing_date_gives_no_published(self):
        raw = json.dumps({"num": 3, "img": "a.png", "safe_title": "t", "alt": "a"}).encode()
        assert Comic.from_json(raw).published is None

    def test_invalid_json_raises_parse_error(self):
        with pytest.raises(ParseError):
            Comic.from_json(b"<html>not json</html>")

    def test_non_object_raises_parse_error(self):
        with pytest.raises(ParseError):
            Comic.from_json(b"[1, 2, 3]")

    @pytest.mark.parametrize("missing", ["num", "img", "safe_title", "alt"])
    def test_missing_field_raises_parse_error(self, document, missing):
        data = json.loads(document(10))
        del data[missing]
        with pytest.raises(ParseError):
            Comic.from_json(json.dumps(data).encode())

    def test_zero_number_is_rejected(self):
        raw = json.dumps({"num": 0, "img": "a.png", "safe_title": "t", "alt": "a"}).encode()
        with pytest.raises(ParseError):
            Comic.from_json(raw)


class TestUrls:
    """Tests for the browser URL helpers."""

    def test_viewer_url(self):
        assert viewer_url(614) == "https://xkcd.com/614/"

    def test_explain_url(self):
        assert explain_url(614) == "https://www.explainxkcd.com/wiki/index.php/614"

    def test_resolved_comic_exposes_display_fields(self, document, tmp_path):
        comic = Comic.from_json(document(42, image_ext="jpg"))
        resolved = ResolvedComic(comic=comic, image_path=tmp_path / "42.jpg")

        assert resolved.number == 42
        assert resolved.title == "Comic 42"
        assert resolved.alt_text == "Alt text for 42"
        assert resolved.image_format is ImageFormat.JPEG
        assert resolved.viewer_url == "https://xkcd.com/42/"
        assert resolved.explain_url.endswith("/42")
