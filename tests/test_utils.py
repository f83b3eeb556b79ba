"""
Tests for data URL parsing, upload decoding and logging helpers.
"""

import base64
import io
import logging

import pytest

from genga.errors import InvalidImageError
from genga.state import EncodedImage
from genga.utils import (
    extension_for,
    get_logger,
    load_image_bytes,
    parse_data_url,
    to_data_url,
)


class TestParseDataUrl:
    def test_png_header(self):
        mime, payload = parse_data_url("data:image/png;base64,AAAA")
        assert mime == "image/png"
        assert payload == "AAAA"

    def test_missing_mime_falls_back_to_jpeg(self):
        mime, payload = parse_data_url("data:;base64,AAAA")
        assert mime == "image/jpeg"
        assert payload == "AAAA"

    def test_header_without_semicolon_falls_back(self):
        mime, _ = parse_data_url("data:image/webp,AAAA")
        assert mime == "image/jpeg"

    def test_no_comma_gives_empty_payload(self):
        mime, payload = parse_data_url("garbage")
        assert mime == "image/jpeg"
        assert payload == ""


class TestEncodedImage:
    def test_data_url_carries_mime_and_base64(self, png_bytes):
        image = EncodedImage(mime_type="image/png", data=png_bytes)
        assert image.data_url.startswith("data:image/png;base64,")
        assert image.data_url.split(",", 1)[1] == base64.b64encode(png_bytes).decode("ascii")

    def test_from_data_url(self, png_bytes):
        image = EncodedImage.from_data_url(to_data_url(png_bytes, "image/png"))
        assert image == EncodedImage(mime_type="image/png", data=png_bytes)

    def test_from_data_url_rejects_bad_payload(self):
        with pytest.raises(InvalidImageError):
            EncodedImage.from_data_url("data:image/png;base64,@@not-base64@@")


class TestLoadImageBytes:
    def test_detects_png(self, png_bytes):
        data, mime = load_image_bytes(io.BytesIO(png_bytes))
        assert data == png_bytes
        assert mime == "image/png"

    def test_detects_jpeg_regardless_of_declared_type(self, jpeg_bytes):
        upload = io.BytesIO(jpeg_bytes)
        upload.type = "image/png"
        _, mime = load_image_bytes(upload)
        assert mime == "image/jpeg"

    def test_rejects_non_image(self):
        with pytest.raises(InvalidImageError):
            load_image_bytes(io.BytesIO(b"definitely not an image"))


@pytest.mark.parametrize(
    "mime,ext",
    [("image/jpeg", "jpg"), ("image/png", "png"), ("image/webp", "webp"), ("application/octet-stream", "png")],
)
def test_extension_for(mime, ext):
    assert extension_for(mime) == ext


def test_get_logger_is_namespaced_and_single_handler():
    first = get_logger("alpha")
    get_logger("beta")
    assert first.name == "genga.alpha"
    assert len(logging.getLogger("genga").handlers) == 1
