"""
Tests for upload validation and data URI encoding.
"""
import base64

import pytest
from PIL import Image

from app.config import Config
from app.errors import ImageLoadError
from app.services.imaging import (
    decode_image, get_image_dimensions, to_data_uri, validate_magic_bytes, validate_upload,
)


def test_png_data_uri_roundtrips_payload(skin_photo):
    data_uri = to_data_uri(skin_photo, "image/png")
    header, encoded = data_uri.split(",", 1)
    assert header == "data:image/png;base64"
    assert base64.b64decode(encoded) == skin_photo


def test_mime_type_comes_from_magic_bytes(skin_photo):
    """A PNG sent without a content type is still labelled as PNG."""
    assert to_data_uri(skin_photo).startswith("data:image/png;")


@pytest.mark.parametrize("payload,expected", [
    (b"\xff\xd8\xff\xe0" + b"\x00" * 16, "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n" + b"\x00" * 16, "image/png"),
    (b"GIF89a" + b"\x00" * 16, "image/gif"),
    (b"RIFF\x00\x00\x00\x00WEBPVP8 " + b"\x00" * 8, "image/webp"),
])
def test_magic_bytes(payload, expected):
    assert validate_magic_bytes(payload) == expected


def test_unknown_magic_bytes():
    with pytest.raises(ImageLoadError) as exc_info:
        validate_magic_bytes(b"%PDF-1.7 not really an image")
    assert exc_info.value.status_code == 400


def test_too_short_payload():
    with pytest.raises(ImageLoadError):
        validate_magic_bytes(b"\x89PNG")


def test_unsupported_content_type(skin_photo):
    with pytest.raises(ImageLoadError) as exc_info:
        validate_upload(skin_photo, "application/pdf")
    assert exc_info.value.status_code == 415


def test_oversize_upload(skin_photo, monkeypatch):
    monkeypatch.setattr(Config, "MAX_FILE_MB", 0)
    with pytest.raises(ImageLoadError) as exc_info:
        validate_upload(skin_photo, "image/png")
    assert exc_info.value.status_code == 413


def test_corrupt_png_fails_to_decode():
    payload = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
    with pytest.raises(ImageLoadError) as exc_info:
        decode_image(payload)
    assert "Failed to decode image" in exc_info.value.detail


def test_dimensions(make_png):
    assert get_image_dimensions(decode_image(make_png(width=7, height=5))) == (7, 5)


def test_decompression_bomb_rejected(make_png, monkeypatch):
    """Pixel counts past twice the limit fail to open at all."""
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 4)
    with pytest.raises(ImageLoadError) as exc_info:
        decode_image(make_png(width=4, height=3))
    assert exc_info.value.status_code == 413


def test_decompression_bomb_warning_rejected(make_png, monkeypatch):
    """Pixel counts between the limit and twice the limit only warn in Pillow."""
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    with pytest.raises(ImageLoadError) as exc_info:
        decode_image(make_png(width=4, height=3))
    assert exc_info.value.status_code == 413
