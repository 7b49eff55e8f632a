"""Unit tests for image intake."""

from pathlib import Path

import pytest

from nanobanana.core.encoding import decode_data_url
from nanobanana.core.image_intake import (
    FALLBACK_MIME,
    ImageReadError,
    InputImage,
    detect_mime_type,
    load_image,
)


class TestLoadImage:
    """Tests for load_image."""

    def test_loads_jpeg(self, jpeg_path: Path):
        image = load_image(jpeg_path)

        assert isinstance(image, InputImage)
        assert image.source_path == jpeg_path
        assert image.mime_type == "image/jpeg"
        assert image.name == "photo.jpg"

    def test_preview_and_payload_are_same_data_url(self, jpeg_path: Path):
        image = load_image(jpeg_path)

        assert image.preview == image.encoded_payload
        assert image.preview.startswith("data:image/jpeg;base64,")

    def test_payload_decodes_to_file_bytes(self, jpeg_path: Path):
        image = load_image(str(jpeg_path))

        data, mime = decode_data_url(image.encoded_payload)
        assert data == jpeg_path.read_bytes()
        assert mime == "image/jpeg"

    def test_reported_mime_type_is_forwarded(self, jpeg_path: Path):
        """The caller's mime type wins without validation."""
        image = load_image(jpeg_path, mime_type="image/x-custom")
        assert image.mime_type == "image/x-custom"

    def test_is_immutable(self, jpeg_path: Path):
        image = load_image(jpeg_path)
        with pytest.raises(AttributeError):
            image.mime_type = "image/png"

    def test_missing_file_raises(self, temp_dir: Path):
        with pytest.raises(ImageReadError, match="Could not read image"):
            load_image(temp_dir / "missing.png")

    def test_empty_file_raises(self, temp_dir: Path):
        empty = temp_dir / "empty.png"
        empty.write_bytes(b"")

        with pytest.raises(ImageReadError, match="empty"):
            load_image(empty)

    def test_read_error_is_os_error(self, temp_dir: Path):
        with pytest.raises(OSError):
            load_image(temp_dir / "missing.png")


class TestDetectMimeType:
    """Tests for detect_mime_type."""

    def test_from_extension(self, temp_dir: Path):
        path = temp_dir / "picture.png"
        path.write_bytes(b"not really a png")
        assert detect_mime_type(path) == "image/png"

    def test_sniffs_content_without_extension(self, temp_dir: Path, make_image_bytes):
        path = temp_dir / "upload"
        path.write_bytes(make_image_bytes("PNG"))
        assert detect_mime_type(path) == "image/png"

    def test_unknown_content_falls_back(self, temp_dir: Path):
        path = temp_dir / "blob"
        path.write_bytes(b"\x00\x01\x02")
        assert detect_mime_type(path) == FALLBACK_MIME
