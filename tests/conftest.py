"""Shared pytest fixtures for Nano Banana tests."""

import io
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from google.genai import types
from PIL import Image

from nanobanana.core.config import NanoBananaConfig
from nanobanana.core.image_intake import InputImage, load_image
from nanobanana.ui.models import SessionState


def _make_image_bytes(fmt: str = "PNG", size: tuple[int, int] = (32, 32), color=(200, 30, 30)) -> bytes:
    """Render a solid-colour image to bytes in the given format."""
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=fmt)
    return buffer.getvalue()


def _make_response(*parts: types.Part) -> types.GenerateContentResponse:
    """Build an SDK response with a single candidate holding the given parts."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


def _image_part(data: bytes, mime_type: str | None = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))


def _text_part(text: str) -> types.Part:
    return types.Part(text=text)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> NanoBananaConfig:
    """Create a test configuration writing into a temporary directory."""
    return NanoBananaConfig(
        _env_file=None,
        api_key="test-api-key",
        model_name="gemini-2.5-flash-image",
        outputs_dir=str(temp_dir / "outputs"),
    )


@pytest.fixture
def png_bytes() -> bytes:
    """Small PNG image bytes."""
    return _make_image_bytes("PNG", color=(20, 120, 220))


@pytest.fixture
def jpeg_path(temp_dir: Path) -> Path:
    """A JPEG photo on disk, like a user upload."""
    path = temp_dir / "photo.jpg"
    path.write_bytes(_make_image_bytes("JPEG", size=(128, 96)))
    return path


@pytest.fixture
def input_image(jpeg_path: Path) -> InputImage:
    """An InputImage loaded from the sample JPEG."""
    return load_image(jpeg_path)


@pytest.fixture
def session_state() -> SessionState:
    """Create an empty session state."""
    return SessionState()


@pytest.fixture
def ready_state(input_image: InputImage) -> SessionState:
    """A session with an image and an instruction, ready to generate."""
    return SessionState(input_image=input_image, instruction="Colorize this")


@pytest.fixture
def mock_genai_client(png_bytes: bytes) -> MagicMock:
    """A stand-in for google.genai.Client returning one PNG image part."""
    client = MagicMock()
    client.models.generate_content.return_value = _make_response(_image_part(png_bytes))
    return client


@pytest.fixture
def make_response():
    """Factory for SDK responses with one candidate."""
    return _make_response


@pytest.fixture
def image_part():
    """Factory for inline image parts."""
    return _image_part


@pytest.fixture
def text_part():
    """Factory for text parts."""
    return _text_part


@pytest.fixture
def make_image_bytes():
    """Factory for encoded solid-colour images."""
    return _make_image_bytes
