"""Image intake: turn a user-selected file into an embeddable input image."""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .encoding import to_data_url

logger = logging.getLogger(__name__)

FALLBACK_MIME = "application/octet-stream"


class ImageReadError(OSError):
    """Raised when a selected file cannot be read or is empty."""

    pass


@dataclass(frozen=True)
class InputImage:
    """An uploaded image, ready for preview and submission.

    Attributes
    ----------
    source_path : Path
        Path of the file the user selected
    preview : str
        Displayable data URL
    encoded_payload : str
        Base64 payload with its data URL prefix (same string as preview)
    mime_type : str
        Mime type reported for the file
    """

    source_path: Path
    preview: str
    encoded_payload: str
    mime_type: str

    @property
    def name(self) -> str:
        return self.source_path.name


def detect_mime_type(path: Path) -> str:
    """Work out the mime type to forward for a file.

    The file extension is tried first; when it is unknown, Pillow is asked to
    identify the format. No validation happens beyond that.

    Args:
        path: File to inspect

    Returns:
        Mime type string (application/octet-stream when nothing matches)
    """
    guessed, _ = mimetypes.guess_type(path.name)
    if guessed:
        return guessed

    try:
        with Image.open(path) as img:
            mime = Image.MIME.get(img.format or "")
    except (UnidentifiedImageError, OSError) as e:
        logger.debug(f"Pillow could not identify {path.name}: {e}")
        mime = None

    return mime or FALLBACK_MIME


def load_image(path: str | Path, mime_type: str | None = None) -> InputImage:
    """Read a selected file into an InputImage.

    Args:
        path: Path to the selected file
        mime_type: Mime type reported by the caller, if any

    Returns:
        InputImage whose preview and payload are the same data URL

    Raises:
        ImageReadError: If the file cannot be read or yields no data
    """
    source_path = Path(path)

    try:
        data = source_path.read_bytes()
    except OSError as e:
        raise ImageReadError(f"Could not read image {source_path.name}: {e}") from e

    if not data:
        raise ImageReadError(f"Image {source_path.name} is empty")

    resolved_mime = mime_type or detect_mime_type(source_path)
    encoded = to_data_url(data, resolved_mime)

    logger.info(f"Loaded image {source_path.name} ({len(data)} bytes, {resolved_mime})")

    return InputImage(
        source_path=source_path,
        preview=encoded,
        encoded_payload=encoded,
        mime_type=resolved_mime,
    )
