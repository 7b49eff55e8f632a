"""Data URL helpers.

Images travel through the editor as embeddable ``data:<mime>;base64,<payload>``
strings: uploads are encoded this way for preview, and results are re-wrapped
this way for display and download. The remote service expects the bare
base64 payload, without the scheme prefix.
"""

import base64
import binascii

DATA_URL_SCHEME = "data:"
BASE64_MARKER = ";base64"
DEFAULT_IMAGE_MIME = "image/png"


def to_data_url(data: bytes, mime_type: str | None) -> str:
    """Encode raw bytes as a base64 data URL.

    Args:
        data: Raw image bytes
        mime_type: Mime type to declare (defaults to image/png when empty)

    Returns:
        ``data:<mime>;base64,<payload>`` string
    """
    payload = base64.b64encode(data).decode("ascii")
    return f"{DATA_URL_SCHEME}{mime_type or DEFAULT_IMAGE_MIME}{BASE64_MARKER},{payload}"


def strip_data_url_prefix(encoded: str) -> str:
    """Return the bare base64 payload of a data URL.

    Strings that do not start with the ``data:`` scheme are returned unchanged.
    """
    if encoded.startswith(DATA_URL_SCHEME) and "," in encoded:
        return encoded.split(",", 1)[1]
    return encoded


def split_data_url(encoded: str) -> tuple[str | None, str]:
    """Split a data URL into its mime type and bare payload.

    Args:
        encoded: Data URL or bare base64 payload

    Returns:
        Tuple of (mime_type, payload). mime_type is None when no prefix is present.
    """
    if not (encoded.startswith(DATA_URL_SCHEME) and "," in encoded):
        return None, encoded

    header, payload = encoded.split(",", 1)
    media = header[len(DATA_URL_SCHEME) :]
    if media.endswith(BASE64_MARKER):
        media = media[: -len(BASE64_MARKER)]
    # Drop any parameters such as ";charset=..."
    mime_type = media.split(";", 1)[0] or None
    return mime_type, payload


def decode_payload(payload: str) -> bytes:
    """Decode a bare base64 payload.

    Raises:
        ValueError: If the payload is not valid base64
    """
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e


def decode_data_url(encoded: str) -> tuple[bytes, str | None]:
    """Decode a data URL back into its bytes and declared mime type."""
    mime_type, payload = split_data_url(encoded)
    return decode_payload(payload), mime_type
