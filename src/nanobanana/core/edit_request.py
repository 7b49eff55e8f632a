"""Edit request construction."""

from dataclasses import dataclass

from .encoding import decode_payload, strip_data_url_prefix
from .image_intake import InputImage


@dataclass(frozen=True)
class EditRequest:
    """A single edit submission.

    Attributes
    ----------
    encoded_payload : str
        Bare base64 image data (no data URL prefix)
    mime_type : str
        Mime type of the image data
    instruction : str
        Free-text edit instruction
    """

    encoded_payload: str
    mime_type: str
    instruction: str

    def payload_bytes(self) -> bytes:
        """Decode the payload into raw image bytes."""
        return decode_payload(self.encoded_payload)


def build_request(input_image: InputImage, instruction: str) -> EditRequest:
    """Compose an EditRequest from an uploaded image and an instruction.

    The data URL prefix is stripped because the remote service expects
    unprefixed base64 data.
    """
    return EditRequest(
        encoded_payload=strip_data_url_prefix(input_image.encoded_payload),
        mime_type=input_image.mime_type,
        instruction=instruction,
    )
