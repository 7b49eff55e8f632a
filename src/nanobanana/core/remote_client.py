"""Remote edit client for the Gemini image model.

This module sends a single edit request (one inline image plus one text
instruction) to a Gemini model through the ``google-genai`` SDK and extracts
the generated image from the response.

Response Handling
-----------------
The response is validated into a small typed schema before it is inspected:

    EditResponse
      candidates: list[ResponseCandidate]
        content: ResponseContent
          parts: list[ResponsePart]
            inline_data: InlineData (data, mime_type)
            text: str

Both the SDK response object and the raw REST payload (camelCase keys,
base64 strings) are accepted. The parts of the first candidate are scanned in
order and the first one that carries image bytes wins.

Failure Kinds
-------------
- NoContentGeneratedError: no candidates, no content or no parts
- NoImageGeneratedError: parts present but none carry image data
- MalformedResponseError: the payload does not fit the schema
- MissingCredentialError: no API key configured when the client is built

Transport errors raised by the SDK (network, auth, quota, bad request) are
not wrapped: they reach the caller unmodified.

Usage Example
-------------
    from google import genai

    client = RemoteEditClient(genai.Client(api_key="..."), "gemini-2.5-flash-image")
    result = client.submit_edit(build_request(input_image, "Colorize this"))
    print(result.mime_type)
"""

import io
import logging
from dataclasses import dataclass
from typing import Any

from google import genai
from google.genai import types
from PIL import Image
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .config import NanoBananaConfig
from .edit_request import EditRequest
from .encoding import DEFAULT_IMAGE_MIME, decode_data_url, decode_payload, split_data_url, to_data_url

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash-image"


class RemoteError(Exception):
    """Base class for failures reported by the remote edit client."""

    pass


class NoContentGeneratedError(RemoteError):
    """The response contained no content parts at all."""

    def __init__(self, message: str = "No content generated"):
        super().__init__(message)


class NoImageGeneratedError(RemoteError):
    """The response contained parts, but none carried image data."""

    def __init__(self, message: str = "No image generated in the response"):
        super().__init__(message)


class MalformedResponseError(RemoteError):
    """The response payload did not match the expected structure."""

    pass


class MissingCredentialError(RemoteError):
    """No API key is configured for the remote service."""

    pass


# ============================================================================
# Response schema
# ============================================================================


class _ResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class InlineData(_ResponseModel):
    data: bytes | None = None
    mime_type: str | None = Field(
        default=None, validation_alias=AliasChoices("mime_type", "mimeType")
    )

    @field_validator("data", mode="before")
    @classmethod
    def _decode_base64(cls, value: Any) -> Any:
        # REST payloads carry base64 text; the SDK has already decoded to bytes
        if isinstance(value, str):
            return decode_payload(value)
        return value


class ResponsePart(_ResponseModel):
    inline_data: InlineData | None = Field(
        default=None, validation_alias=AliasChoices("inline_data", "inlineData")
    )
    text: str | None = None

    def has_image(self) -> bool:
        return self.inline_data is not None and bool(self.inline_data.data)


class ResponseContent(_ResponseModel):
    parts: list[ResponsePart] | None = None


class ResponseCandidate(_ResponseModel):
    content: ResponseContent | None = None


class EditResponse(_ResponseModel):
    candidates: list[ResponseCandidate] | None = None

    @classmethod
    def parse(cls, raw: Any) -> "EditResponse":
        """Validate an SDK response object or a raw dict into the schema.

        Raises:
            MalformedResponseError: If the payload does not fit the schema
        """
        if isinstance(raw, BaseModel):
            raw = raw.model_dump(exclude_none=True)

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected response structure: {e}") from e

    def first_parts(self) -> list[ResponsePart]:
        """Return the parts of the first candidate (empty if missing)."""
        if not self.candidates:
            return []
        content = self.candidates[0].content
        if content is None or not content.parts:
            return []
        return content.parts


# ============================================================================
# Result
# ============================================================================


@dataclass(frozen=True)
class EditResult:
    """A generated image in displayable (data URL) form."""

    data_url: str

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str | None) -> "EditResult":
        return cls(data_url=to_data_url(data, mime_type or DEFAULT_IMAGE_MIME))

    @property
    def mime_type(self) -> str:
        mime_type, _ = split_data_url(self.data_url)
        return mime_type or DEFAULT_IMAGE_MIME

    def to_bytes(self) -> bytes:
        data, _ = decode_data_url(self.data_url)
        return data

    def to_pil(self) -> Image.Image:
        """Decode the result into a PIL Image for display."""
        image = Image.open(io.BytesIO(self.to_bytes()))
        image.load()
        return image


def extract_result(response: Any) -> EditResult:
    """Pull the first inline image out of a generate_content response.

    Args:
        response: SDK GenerateContentResponse or equivalent dict

    Returns:
        EditResult wrapping the first image part found

    Raises:
        NoContentGeneratedError: If the response has no content parts
        NoImageGeneratedError: If no part carries image data
        MalformedResponseError: If the response does not fit the schema
    """
    parsed = EditResponse.parse(response)
    parts = parsed.first_parts()

    if not parts:
        raise NoContentGeneratedError()

    for part in parts:
        if part.has_image():
            return EditResult.from_bytes(part.inline_data.data, part.inline_data.mime_type)

    texts = [part.text for part in parts if part.text]
    if texts:
        logger.warning(f"Model returned text but no image: {' '.join(texts)[:200]}")
    raise NoImageGeneratedError()


# ============================================================================
# Client
# ============================================================================


class RemoteEditClient:
    """Sends edit requests to a Gemini image model.

    Attributes
    ----------
    client : Any
        google-genai Client (or any object exposing models.generate_content)
    model_name : str
        Model identifier sent with every request
    """

    def __init__(self, client: Any, model_name: str = DEFAULT_MODEL) -> None:
        self.client = client
        self.model_name = model_name

    def build_contents(self, request: EditRequest) -> list[types.Content]:
        """Build the ordered request parts: image first, then instruction."""
        return [
            types.Content(
                role="user",
                parts=[
                    types.Part.from_bytes(data=request.payload_bytes(), mime_type=request.mime_type),
                    types.Part.from_text(text=request.instruction),
                ],
            )
        ]

    def submit_edit(self, request: EditRequest) -> EditResult:
        """Submit one edit and return the generated image.

        This is a single blocking round trip with no retries.

        Raises:
            RemoteError: If the response carries no usable image
            Exception: Transport errors from the SDK, unmodified
        """
        contents = self.build_contents(request)

        logger.info(
            f"Sending edit to {self.model_name} "
            f"({request.mime_type}, instruction={request.instruction[:60]!r})"
        )
        response = self.client.models.generate_content(model=self.model_name, contents=contents)

        result = extract_result(response)
        logger.info(f"Received edited image ({result.mime_type})")
        return result


def create_remote_client(settings: NanoBananaConfig) -> RemoteEditClient:
    """Build the production client from configuration.

    Raises:
        MissingCredentialError: If no API key is configured
    """
    if not settings.has_api_key():
        raise MissingCredentialError(
            "No API key configured. Set NANOBANANA_API_KEY (or GEMINI_API_KEY)."
        )

    logger.info(f"Creating Gemini client for model {settings.model_name}")
    return RemoteEditClient(genai.Client(api_key=settings.api_key), settings.model_name)
