"""Core functionality for image editing.

This module provides the components between an uploaded file and the remote
model:

- **NanoBananaConfig / config**: Pydantic Settings configuration (NANOBANANA_ prefix)
- **load_image / InputImage**: Image intake from a selected file
- **build_request / EditRequest**: Outbound request composition
- **RemoteEditClient / EditResult**: Gemini round trip and response parsing
- **save_result**: Writing results to timestamped files for download

Usage Example
-------------
    from nanobanana.core import build_request, config, create_remote_client, load_image

    image = load_image("portrait.jpg")
    client = create_remote_client(config)
    result = client.submit_edit(build_request(image, "Make it look older"))
"""

from nanobanana.core.config import NanoBananaConfig, config
from nanobanana.core.edit_request import EditRequest, build_request
from nanobanana.core.export import save_result
from nanobanana.core.image_intake import ImageReadError, InputImage, load_image
from nanobanana.core.remote_client import (
    EditResult,
    MalformedResponseError,
    MissingCredentialError,
    NoContentGeneratedError,
    NoImageGeneratedError,
    RemoteEditClient,
    RemoteError,
    create_remote_client,
)

__all__ = [
    "NanoBananaConfig",
    "config",
    "EditRequest",
    "build_request",
    "save_result",
    "ImageReadError",
    "InputImage",
    "load_image",
    "EditResult",
    "MalformedResponseError",
    "MissingCredentialError",
    "NoContentGeneratedError",
    "NoImageGeneratedError",
    "RemoteEditClient",
    "RemoteError",
    "create_remote_client",
]
