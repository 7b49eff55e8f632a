"""Nano Banana Photo Editor - natural-language photo editing with Gemini."""

__version__ = "0.1.0"

from nanobanana.core.config import NanoBananaConfig, config
from nanobanana.core.remote_client import RemoteEditClient, create_remote_client

__all__ = [
    "NanoBananaConfig",
    "config",
    "RemoteEditClient",
    "create_remote_client",
]
