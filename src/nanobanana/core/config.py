"""Configuration management for the Nano Banana photo editor.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the NANOBANANA_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (NANOBANANA_* prefix)
2. .env file in the project root
3. Default values defined in NanoBananaConfig

Example .env file:
    NANOBANANA_API_KEY=your-gemini-key
    NANOBANANA_MODEL_NAME=gemini-2.5-flash-image
    NANOBANANA_OUTPUTS_DIR=outputs

API Credential
--------------
The API key is read from NANOBANANA_API_KEY, falling back to GEMINI_API_KEY
and API_KEY. It is never validated at startup: a missing or invalid key
surfaces as an error on the first edit request.

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

    from nanobanana.core.config import config

    print(config.model_name)
    print(config.outputs_dir)
"""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NanoBananaConfig(BaseSettings):
    """Main configuration for the Nano Banana photo editor.

    Attributes
    ----------
    Remote Model Settings:
        api_key : str | None
            Gemini API key (NANOBANANA_API_KEY, GEMINI_API_KEY or API_KEY)
        model_name : str
            Gemini model identifier used for image edits

    Editing Settings:
        max_instruction_length : int
            Longest instruction accepted before a generate request is rejected

    Downloads:
        outputs_dir : Path
            Directory where downloadable results are written
        download_prefix : str
            Filename prefix for downloaded results
        download_max_age_seconds : int
            Age after which saved downloads are deleted

    UI Settings:
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    Examples
    --------
        >>> custom_config = NanoBananaConfig(
        ...     api_key="test-key",
        ...     model_name="gemini-2.5-flash-image",
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NANOBANANA_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Remote model settings
    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("api_key", "NANOBANANA_API_KEY", "GEMINI_API_KEY", "API_KEY"),
        description="Gemini API key",
    )
    model_name: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini model used for image editing",
    )

    # Editing settings
    max_instruction_length: int = Field(
        default=10000,
        description="Maximum instruction length in characters",
        ge=1,
    )

    # Downloads
    outputs_dir: Path = Field(
        default=Path("outputs"),
        description="Directory to write downloadable results",
    )
    download_prefix: str = Field(
        default="nano-banana-edit",
        description="Filename prefix for downloaded results",
    )
    download_max_age_seconds: int = Field(
        default=3600,
        description="Age in seconds after which saved downloads are deleted",
        ge=1,
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the outputs directory.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        self.outputs_dir.mkdir(parents=True, exist_ok=True)

    def has_api_key(self) -> bool:
        """Check whether a non-blank API key is configured."""
        return bool(self.api_key and self.api_key.strip())


# Global configuration instance
# Loaded from environment variables (NANOBANANA_* prefix) and the .env file.
config = NanoBananaConfig()
