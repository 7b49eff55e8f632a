"""Tests for nanobanana.core.config — configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides via the NANOBANANA_ prefix.
- API key aliases (GEMINI_API_KEY, API_KEY).
- Automatic outputs directory creation on initialisation.
- Pydantic validation constraints (port range).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from nanobanana.core.config import NanoBananaConfig

API_KEY_VARS = ("NANOBANANA_API_KEY", "GEMINI_API_KEY", "API_KEY")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any API key variables inherited from the environment."""
    for var in API_KEY_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.delenv("NANOBANANA_MODEL_NAME", raising=False)
    monkeypatch.delenv("NANOBANANA_GRADIO_SERVER_PORT", raising=False)
    return monkeypatch


class TestConfigDefaults:
    """Verify that NanoBananaConfig provides sensible defaults."""

    def test_default_model_name(self, clean_env, temp_dir: Path):
        cfg = NanoBananaConfig(_env_file=None, outputs_dir=str(temp_dir / "out"))
        assert cfg.model_name == "gemini-2.5-flash-image"

    def test_api_key_absent_by_default(self, clean_env, temp_dir: Path):
        """A missing key is allowed at startup."""
        cfg = NanoBananaConfig(_env_file=None, outputs_dir=str(temp_dir / "out"))
        assert cfg.api_key is None
        assert cfg.has_api_key() is False

    def test_default_server_port(self, clean_env, temp_dir: Path):
        cfg = NanoBananaConfig(_env_file=None, outputs_dir=str(temp_dir / "out"))
        assert cfg.gradio_server_port == 7860
        assert cfg.gradio_share is False

    def test_default_download_prefix(self, test_config: NanoBananaConfig):
        assert test_config.download_prefix == "nano-banana-edit"
        assert test_config.download_max_age_seconds == 3600


class TestConfigEnvironment:
    """Verify environment variable loading."""

    def test_prefixed_model_name(self, clean_env, temp_dir: Path):
        clean_env.setenv("NANOBANANA_MODEL_NAME", "gemini-custom-image")
        cfg = NanoBananaConfig(_env_file=None, outputs_dir=str(temp_dir / "out"))
        assert cfg.model_name == "gemini-custom-image"

    @pytest.mark.parametrize("var", API_KEY_VARS)
    def test_api_key_aliases(self, clean_env, temp_dir: Path, var: str):
        clean_env.setenv(var, "key-from-env")
        cfg = NanoBananaConfig(_env_file=None, outputs_dir=str(temp_dir / "out"))
        assert cfg.api_key == "key-from-env"
        assert cfg.has_api_key() is True

    def test_blank_api_key_is_not_a_key(self, clean_env, temp_dir: Path):
        cfg = NanoBananaConfig(_env_file=None, api_key="   ", outputs_dir=str(temp_dir / "out"))
        assert cfg.has_api_key() is False

    def test_api_key_keyword(self, test_config: NanoBananaConfig):
        assert test_config.api_key == "test-api-key"


class TestConfigDirectoryCreation:
    """Verify that NanoBananaConfig creates the outputs directory."""

    def test_outputs_dir_created(self, test_config: NanoBananaConfig):
        assert test_config.outputs_dir.exists()
        assert test_config.outputs_dir.is_dir()

    def test_creates_nested_directories(self, temp_dir: Path):
        deep_outputs = temp_dir / "a" / "b" / "outputs"
        cfg = NanoBananaConfig(_env_file=None, outputs_dir=str(deep_outputs))
        assert cfg.outputs_dir.exists()
        assert isinstance(cfg.outputs_dir, Path)


class TestConfigValidation:
    """Verify Pydantic validation constraints on config fields."""

    def test_invalid_port_too_low(self, temp_dir: Path):
        with pytest.raises(Exception):
            NanoBananaConfig(_env_file=None, gradio_server_port=80, outputs_dir=str(temp_dir))

    def test_invalid_port_too_high(self, temp_dir: Path):
        with pytest.raises(Exception):
            NanoBananaConfig(_env_file=None, gradio_server_port=70000, outputs_dir=str(temp_dir))

    def test_invalid_instruction_length(self, temp_dir: Path):
        with pytest.raises(Exception):
            NanoBananaConfig(_env_file=None, max_instruction_length=0, outputs_dir=str(temp_dir))

    def test_invalid_download_max_age(self, temp_dir: Path):
        with pytest.raises(Exception):
            NanoBananaConfig(_env_file=None, download_max_age_seconds=0, outputs_dir=str(temp_dir))
