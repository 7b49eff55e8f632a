"""Validation utilities for editor inputs."""

import logging

from .models import SessionState

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


def validate_instruction(instruction: str, max_length: int = 10000) -> None:
    """Validate edit instruction text.

    Args:
        instruction: Instruction to validate
        max_length: Maximum allowed length in characters

    Raises:
        ValidationError: If the instruction is blank or too long
    """
    if not instruction or not instruction.strip():
        raise ValidationError("Please describe how you want to edit the image.")

    if len(instruction) > max_length:
        raise ValidationError(
            f"Instruction is too long ({len(instruction)} characters). "
            f"Maximum is {max_length} characters."
        )


def validate_generation_ready(state: SessionState, max_length: int = 10000) -> None:
    """Check that a session may dispatch a new edit.

    Raises:
        ValidationError: If no image is loaded, the instruction is invalid,
            or an edit is already in progress
    """
    if state.is_processing:
        raise ValidationError("An edit is already in progress. Please wait for it to finish.")

    if not state.has_image():
        raise ValidationError("Please upload an image to edit.")

    validate_instruction(state.instruction, max_length=max_length)


def sanitize_filename_input(text: str) -> str:
    """Sanitize user input for use in filenames.

    Args:
        text: User input text

    Returns:
        Sanitized text safe for filenames
    """
    invalid_chars = '<>:"/\\|?*'
    for char in invalid_chars:
        text = text.replace(char, "_")

    return text[:100]
