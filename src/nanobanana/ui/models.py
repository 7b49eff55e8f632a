"""Data models for the editor session state and UI constants."""

import logging
from dataclasses import dataclass
from enum import Enum

from nanobanana.core.edit_request import EditRequest
from nanobanana.core.image_intake import InputImage
from nanobanana.core.remote_client import EditResult

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Lifecycle status of an editing session."""

    IDLE = "idle"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class SessionState:
    """Session state for the Gradio UI.

    Each user gets their own SessionState instance through ``gr.State``.
    Only the controller functions in ``nanobanana.ui.state`` mutate it.

    Attributes
    ----------
    status : SessionStatus
        Current lifecycle status
    input_image : InputImage | None
        The uploaded image, if any
    instruction : str
        Current edit instruction text
    result : EditResult | None
        Generated image (only set while status is SUCCESS)
    error_message : str | None
        Last failure description (only set while status is ERROR)
    generation : int
        Ticket counter, advanced by every dispatch, upload and reset
    """

    status: SessionStatus = SessionStatus.IDLE
    input_image: InputImage | None = None
    instruction: str = ""
    result: EditResult | None = None
    error_message: str | None = None
    generation: int = 0

    @property
    def is_processing(self) -> bool:
        return self.status is SessionStatus.PROCESSING

    def has_image(self) -> bool:
        return self.input_image is not None

    def has_instruction(self) -> bool:
        return bool(self.instruction and self.instruction.strip())

    def __repr__(self) -> str:
        """String representation for debugging."""
        image_name = self.input_image.name if self.input_image else None
        return (
            f"SessionState(status={self.status.value}, "
            f"image={image_name}, "
            f"generation={self.generation})"
        )


@dataclass(frozen=True)
class PendingEdit:
    """An edit that has been dispatched but not yet settled.

    The ticket is the session's generation counter at dispatch time; an
    outcome is only committed while the ticket still matches.
    """

    ticket: int
    request: EditRequest


@dataclass(frozen=True)
class QuickPrompt:
    """A preset instruction offered as a one-click shortcut."""

    id: str
    label: str
    icon: str
    text: str


QUICK_PROMPTS = [
    QuickPrompt(
        id="restore",
        label="Restore Photo",
        icon="🕰️",
        text=(
            "Restore this old photo, fixing scratches, tears, and fading. "
            "Make it look new and high quality."
        ),
    ),
    QuickPrompt(
        id="fix",
        label="Enhance Quality",
        icon="✨",
        text=(
            "Enhance the quality of this image, sharpening details, "
            "correcting lighting, and removing noise."
        ),
    ),
    QuickPrompt(
        id="younger",
        label="Make Younger",
        icon="🧒",
        text=(
            "Make the person in this photo look significantly younger, "
            "keeping their identity recognizable."
        ),
    ),
    QuickPrompt(
        id="older",
        label="Make Older",
        icon="🧓",
        text="Make the person in this photo look significantly older, with realistic aging effects.",
    ),
    QuickPrompt(
        id="colorize",
        label="Colorize",
        icon="🎨",
        text="Colorize this black and white photo with realistic and vibrant colors.",
    ),
    QuickPrompt(
        id="background",
        label="Remove BG",
        icon="🧽",
        text="Remove the background of this image and replace it with a solid color or soft blur.",
    ),
]

# UI Constants
GENERIC_ERROR_MESSAGE = "Failed to generate image. Please try again."
PROCESSING_MESSAGE = "⏳ **Banana magic in progress...**"
