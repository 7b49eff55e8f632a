"""Editing workflow handlers: upload, instruction, generate, discard and reset."""

import io
import logging
import threading

import gradio as gr
from PIL import Image, UnidentifiedImageError

from nanobanana.core.config import config
from nanobanana.core.edit_request import EditRequest
from nanobanana.core.encoding import decode_data_url
from nanobanana.core.image_intake import ImageReadError, load_image
from nanobanana.core.remote_client import EditResult, RemoteEditClient, create_remote_client

from ..models import PROCESSING_MESSAGE, SessionState, SessionStatus
from ..state import (
    begin_generation,
    discard_result,
    is_ready,
    reset_session,
    run_generation,
    select_image,
    set_instruction,
)
from ..validation import ValidationError

logger = logging.getLogger(__name__)

# Process-wide remote client, created on the first edit request
_edit_client: RemoteEditClient | None = None
_client_lock = threading.Lock()


def get_edit_client() -> RemoteEditClient:
    """Return the shared remote client, creating it on first use.

    Raises:
        MissingCredentialError: If no API key is configured
    """
    global _edit_client
    with _client_lock:
        if _edit_client is None:
            _edit_client = create_remote_client(config)
        return _edit_client


def set_edit_client(client: RemoteEditClient | None) -> None:
    """Replace the shared remote client (None forces re-creation)."""
    global _edit_client
    with _client_lock:
        _edit_client = client


def submit_edit(request: EditRequest) -> EditResult:
    """Send an edit through the shared remote client."""
    return get_edit_client().submit_edit(request)


# ============================================================================
# Rendering
# ============================================================================


def _preview_to_pil(data_url: str) -> Image.Image | None:
    try:
        data, _ = decode_data_url(data_url)
        image = Image.open(io.BytesIO(data))
        image.load()
        return image
    except (ValueError, UnidentifiedImageError, OSError) as e:
        logger.warning(f"Could not decode uploaded image for preview: {e}")
        return None


def preview_image(state: SessionState) -> Image.Image | None:
    """Pick what the preview pane shows: the result if any, else the original."""
    if state.result is not None:
        try:
            return state.result.to_pil()
        except (ValueError, UnidentifiedImageError, OSError) as e:
            logger.warning(f"Could not decode edit result for preview: {e}")
            return None
    if state.input_image is not None:
        return _preview_to_pil(state.input_image.preview)
    return None


def status_message(state: SessionState) -> str:
    """Markdown status line for the current session."""
    if state.status is SessionStatus.PROCESSING:
        return PROCESSING_MESSAGE
    if state.status is SessionStatus.SUCCESS:
        return "✅ **Edit complete!** Download the result or keep editing."
    if state.status is SessionStatus.ERROR:
        return f"❌ **Error**\n\n{state.error_message}"
    if not state.has_image():
        return "*Upload an image to start editing*"
    if not state.has_instruction():
        return "*Describe how to change the image*"
    return "*Ready to generate*"


def render_controls(state: SessionState) -> tuple:
    """Build updates for the status line and action buttons.

    Returns:
        Tuple of (status_markdown, generate_button, discard_button, download_button)
    """
    has_result = state.result is not None
    return (
        status_message(state),
        gr.update(interactive=is_ready(state)),
        gr.update(visible=has_result),
        gr.update(visible=has_result),
    )


def render_session(state: SessionState) -> tuple:
    """Build updates for the preview, download file and controls.

    Returns:
        Tuple of (preview, download_file, status_markdown, generate_button,
        discard_button, download_button)
    """
    download_file = gr.update() if state.result is not None else gr.update(value=None, visible=False)
    return (preview_image(state), download_file, *render_controls(state))


# ============================================================================
# Event handlers
# ============================================================================


def upload_image_handler(image_path: str | None, state: SessionState) -> tuple:
    """Handle a newly uploaded image.

    A file that cannot be read leaves the session untouched.

    Args:
        image_path: Path of the uploaded file (Gradio filepath)
        state: Session state

    Returns:
        Tuple of (*render_session outputs, updated_state)
    """
    if not image_path:
        return (*render_session(state), state)

    try:
        image = load_image(image_path)
    except ImageReadError as e:
        logger.warning(f"Image upload failed: {e}")
        gr.Warning(f"Could not read the selected image: {e}")
        return (*render_session(state), state)

    state = select_image(state, image)
    return (*render_session(state), state)


def update_instruction_handler(instruction: str, state: SessionState) -> tuple:
    """Track instruction edits so the Generate button can follow readiness.

    Returns:
        Tuple of (*render_controls outputs, updated_state)
    """
    state = set_instruction(state, instruction)
    return (*render_controls(state), state)


def apply_quick_prompt(prompt_text: str, state: SessionState) -> tuple:
    """Replace the instruction with a preset prompt.

    Returns:
        Tuple of (instruction_text, *render_controls outputs, updated_state)
    """
    state = set_instruction(state, prompt_text)
    return (prompt_text, *render_controls(state), state)


def generate_edit_handler(instruction: str, state: SessionState):
    """Run one edit, yielding the PROCESSING view before the remote call.

    The instruction is stored on the session only if the request is accepted.

    Args:
        instruction: Current instruction text
        state: Session state

    Yields:
        Tuple of (*render_session outputs, updated_state)
    """
    try:
        pending = begin_generation(state, instruction or "")
    except ValidationError as e:
        logger.warning(f"Generate request rejected: {e}")
        gr.Warning(str(e))
        yield (*render_session(state), state)
        return

    yield (*render_session(state), state)

    committed = run_generation(state, pending, submit_edit)
    if not committed:
        logger.info(f"Edit ticket {pending.ticket} settled after the session moved on")

    yield (*render_session(state), state)


def discard_result_handler(state: SessionState) -> tuple:
    """Drop the generated image and show the original again."""
    state = discard_result(state)
    return (*render_session(state), state)


def reset_handler(state: SessionState) -> tuple:
    """Clear the whole session.

    Returns:
        Tuple of (input_image, instruction_text, *render_session outputs, updated_state)
    """
    state = reset_session(state)
    return (None, "", *render_session(state), state)
