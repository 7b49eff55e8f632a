"""Session state controller for the editor UI.

This module owns the edit lifecycle of a session:

    IDLE ──begin_generation──▶ PROCESSING ──complete──▶ SUCCESS
      ▲                            │
      │                            └──────fail──────▶ ERROR
      └── select_image / reset_session / discard_result

Only one edit may be in flight per session. Every dispatch, upload and reset
advances ``state.generation``; an outcome is committed only while its ticket
still matches, so a late result from a request that was overtaken by a reset
or re-upload is discarded instead of overwriting newer state.

Gradio runs handlers in worker threads, so transitions that read and then
write the status are serialized with a module-level lock.
"""

import logging
import threading
from collections.abc import Callable

from nanobanana.core.config import config
from nanobanana.core.edit_request import EditRequest, build_request
from nanobanana.core.image_intake import InputImage
from nanobanana.core.remote_client import EditResult

from .models import GENERIC_ERROR_MESSAGE, PendingEdit, SessionState, SessionStatus
from .validation import ValidationError, validate_generation_ready

logger = logging.getLogger(__name__)

_transition_lock = threading.Lock()


def new_session_state() -> SessionState:
    """Create a fresh IDLE session."""
    return SessionState()


def _clear_outcome(state: SessionState) -> None:
    state.result = None
    state.error_message = None


def select_image(state: SessionState, image: InputImage) -> SessionState:
    """Install a newly uploaded image and return to IDLE.

    Always permitted. Any in-flight edit becomes stale.
    """
    with _transition_lock:
        state.generation += 1
        state.input_image = image
        _clear_outcome(state)
        state.status = SessionStatus.IDLE

    logger.info(f"Image selected: {image.name} ({image.mime_type})")
    return state


def reset_session(state: SessionState) -> SessionState:
    """Clear image, instruction, result and error and return to IDLE."""
    with _transition_lock:
        was_processing = state.is_processing
        state.generation += 1
        state.input_image = None
        state.instruction = ""
        _clear_outcome(state)
        state.status = SessionStatus.IDLE

    if was_processing:
        logger.info("Session reset while an edit was in flight; its result will be discarded")
    else:
        logger.info("Session reset")
    return state


def set_instruction(state: SessionState, instruction: str | None) -> SessionState:
    """Store the current instruction text."""
    state.instruction = instruction or ""
    return state


def discard_result(state: SessionState) -> SessionState:
    """Drop a successful result while keeping the uploaded image.

    Only acts in SUCCESS; other states are left unchanged.
    """
    with _transition_lock:
        if state.status is not SessionStatus.SUCCESS:
            logger.debug(f"Discard ignored in status {state.status.value}")
            return state
        state.result = None
        state.status = SessionStatus.IDLE

    logger.info("Result discarded")
    return state


def is_ready(state: SessionState) -> bool:
    """Check whether a generate request would be accepted right now."""
    try:
        validate_generation_ready(state, max_length=config.max_instruction_length)
    except ValidationError:
        return False
    return True


def begin_generation(state: SessionState, instruction: str | None = None) -> PendingEdit:
    """Move the session into PROCESSING and snapshot the request.

    Args:
        state: Session to dispatch from
        instruction: Instruction to send instead of the stored one. It is
            stored on the session only when the request is accepted.

    Returns:
        PendingEdit carrying the dispatch ticket and request

    Raises:
        ValidationError: If no image is loaded, the instruction is blank or
            too long, or an edit is already in progress. State is unchanged.
    """
    with _transition_lock:
        previous = state.instruction
        if instruction is not None:
            state.instruction = instruction
        try:
            validate_generation_ready(state, max_length=config.max_instruction_length)
        except ValidationError:
            state.instruction = previous
            raise

        request = build_request(state.input_image, state.instruction)
        state.generation += 1
        _clear_outcome(state)
        state.status = SessionStatus.PROCESSING
        pending = PendingEdit(ticket=state.generation, request=request)

    logger.info(f"Edit dispatched (ticket {pending.ticket})")
    return pending


def _is_current(state: SessionState, pending: PendingEdit) -> bool:
    return state.is_processing and state.generation == pending.ticket


def complete_generation(state: SessionState, pending: PendingEdit, result: EditResult) -> bool:
    """Commit a successful edit.

    Returns:
        True if committed, False if the edit was stale and discarded
    """
    with _transition_lock:
        if not _is_current(state, pending):
            logger.warning(f"Discarding stale result (ticket {pending.ticket})")
            return False
        state.result = result
        state.error_message = None
        state.status = SessionStatus.SUCCESS

    logger.info(f"Edit succeeded (ticket {pending.ticket})")
    return True


def fail_generation(state: SessionState, pending: PendingEdit, error: BaseException) -> bool:
    """Commit a failed edit.

    The error's own description is shown when it has one, otherwise a
    generic message.

    Returns:
        True if committed, False if the edit was stale and discarded
    """
    with _transition_lock:
        if not _is_current(state, pending):
            logger.warning(f"Discarding stale failure (ticket {pending.ticket}): {error}")
            return False
        state.result = None
        state.error_message = str(error) or GENERIC_ERROR_MESSAGE
        state.status = SessionStatus.ERROR

    logger.info(f"Edit failed (ticket {pending.ticket}): {state.error_message}")
    return True


def run_generation(
    state: SessionState,
    pending: PendingEdit,
    submit: Callable[[EditRequest], EditResult],
) -> bool:
    """Execute a dispatched edit and settle the session.

    Args:
        state: Session the edit was dispatched from
        pending: Ticket and request from begin_generation
        submit: Callable performing the remote round trip

    Returns:
        True if the outcome was committed, False if it was stale
    """
    try:
        result = submit(pending.request)
    except Exception as e:
        logger.error(f"Edit request failed: {e}", exc_info=True)
        return fail_generation(state, pending, e)

    return complete_generation(state, pending, result)
