"""UI event handlers organized by feature area.

This package provides handlers for all Gradio UI events:
- editing: Upload, instruction, quick prompts, generate, discard and reset
- download: Saving results for download
"""

from .download import download_result_handler
from .editing import (
    apply_quick_prompt,
    discard_result_handler,
    generate_edit_handler,
    get_edit_client,
    render_controls,
    render_session,
    reset_handler,
    set_edit_client,
    update_instruction_handler,
    upload_image_handler,
)

__all__ = [
    # Editing handlers
    "apply_quick_prompt",
    "discard_result_handler",
    "generate_edit_handler",
    "reset_handler",
    "update_instruction_handler",
    "upload_image_handler",
    # Rendering
    "render_controls",
    "render_session",
    # Remote client access
    "get_edit_client",
    "set_edit_client",
    # Download handlers
    "download_result_handler",
]
