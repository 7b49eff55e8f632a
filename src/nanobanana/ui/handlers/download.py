"""Download handler for edit results."""

import logging

import gradio as gr

from nanobanana.core.config import config
from nanobanana.core.export import prune_downloads, save_result

from ..models import SessionState
from ..validation import sanitize_filename_input

logger = logging.getLogger(__name__)


def download_result_handler(state: SessionState) -> gr.update:
    """Write the current result to disk and offer it as a file.

    Expired downloads from earlier requests are removed first.

    Args:
        state: Session state

    Returns:
        Update for the download file component
    """
    if state.result is None:
        gr.Warning("There is no generated image to download yet.")
        return gr.update(value=None, visible=False)

    try:
        prune_downloads(config.outputs_dir, config.download_max_age_seconds)
        prefix = sanitize_filename_input(config.download_prefix)
        save_path = save_result(state.result, config.outputs_dir, prefix)
    except OSError as e:
        logger.error(f"Failed to save result for download: {e}", exc_info=True)
        gr.Warning(f"Could not save the image: {e}")
        return gr.update(value=None, visible=False)

    return gr.update(value=str(save_path), visible=True)
