"""Gradio UI for the Nano Banana photo editor."""

import logging

import gradio as gr

from nanobanana.core.config import config

from .components import QuickPromptBar
from .handlers import (
    apply_quick_prompt,
    discard_result_handler,
    download_result_handler,
    generate_edit_handler,
    reset_handler,
    update_instruction_handler,
    upload_image_handler,
)
from .state import new_session_state

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> tuple[gr.Blocks, str]:
    """Create the Gradio UI.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    custom_css = """
    .error-box {
        border: 1px solid #7f1d1d;
        border-radius: 6px;
        padding: 8px;
    }
    """

    app = gr.Blocks(title="Nano Banana Photo Editor")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(new_session_state())

        gr.Markdown(
            f"""
            # Nano Banana Photo Editor
            ### Transform your photos with natural language
            *Powered by `{config.model_name}`*
            """
        )

        create_editor(ui_state)

    return app, custom_css


def create_editor(ui_state):
    """Create the editor controls and preview pane.

    Args:
        ui_state: UI state component
    """
    with gr.Row():
        # Left panel: controls
        with gr.Column(scale=1):
            gr.Markdown("### Editor Controls")

            input_image = gr.Image(
                label="Original Image",
                type="filepath",
                sources=["upload", "clipboard"],
                height=250,
            )

            instruction_input = gr.Textbox(
                label="Instructions",
                placeholder="Describe how to change the image (e.g., 'Add a neon glow', 'Remove the dog')",
                lines=4,
            )

            quick_prompts = QuickPromptBar()

            generate_btn = gr.Button("Generate Image", variant="primary", interactive=False)
            reset_btn = gr.Button("Change Image", variant="secondary")

            status_output = gr.Markdown(value="*Upload an image to start editing*")

        # Right panel: preview
        with gr.Column(scale=2):
            gr.Markdown("### Preview")

            preview_output = gr.Image(
                label="Preview",
                type="pil",
                interactive=False,
                height=500,
            )

            with gr.Row():
                download_btn = gr.Button("⬇ Download", visible=False)
                discard_btn = gr.Button("✕ Discard Result", visible=False)

            download_file = gr.File(label="Download", visible=False, interactive=False)

    control_outputs = [status_output, generate_btn, discard_btn, download_btn]
    session_outputs = [preview_output, download_file, *control_outputs]

    input_image.upload(
        fn=upload_image_handler,
        inputs=[input_image, ui_state],
        outputs=[*session_outputs, ui_state],
    )

    input_image.clear(
        fn=reset_handler,
        inputs=[ui_state],
        outputs=[input_image, instruction_input, *session_outputs, ui_state],
    )

    instruction_input.change(
        fn=update_instruction_handler,
        inputs=[instruction_input, ui_state],
        outputs=[*control_outputs, ui_state],
    )

    quick_prompts.bind(
        fn=apply_quick_prompt,
        extra_inputs=[ui_state],
        outputs=[instruction_input, *control_outputs, ui_state],
    )

    generate_btn.click(
        fn=generate_edit_handler,
        inputs=[instruction_input, ui_state],
        outputs=[*session_outputs, ui_state],
        concurrency_limit=None,
    )

    reset_btn.click(
        fn=reset_handler,
        inputs=[ui_state],
        outputs=[input_image, instruction_input, *session_outputs, ui_state],
    )

    discard_btn.click(
        fn=discard_result_handler,
        inputs=[ui_state],
        outputs=[*session_outputs, ui_state],
    )

    download_btn.click(
        fn=download_result_handler,
        inputs=[ui_state],
        outputs=[download_file],
    )


def main():
    """Main entry point for the application."""
    logger.info("Starting Nano Banana Photo Editor...")
    logger.info(f"Configuration: {config.model_dump(exclude={'api_key'})}")

    if not config.has_api_key():
        logger.warning("No API key configured; edit requests will fail until one is set")

    app, custom_css = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.queue().launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
    )


if __name__ == "__main__":
    main()
