"""Reusable UI components for the Nano Banana Gradio interface."""

import gradio as gr

from .models import QUICK_PROMPTS, QuickPrompt


class QuickPromptBar:
    """A grid of one-click preset instructions.

    Each button carries its prompt text in a hidden ``gr.State`` so a single
    handler can serve every button.
    """

    def __init__(self, prompts: list[QuickPrompt] | None = None, columns: int = 2):
        """Initialize the quick prompt grid.

        Args:
            prompts: Presets to show (default: QUICK_PROMPTS)
            columns: Buttons per row
        """
        self.prompts = prompts if prompts is not None else QUICK_PROMPTS
        self.buttons: list[tuple[gr.Button, gr.State]] = []

        gr.Markdown("**Quick Actions**")
        for start in range(0, len(self.prompts), columns):
            with gr.Row():
                for prompt in self.prompts[start : start + columns]:
                    button = gr.Button(f"{prompt.icon} {prompt.label}", size="sm")
                    text_state = gr.State(value=prompt.text)
                    self.buttons.append((button, text_state))

    def bind(self, fn, extra_inputs: list, outputs: list) -> None:
        """Attach a click handler to every button.

        The handler receives the prompt text first, followed by extra_inputs.
        """
        for button, text_state in self.buttons:
            button.click(fn=fn, inputs=[text_state, *extra_inputs], outputs=outputs)
