"""Gradio user interface for the Nano Banana photo editor."""
