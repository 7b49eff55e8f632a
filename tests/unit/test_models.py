"""Unit tests for UI data models."""

from nanobanana.ui.models import (
    QUICK_PROMPTS,
    SessionState,
    SessionStatus,
)


class TestSessionState:
    """Tests for SessionState dataclass."""

    def test_default_values(self):
        state = SessionState()

        assert state.status is SessionStatus.IDLE
        assert state.input_image is None
        assert state.instruction == ""
        assert state.result is None
        assert state.error_message is None
        assert state.generation == 0

    def test_has_instruction_ignores_whitespace(self):
        assert SessionState(instruction="  ").has_instruction() is False
        assert SessionState(instruction="Colorize").has_instruction() is True

    def test_has_image(self, input_image):
        assert SessionState().has_image() is False
        assert SessionState(input_image=input_image).has_image() is True

    def test_is_processing(self):
        assert SessionState(status=SessionStatus.PROCESSING).is_processing is True
        assert SessionState().is_processing is False

    def test_repr(self, input_image):
        text = repr(SessionState(input_image=input_image))
        assert "status=idle" in text
        assert "photo.jpg" in text


class TestSessionStatus:
    """Tests for SessionStatus enum."""

    def test_values(self):
        assert [s.value for s in SessionStatus] == ["idle", "processing", "success", "error"]


class TestQuickPrompts:
    """Tests for the quick prompt presets."""

    def test_six_presets(self):
        assert len(QUICK_PROMPTS) == 6

    def test_ids_unique(self):
        ids = [prompt.id for prompt in QUICK_PROMPTS]
        assert len(ids) == len(set(ids))

    def test_all_have_text(self):
        assert all(prompt.text.strip() for prompt in QUICK_PROMPTS)

    def test_colorize_present(self):
        labels = {prompt.label for prompt in QUICK_PROMPTS}
        assert "Colorize" in labels
        assert "Restore Photo" in labels
