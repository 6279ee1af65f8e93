"""Tests for TextAreaBuffer, the adapter between TextArea and the controller."""

from ui import TextAreaBuffer


class StubHistory:
    def __init__(self):
        self.cleared = 0

    def clear(self):
        self.cleared += 1


class StubTextArea:
    """Just the TextArea surface the adapter touches."""

    def __init__(self):
        self.text = ""
        self.language = None
        self.available_languages = {"python", "markdown"}
        self.history = StubHistory()

    def load_text(self, text):
        self.text = text


class CountingListener:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def make_buffer():
    text_area = StubTextArea()
    buffer = TextAreaBuffer(text_area)
    listener = CountingListener()
    buffer.on_change(listener)
    return buffer, text_area, listener


class TestLoadMessages:
    """Test that Changed messages from loads are not reported as edits."""

    def test_single_load_message_swallowed(self):
        buffer, _, listener = make_buffer()
        buffer.set_content("x")
        assert listener.calls == 1
        buffer.handle_changed()
        assert listener.calls == 1

    def test_two_queued_loads_both_swallowed(self):
        """Two loads before either message is handled produce no edit."""
        buffer, _, listener = make_buffer()
        buffer.set_content("first")
        buffer.set_content("second")
        assert listener.calls == 2
        buffer.handle_changed()
        buffer.handle_changed()
        assert listener.calls == 2

    def test_user_edit_after_load_reported(self):
        buffer, text_area, listener = make_buffer()
        buffer.set_content("x")
        buffer.handle_changed()
        text_area.text = "xy"
        buffer.handle_changed()
        assert listener.calls == 2

    def test_user_edit_before_load_message_reported(self):
        """A load that never posts a message does not hide a later edit."""
        buffer, text_area, listener = make_buffer()
        buffer.set_content("x")
        text_area.text = "xy"
        buffer.handle_changed()
        assert listener.calls == 2
        text_area.text = "xyz"
        buffer.handle_changed()
        assert listener.calls == 3


class TestBufferOperations:
    """Test the remaining Buffer operations."""

    def test_get_content_reads_text_area(self):
        buffer, text_area, _ = make_buffer()
        text_area.text = "typed"
        assert buffer.get_content() == "typed"

    def test_clear_edit_history(self):
        buffer, text_area, _ = make_buffer()
        buffer.clear_edit_history()
        assert text_area.history.cleared == 1

    def test_supported_syntax_hint(self):
        buffer, text_area, _ = make_buffer()
        buffer.set_syntax_hint("markdown")
        assert text_area.language == "markdown"

    def test_unsupported_syntax_hint_falls_back_to_plain(self):
        buffer, text_area, _ = make_buffer()
        text_area.language = "python"
        buffer.set_syntax_hint("javascript")
        assert text_area.language is None
