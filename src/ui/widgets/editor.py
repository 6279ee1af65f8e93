"""Editor widgets: the TextArea-backed buffer."""

from __future__ import annotations

import logging
from typing import Callable

from textual.widgets import TextArea

log = logging.getLogger(__name__)


class LabelEditor(TextArea):
    """Text editor for label content."""

    def __init__(self, **kwargs) -> None:
        super().__init__(
            soft_wrap=True,
            show_line_numbers=False,
            tab_behavior="indent",
            **kwargs,
        )
        self.indent_width = 2


class TextAreaBuffer:
    """Buffer adapter over a TextArea.

    TextArea reports edits asynchronously through TextArea.Changed messages;
    the app forwards those to handle_changed(). Messages produced by
    programmatic loads are swallowed, so only user edits reach the listener
    from there. Several loads may be queued before their messages arrive.
    set_content() itself notifies the listener synchronously.
    """

    def __init__(self, text_area: TextArea) -> None:
        self._text_area = text_area
        self._listener: Callable[[], None] | None = None
        self._pending_loads = 0
        self._loaded_text: str | None = None

    def on_change(self, callback: Callable[[], None]) -> None:
        self._listener = callback

    def _fire(self) -> None:
        if self._listener:
            self._listener()

    def set_content(self, text: str) -> None:
        self._pending_loads += 1
        self._loaded_text = text
        self._text_area.load_text(text)
        self._fire()

    def get_content(self) -> str:
        return self._text_area.text

    def clear_edit_history(self) -> None:
        self._text_area.history.clear()

    def set_syntax_hint(self, hint: str | None) -> None:
        if hint and hint in self._text_area.available_languages:
            self._text_area.language = hint
        else:
            log.debug(f"No highlighting available for '{hint}', using plain text")
            self._text_area.language = None

    def handle_changed(self) -> None:
        """Called for every TextArea.Changed message."""
        if self._pending_loads:
            self._pending_loads -= 1
            # Still showing the last loaded text, so not a user edit
            if self._text_area.text == self._loaded_text:
                return
        self._fire()
