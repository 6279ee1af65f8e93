"""Editor, save and layout event handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from textual.css.query import NoMatches
from textual.widgets import Button, TextArea

from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from controller.sync import LabelSyncController
    from ui.widgets import TextAreaBuffer

log = logging.getLogger(__name__)


class EditorEventsMixin:
    """Mixin for editor, save and sidebar handlers."""

    # Expected from App class
    controller: LabelSyncController
    _buffer: TextAreaBuffer | None
    query_one: Callable
    run_worker: Callable

    def on_editor_changed(self, event: TextArea.Changed) -> None:
        """Route editor changes into the buffer listener."""
        if self._buffer is not None:
            self._buffer.handle_changed()

    def on_save_pressed(self, event: Button.Pressed) -> None:
        """Save the active label."""
        self.action_save()

    def action_save(self) -> None:
        """Save now, if there is anything to save."""
        if self.controller is None or not self.controller.can_save:
            return
        self.run_worker(self.controller.save(), group="sync")

    def on_sidebar_toggle_pressed(self, event: Button.Pressed) -> None:
        """Show or hide the sidebar."""
        self.action_toggle_sidebar()

    def action_toggle_sidebar(self) -> None:
        try:
            self.query_one(css(ids.SIDEBAR)).toggle_class("collapsed")
        except NoMatches:
            log.debug("Sidebar not found")

    def _collapse_sidebar(self) -> None:
        try:
            self.query_one(css(ids.SIDEBAR)).add_class("collapsed")
        except NoMatches:
            log.debug("Sidebar not found")
