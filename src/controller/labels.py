"""Label list, search and creation event handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from textual.css.query import NoMatches
from textual.widgets import Button, Input, ListView, Static

from ui.helpers import empty_list_message
from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from controller.sync import LabelSyncController

log = logging.getLogger(__name__)


class LabelEventsMixin:
    """Mixin for label list, search and creation handlers."""

    # Expected from App class
    controller: LabelSyncController
    query: Callable
    query_one: Callable
    push_screen: Callable
    run_worker: Callable
    _collapse_sidebar_if_narrow: Callable

    def on_search_changed(self, event: Input.Changed) -> None:
        """Re-render the list for the new query."""
        self._refresh_label_list(event.value)

    def on_label_selected(self, event: ListView.Selected) -> None:
        """Open the clicked label."""
        from ui import LabelItem

        if isinstance(event.item, LabelItem):
            self._select_label(event.item.label_name)

    def on_new_label_pressed(self, event: Button.Pressed) -> None:
        """Ask for a new label name."""
        self.action_new_label()

    def action_new_label(self) -> None:
        from ui import NewLabelModal

        self.push_screen(NewLabelModal(), self._on_new_label_result)

    def _on_new_label_result(self, name: str | None) -> None:
        """Handle result from the new label modal."""
        if not name:
            return  # Cancelled
        self.run_worker(self._create_label(name), group="sync")

    async def _create_label(self, name: str) -> None:
        if await self.controller.create_label(name):
            self._collapse_sidebar_if_narrow()

    def _select_label(self, name: str) -> None:
        self.run_worker(self._select_and_collapse(name), group="sync")

    async def _select_and_collapse(self, name: str) -> None:
        if await self.controller.select_label(name):
            self._collapse_sidebar_if_narrow()

    def _refresh_label_list(self, query: str | None = None) -> None:
        """Schedule a re-render; a newer render replaces one still running."""
        if query is None:
            try:
                query = self.query_one(css(ids.SEARCH_INPUT), Input).value
            except NoMatches:
                query = ""
        self.run_worker(self._render_label_list(query), group="render", exclusive=True)

    async def _render_label_list(self, query: str) -> None:
        """Rebuild the label list for query."""
        from ui import LabelItem

        names = self.controller.filter_labels(query)
        try:
            list_view = self.query_one(css(ids.LABEL_LIST), ListView)
            empty = self.query_one(css(ids.LABEL_LIST_EMPTY), Static)
        except NoMatches:
            log.debug("Label list not found")
            return

        active = self.controller.active_label
        await list_view.clear()
        await list_view.extend(LabelItem(name, active=name == active) for name in names)
        if names:
            empty.add_class("hidden")
        else:
            empty.update(empty_list_message(query))
            empty.remove_class("hidden")

    def _highlight_active_label(self, active: str | None) -> None:
        from ui import LabelItem

        for item in self.query(LabelItem):
            item.set_class(item.label_name == active, "active")
