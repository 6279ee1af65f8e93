"""Sidebar and editor pane composition."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label, ListView, Static

import ui.ids as ids
from ui.widgets import LabelEditor


def compose_sidebar() -> ComposeResult:
    """Compose the sidebar: title, new-label button, search box and label list.

    Yields:
        Textual widgets for the sidebar
    """
    with Vertical(id=ids.SIDEBAR):
        with Horizontal(id=ids.SIDEBAR_HEADER):
            yield Label("Labels", id=ids.SIDEBAR_TITLE)
            yield Button("+ New", id=ids.NEW_LABEL_BTN, variant="primary")
        yield Input(placeholder="Search labels...", id=ids.SEARCH_INPUT)
        yield ListView(id=ids.LABEL_LIST)
        yield Static("Loading labels...", id=ids.LABEL_LIST_EMPTY, classes="empty-message")


def compose_editor_pane() -> ComposeResult:
    """Compose the editor pane.

    Only one of the empty state, the editor and the binary view is visible at
    a time; the app toggles the "hidden" class as the session changes.

    Yields:
        Textual widgets for the editor pane
    """
    with Vertical(id=ids.EDITOR_PANE):
        with Horizontal(id=ids.EDITOR_HEADER):
            yield Button("☰", id=ids.SIDEBAR_TOGGLE)
            yield Label("", id=ids.LABEL_NAME, markup=False)
            yield Static("", id=ids.SAVE_STATUS)
            yield Button("Save", id=ids.SAVE_BTN, variant="success", disabled=True)
        yield Static(
            "Select a label from the sidebar, or create a new one.",
            id=ids.EMPTY_STATE,
        )
        yield LabelEditor(id=ids.EDITOR, classes="hidden")
        with Vertical(id=ids.BINARY_VIEW, classes="hidden"):
            yield Label("Binary content cannot be edited", classes="section-label")
            yield Static("", id=ids.BINARY_INFO)
