"""Modal dialogs for label decisions and creation."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

import ui.ids as ids
from ui.ids import css


class ConfirmModal(ModalScreen[bool]):
    """Yes/no question. Escape answers no."""

    BINDINGS = [("escape", "cancel", "Cancel"), ("y", "yes", "Yes"), ("n", "no", "No")]

    def __init__(self, title: str, message: str, yes_label: str = "Yes", no_label: str = "No") -> None:
        super().__init__()
        self._title = title
        self._message = message
        self._yes_label = yes_label
        self._no_label = no_label

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.CONFIRM_MODAL):
            yield Label(self._title, id=ids.MODAL_TITLE)
            yield Static(self._message, id=ids.MODAL_MESSAGE, markup=False)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button(self._no_label, id=ids.NO_BTN, variant="default")
                yield Button(self._yes_label, id=ids.YES_BTN, variant="primary")

    def on_mount(self) -> None:
        self.query_one(css(ids.YES_BTN), Button).focus()

    def action_yes(self) -> None:
        self.dismiss(True)

    def action_no(self) -> None:
        self.dismiss(False)

    def action_cancel(self) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.YES_BTN))
    def on_yes(self, event: Button.Pressed) -> None:
        self.dismiss(True)

    @on(Button.Pressed, css(ids.NO_BTN))
    def on_no(self, event: Button.Pressed) -> None:
        self.dismiss(False)


class NewLabelModal(ModalScreen[str | None]):
    """Modal asking for the name of a new label."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.NEW_LABEL_MODAL):
            yield Label("New Label", id=ids.MODAL_TITLE)
            yield Input(placeholder="Label name...", id=ids.NEW_LABEL_INPUT)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Cancel", id=ids.CANCEL_BTN, variant="default")
                yield Button("Create", id=ids.CREATE_BTN, variant="success")

    def on_mount(self) -> None:
        self.query_one(css(ids.NEW_LABEL_INPUT), Input).focus()

    def action_cancel(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.CREATE_BTN))
    def on_create(self, event: Button.Pressed) -> None:
        # Blank names are passed through so the controller can report them
        self.dismiss(self.query_one(css(ids.NEW_LABEL_INPUT), Input).value)

    @on(Input.Submitted, css(ids.NEW_LABEL_INPUT))
    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value)
