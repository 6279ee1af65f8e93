"""Label list widgets: LabelItem."""

from textual.app import ComposeResult
from textual.widgets import Label, ListItem


class LabelItem(ListItem):
    """A row in the label list."""

    def __init__(self, name: str, active: bool = False) -> None:
        super().__init__(classes="label-item")
        self.label_name = name
        if active:
            self.add_class("active")

    def compose(self) -> ComposeResult:
        yield Label(self.label_name, classes="label-name", markup=False)
