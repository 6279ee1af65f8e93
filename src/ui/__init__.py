"""UI module containing widgets, styles, modals and pane compositions."""

from ui.widgets import LabelEditor, LabelItem, TextAreaBuffer
from ui.panes import compose_editor_pane, compose_sidebar
from ui.helpers import binary_info, empty_list_message, format_bytes, is_narrow
from ui.modals import ConfirmModal, NewLabelModal
from ui import ids

__all__ = [
    # Widgets
    "LabelEditor",
    "LabelItem",
    "TextAreaBuffer",
    # Modals
    "ConfirmModal",
    "NewLabelModal",
    # Pane composers
    "compose_editor_pane",
    "compose_sidebar",
    # Helpers
    "binary_info",
    "empty_list_message",
    "format_bytes",
    "is_narrow",
]
