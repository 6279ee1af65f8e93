"""Custom Textual widgets for storeview.

This package contains all custom widgets organized by domain.
"""

from ui.widgets.labels import LabelItem
from ui.widgets.editor import LabelEditor, TextAreaBuffer

__all__ = [
    # Label list widgets
    "LabelItem",
    # Editor widgets
    "LabelEditor",
    "TextAreaBuffer",
]
