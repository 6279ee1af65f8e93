"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"

# Container IDs
MAIN_CONTENT = "main-content"
STATUS_BAR = "status-bar"

# Sidebar IDs
SIDEBAR = "sidebar"
SIDEBAR_HEADER = "sidebar-header"
SIDEBAR_TITLE = "sidebar-title"
NEW_LABEL_BTN = "new-label-btn"
SEARCH_INPUT = "search-input"
LABEL_LIST = "label-list"
LABEL_LIST_EMPTY = "label-list-empty"

# Editor pane IDs
EDITOR_PANE = "editor-pane"
EDITOR_HEADER = "editor-header"
SIDEBAR_TOGGLE = "sidebar-toggle"
LABEL_NAME = "label-name"
SAVE_STATUS = "save-status"
SAVE_BTN = "save-btn"
EMPTY_STATE = "empty-state"
EDITOR = "editor"
BINARY_VIEW = "binary-view"
BINARY_INFO = "binary-info"

# Modal IDs
MODAL_TITLE = "modal-title"
MODAL_MESSAGE = "modal-message"
MODAL_BUTTONS = "modal-buttons"
CONFIRM_MODAL = "confirm-modal"
NEW_LABEL_MODAL = "new-label-modal"
NEW_LABEL_INPUT = "new-label-input"
YES_BTN = "yes-btn"
NO_BTN = "no-btn"
CANCEL_BTN = "cancel-btn"
CREATE_BTN = "create-btn"
