"""Main TUI application for storeview."""

import logging
import os
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Button, Input, Label, ListView, Static, TextArea

from config import ViewerConfig
from constants import SAVED_STATUS_CLEAR_DELAY, STATUS_SAVED
from controller import EditorEventsMixin, LabelEventsMixin, LabelSyncController
from model import LabelDirectory, Mode, Session
from store import StoreClient
from ui import (
    ConfirmModal,
    LabelEditor,
    TextAreaBuffer,
    binary_info,
    compose_editor_pane,
    compose_sidebar,
    is_narrow,
)
from ui.ids import css
import ui.ids as ids

# Set up logging to XDG state directory
def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "storeview"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "storeview.log"

logging.basicConfig(
    filename=str(_get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()

MODE_DESCRIPTIONS = {
    Mode.EMPTY: "No label selected",
    Mode.LOADING: "Loading...",
    Mode.CLEAN: "All changes saved",
    Mode.DIRTY: "Unsaved changes",
    Mode.SAVING: "Saving...",
    Mode.SAVE_FAILED: "Save failed - edit or press ctrl+s to retry",
}


class StoreViewerApp(
    LabelEventsMixin,
    EditorEventsMixin,
    App,
):
    """TUI for browsing and editing labels in a content store."""

    TITLE = "Store Viewer"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", show=True, priority=True),
        Binding("ctrl+b", "toggle_sidebar", "Sidebar", show=True, priority=True),
        Binding("ctrl+n", "new_label", "New Label", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        store: StoreClient,
        config: ViewerConfig | None = None,
        initial_label: str | None = None,
        version: str = "0.0",
    ) -> None:
        super().__init__()
        self.store = store
        self.viewer_config = config or ViewerConfig()
        self.initial_label = initial_label
        self.version = version
        self.controller: LabelSyncController | None = None
        self._buffer: TextAreaBuffer | None = None
        self._save_status = ""

    def compose(self) -> ComposeResult:
        with Horizontal(id=ids.MAIN_CONTENT):
            yield from compose_sidebar()
            yield from compose_editor_pane()
        yield Static("", id=ids.STATUS_BAR)

    # =========================================================================
    # Decisions (awaited by the controller, must run inside a worker)
    # =========================================================================

    async def confirm_save_before_switch(self, label: str) -> bool:
        return await self.push_screen_wait(
            ConfirmModal(
                "Unsaved Changes",
                f'You have unsaved changes in "{label}". Save before switching?',
                yes_label="Save",
                no_label="Discard",
            )
        )

    async def confirm_open_existing(self, label: str) -> bool:
        return await self.push_screen_wait(
            ConfirmModal(
                "Label Exists",
                f'Label "{label}" already exists. Do you want to open it instead?',
                yes_label="Open",
                no_label="Cancel",
            )
        )

    # =========================================================================
    # Status and session display
    # =========================================================================

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            pass

    def _set_save_status(self, message: str) -> None:
        """Show save progress next to the save button."""
        self._save_status = message
        try:
            self.query_one(css(ids.SAVE_STATUS), Static).update(message)
        except NoMatches:
            return
        if message == STATUS_SAVED:
            self.set_timer(SAVED_STATUS_CLEAR_DELAY, self._clear_saved_status)

    def _clear_saved_status(self) -> None:
        if self._save_status == STATUS_SAVED:
            self._set_save_status("")

    def _show_error(self, message: str) -> None:
        """Surface a failure to the user."""
        self.notify(message, title="Error", severity="error")

    def _on_session_changed(self, session: Session) -> None:
        """Reflect the controller's session in the editor pane."""
        try:
            empty_state = self.query_one(css(ids.EMPTY_STATE), Static)
            editor = self.query_one(css(ids.EDITOR), LabelEditor)
            binary_view = self.query_one(css(ids.BINARY_VIEW))
            label_name = self.query_one(css(ids.LABEL_NAME), Label)
            save_btn = self.query_one(css(ids.SAVE_BTN), Button)
        except NoMatches:
            log.debug("Editor pane not mounted")
            return

        has_label = session.active_label is not None
        empty_state.set_class(has_label, "hidden")
        editor.set_class(not (has_label and session.is_text), "hidden")
        binary_view.set_class(not has_label or session.is_text, "hidden")
        editor.read_only = not session.writable

        if session.mode is Mode.LOADING:
            empty_state.update("Loading...")
        elif not has_label:
            empty_state.update("Select a label from the sidebar, or create a new one.")

        if has_label and not session.is_text and session.content is not None:
            self.query_one(css(ids.BINARY_INFO), Static).update(
                binary_info(session.content.size_bytes)
            )

        label_name.update(session.active_label or "")
        save_btn.disabled = not (session.writable and session.dirty)
        save_btn.label = "Save *" if session.dirty else "Save"

        self._highlight_active_label(session.active_label)
        description = MODE_DESCRIPTIONS[session.mode]
        if has_label:
            self._set_status(f"{session.active_label} | {description}")
        else:
            self._set_status(description)

    def _collapse_sidebar_if_narrow(self) -> None:
        if is_narrow(self.size.width):
            self._collapse_sidebar()

    # =========================================================================
    # Mixin Handler Forwarding
    # =========================================================================
    # Textual's @on decorator only registers handlers defined on the class itself,
    # not on mixins. These forwarding handlers ensure events are routed to mixins.

    # Label handlers (from LabelEventsMixin)
    @on(Input.Changed, css(ids.SEARCH_INPUT))
    def _on_search_input_changed(self, event: Input.Changed) -> None:
        """Forward to mixin handler."""
        self.on_search_changed(event)

    @on(ListView.Selected, css(ids.LABEL_LIST))
    def _on_label_list_selected(self, event: ListView.Selected) -> None:
        """Forward to mixin handler."""
        self.on_label_selected(event)

    @on(Button.Pressed, css(ids.NEW_LABEL_BTN))
    def _on_new_label_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_new_label_pressed(event)

    # Editor handlers (from EditorEventsMixin)
    @on(TextArea.Changed, css(ids.EDITOR))
    def _on_editor_text_changed(self, event: TextArea.Changed) -> None:
        """Forward to mixin handler."""
        self.on_editor_changed(event)

    @on(Button.Pressed, css(ids.SAVE_BTN))
    def _on_save_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_save_pressed(event)

    @on(Button.Pressed, css(ids.SIDEBAR_TOGGLE))
    def _on_sidebar_toggle_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_sidebar_toggle_pressed(event)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        """Called when the app is mounted."""
        editor = self.query_one(css(ids.EDITOR), LabelEditor)
        self._buffer = TextAreaBuffer(editor)
        self.controller = LabelSyncController(
            self.store,
            LabelDirectory(self.store),
            self._buffer,
            self,
            autosave_delay=self.viewer_config.autosave_delay,
            on_session_changed=self._on_session_changed,
            on_directory_changed=self._refresh_label_list,
            on_status=self._set_save_status,
            on_error=self._show_error,
        )
        self._on_session_changed(self.controller.session)
        self._collapse_sidebar_if_narrow()
        self.query_one(css(ids.SEARCH_INPUT), Input).focus()
        self.run_worker(self._startup(), group="sync")

    async def _startup(self) -> None:
        """Populate the directory, then open the requested label if any."""
        log.info(f"Starting store viewer {self.version} against {self.viewer_config.base_url}")
        if not await self.controller.load_directory():
            try:
                self.query_one(css(ids.LABEL_LIST_EMPTY), Static).update("Failed to load labels")
            except NoMatches:
                pass
        if self.initial_label:
            await self._select_and_collapse(self.initial_label)

    async def on_unmount(self) -> None:
        """Stop background work and release the store connection."""
        if self.controller is not None:
            await self.controller.close()
        await self.store.aclose()
