"""LabelSyncController: loading, editing, autosave and switching of labels."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Callable

from constants import AUTOSAVE_DELAY, STATUS_SAVE_FAILED, STATUS_SAVED, STATUS_SAVING
from controller.validators import validate_label_name
from model import LabelContent, Mode, Session
from store import AlreadyExists, StoreError
from syntax import syntax_hint_for

if TYPE_CHECKING:
    from controller.buffer import Buffer
    from controller.decisions import Decisions
    from model import LabelDirectory
    from store import StoreClient

log = logging.getLogger(__name__)


class LabelSyncController:
    """Owns the editing session and keeps the buffer in sync with the store.

    State machine (Session.mode):

        EMPTY --select--> LOADING --fetch ok--> CLEAN --edit--> DIRTY
        LOADING --fetch failed--> EMPTY
        DIRTY --edit--> DIRTY (autosave timer restarted)
        DIRTY --timer / save()--> SAVING --write ok--> CLEAN
        SAVING --write failed--> SAVE_FAILED --edit / save()--> DIRTY / SAVING

    Selecting a label while there are unsaved edits first asks
    Decisions.confirm_save_before_switch(); an accepted save completes before
    the next fetch starts. If that save fails the switch is abandoned so the
    edits stay in the buffer.

    Every operation that changes the mode, the active label or the buffer
    content runs under a single asyncio.Lock, so fetches and writes never
    race. The autosave timer is a single loop.call_later() handle: arming it
    cancels the previous one, and it is cancelled whenever a save or a load
    begins. An autosave only ever writes the label it was armed for.

    Callbacks:
        on_session_changed: Called with the Session after every transition
        on_directory_changed: Called after the label set was reloaded or grew
        on_status: Called with save progress text (Saving.../Saved/Save failed)
        on_error: Called with a user-facing message for every failure
    """

    def __init__(
        self,
        store: StoreClient,
        directory: LabelDirectory,
        buffer: Buffer,
        decisions: Decisions,
        *,
        autosave_delay: float = AUTOSAVE_DELAY,
        on_session_changed: Callable[[Session], None] | None = None,
        on_directory_changed: Callable[[], None] | None = None,
        on_status: Callable[[str], None] | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        self.store = store
        self.directory = directory
        self.buffer = buffer
        self.decisions = decisions
        self.autosave_delay = autosave_delay
        self.session = Session()
        self._on_session_changed = on_session_changed
        self._on_directory_changed = on_directory_changed
        self._on_status = on_status
        self._on_error = on_error
        self._lock = asyncio.Lock()
        self._autosave_handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()
        self._applying_content = False
        self._edit_generation = 0
        buffer.on_change(self._on_buffer_changed)

    # =========================================================================
    # Session accessors
    # =========================================================================

    @property
    def active_label(self) -> str | None:
        return self.session.active_label

    @property
    def mode(self) -> Mode:
        return self.session.mode

    @property
    def dirty(self) -> bool:
        return self.session.dirty

    @property
    def can_save(self) -> bool:
        """True when an explicit save would write something."""
        return self.session.writable and self.session.dirty

    @property
    def autosave_pending(self) -> bool:
        return self._autosave_handle is not None

    @property
    def busy(self) -> bool:
        """True while a load or save holds the session."""
        return self._lock.locked()

    # =========================================================================
    # Notifications
    # =========================================================================

    def _notify(self) -> None:
        if self._on_session_changed:
            self._on_session_changed(self.session)

    def _status(self, message: str) -> None:
        if self._on_status:
            self._on_status(message)

    def _report_error(self, message: str, error: Exception | None = None) -> None:
        if error is not None:
            log.error(f"{message}: {error}")
        else:
            log.error(message)
        if self._on_error:
            self._on_error(message)

    # =========================================================================
    # Directory
    # =========================================================================

    async def load_directory(self) -> bool:
        """Populate the directory from the store. Returns False on failure."""
        try:
            await self.directory.reload()
        except StoreError as e:
            self._report_error("Failed to load labels from the server.", e)
            return False
        if self._on_directory_changed:
            self._on_directory_changed()
        return True

    def filter_labels(self, query: str) -> list[str]:
        """Directory names matching query. Does not touch the session."""
        return self.directory.filtered(query)

    # =========================================================================
    # Selecting labels
    # =========================================================================

    async def select_label(self, name: str) -> bool:
        """Load name into the buffer, resolving unsaved edits first.

        Waits for any load or save already in flight. Returns True if the
        label is now active.
        """
        self._cancel_autosave()
        async with self._lock:
            return await self._select_locked(name)

    async def _select_locked(self, name: str) -> bool:
        session = self.session
        if session.dirty and session.writable:
            current = session.active_label
            if await self.decisions.confirm_save_before_switch(current):
                if not await self._save_locked():
                    log.warning(f"Not switching to {name}: saving {current} failed")
                    return False
            else:
                log.info(f"Discarding unsaved changes in {current}")

        self._cancel_autosave()
        self.session = Session(mode=Mode.LOADING)
        self._notify()

        log.info(f"Selecting label: {name}")
        try:
            content = await self.store.fetch_label(name)
        except StoreError as e:
            self.session = Session(mode=Mode.EMPTY)
            self._notify()
            self._report_error(f"Failed to load label: {name}", e)
            return False

        if content.is_text:
            self._apply_content(content.text)
            self.buffer.clear_edit_history()
            self.buffer.set_syntax_hint(syntax_hint_for(name))
            log.info(f"Loaded text content for: {name} ({content.size_bytes} bytes)")
        else:
            log.info(f"Loaded binary content for: {name} ({content.size_bytes} bytes)")

        self.session = Session(active_label=name, mode=Mode.CLEAN, content=content)
        self._notify()
        return True

    def _apply_content(self, text: str) -> None:
        """Set buffer text without it counting as an edit."""
        self._applying_content = True
        try:
            self.buffer.set_content(text)
        finally:
            self._applying_content = False

    # =========================================================================
    # Editing and autosave
    # =========================================================================

    def _on_buffer_changed(self) -> None:
        if self._applying_content:
            return
        session = self.session
        # Covers EMPTY/LOADING (no active label) and binary labels
        if not session.writable:
            return
        self._edit_generation += 1
        session.dirty = True
        if session.mode is not Mode.SAVING:
            session.mode = Mode.DIRTY
        self._schedule_autosave()
        self._notify()

    def _schedule_autosave(self) -> None:
        self._cancel_autosave()
        loop = asyncio.get_running_loop()
        self._autosave_handle = loop.call_later(
            self.autosave_delay, self._fire_autosave, self.session.active_label
        )

    def _cancel_autosave(self) -> None:
        if self._autosave_handle is not None:
            self._autosave_handle.cancel()
            self._autosave_handle = None

    def _fire_autosave(self, label: str) -> None:
        self._autosave_handle = None
        task = asyncio.ensure_future(self._autosave(label))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _autosave(self, label: str) -> None:
        async with self._lock:
            if self.session.active_label != label or not self.session.dirty:
                log.debug(f"Skipping stale autosave for {label}")
                return
            log.info("Auto-saving...")
            await self._save_locked()

    # =========================================================================
    # Saving
    # =========================================================================

    async def save(self) -> bool:
        """Save the buffer to the active label.

        No-op without an active label, for binary labels, or when there is
        nothing unsaved. Returns False only if the write failed.
        """
        async with self._lock:
            return await self._save_locked()

    async def _save_locked(self) -> bool:
        session = self.session
        if session.active_label is None:
            return True
        if not session.writable:
            log.debug(f"Refusing to write binary label: {session.active_label}")
            return True
        if not session.dirty:
            return True

        self._cancel_autosave()
        label = session.active_label
        text = self.buffer.get_content()
        generation = self._edit_generation
        session.mode = Mode.SAVING
        self._status(STATUS_SAVING)
        self._notify()

        log.info(f"Saving label: {label}")
        try:
            await self.store.write_label(label, text)
        except StoreError as e:
            # Edits stay in the buffer and dirty stays set; retry is left to
            # the next edit or explicit save
            session.mode = Mode.SAVE_FAILED
            self._status(STATUS_SAVE_FAILED)
            self._notify()
            self._report_error(f"Failed to save label: {label}", e)
            return False

        session.content = LabelContent.from_text(text)
        if self._edit_generation == generation:
            session.dirty = False
            session.mode = Mode.CLEAN
        else:
            # Edited while the write was in flight; the armed timer saves again
            session.mode = Mode.DIRTY
        log.info(f"Saved: {label}")
        self._status(STATUS_SAVED)
        self._notify()
        return True

    # =========================================================================
    # Creating labels
    # =========================================================================

    async def create_label(self, name: str) -> bool:
        """Create an empty text label and open it.

        A name already in the directory is never sent to the store; the user
        is offered to open the existing label instead. Returns True if a
        label ended up selected.
        """
        if validate_label_name(name) is None:
            self._report_error("Label name cannot be empty")
            return False

        if self.directory.contains(name):
            return await self._offer_open_existing(name)

        log.info(f"Creating label: {name}")
        try:
            await self.store.create_label(name, "")
        except AlreadyExists:
            log.info(f"Label already exists in store: {name}")
            self.directory.add(name)
            return await self._offer_open_existing(name)
        except StoreError as e:
            self._report_error(f"Failed to create label: {name}", e)
            return False

        log.info(f"Created label: {name}")
        self.directory.add(name)
        if not await self.load_directory() and self._on_directory_changed:
            self._on_directory_changed()
        return await self.select_label(name)

    async def _offer_open_existing(self, name: str) -> bool:
        if await self.decisions.confirm_open_existing(name):
            return await self.select_label(name)
        return False

    # =========================================================================
    # Shutdown
    # =========================================================================

    async def close(self) -> None:
        """Stop all background work. Unsaved edits are not persisted."""
        self._cancel_autosave()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
