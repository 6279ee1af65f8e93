"""Shared fixtures for storeview tests."""

import asyncio

import pytest

from controller import LabelSyncController
from model import LabelContent, LabelDirectory, Session
from store import AlreadyExists, NotFound, StoreError

# Short enough to keep the suite fast, long enough to separate typing bursts
TEST_AUTOSAVE_DELAY = 0.1

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(40))


class FakeStore:
    """In-memory StoreClient recording every call.

    Text labels are stored as str, binary labels as bytes.
    """

    def __init__(self, labels: dict[str, str | bytes] | None = None) -> None:
        self.labels: dict[str, str | bytes] = dict(labels or {})
        self.calls: list[tuple] = []
        self.write_gate: asyncio.Event | None = None  # Holds writes in flight until set
        self.closed = False
        self.in_flight = 0
        self.max_in_flight = 0
        self._failures: dict[str, list[StoreError]] = {}

    def fail_next(self, op: str, error: StoreError) -> None:
        """Make the next call of op ("list", "fetch", "create", "write") raise error."""
        self._failures.setdefault(op, []).append(error)

    def _maybe_fail(self, op: str) -> None:
        pending = self._failures.get(op)
        if pending:
            raise pending.pop(0)

    async def _enter(self) -> None:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0)

    def _exit(self) -> None:
        self.in_flight -= 1

    @property
    def writes(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "write"]

    def ops(self) -> list[str]:
        return [c[0] for c in self.calls]

    async def list_labels(self) -> list[str]:
        self.calls.append(("list",))
        self._maybe_fail("list")
        return list(self.labels)

    async def fetch_label(self, name: str) -> LabelContent:
        self.calls.append(("fetch", name))
        await self._enter()
        try:
            self._maybe_fail("fetch")
            if name not in self.labels:
                raise NotFound(f"Label not found: {name}")
            value = self.labels[name]
            if isinstance(value, bytes):
                return LabelContent.binary(len(value))
            return LabelContent.from_text(value)
        finally:
            self._exit()

    async def create_label(self, name: str, initial_text: str = "") -> None:
        self.calls.append(("create", name, initial_text))
        self._maybe_fail("create")
        if name in self.labels:
            raise AlreadyExists(f"Label exists: {name}")
        self.labels[name] = initial_text

    async def write_label(self, name: str, text: str) -> None:
        self.calls.append(("write", name, text))
        await self._enter()
        try:
            if self.write_gate is not None:
                await self.write_gate.wait()
            self._maybe_fail("write")
            if name not in self.labels:
                raise NotFound(f"Label not found: {name}")
            self.labels[name] = text
        finally:
            self._exit()

    async def aclose(self) -> None:
        self.closed = True


class FakeBuffer:
    """Buffer that notifies its listener synchronously on every mutation."""

    def __init__(self) -> None:
        self.text = ""
        self.listener = None
        self.set_calls = 0
        self.history_cleared = 0
        self.syntax_hint: str | None = None

    def on_change(self, callback) -> None:
        self.listener = callback

    def _fire(self) -> None:
        if self.listener:
            self.listener()

    def set_content(self, text: str) -> None:
        self.text = text
        self.set_calls += 1
        self._fire()

    def get_content(self) -> str:
        return self.text

    def clear_edit_history(self) -> None:
        self.history_cleared += 1

    def set_syntax_hint(self, hint: str | None) -> None:
        self.syntax_hint = hint

    def type_text(self, text: str) -> None:
        """Simulate the user replacing the buffer text."""
        self.text = text
        self._fire()


class RecordingDecisions:
    """Decisions with fixed answers that remembers which questions were asked."""

    def __init__(self, save_before_switch: bool = True, open_existing: bool = True) -> None:
        self.save_before_switch = save_before_switch
        self.open_existing = open_existing
        self.save_asked: list[str] = []
        self.open_asked: list[str] = []
        self.store: FakeStore | None = None
        self.calls_when_asked: list[list[tuple]] = []

    async def confirm_save_before_switch(self, label: str) -> bool:
        self.save_asked.append(label)
        if self.store is not None:
            self.calls_when_asked.append(list(self.store.calls))
        return self.save_before_switch

    async def confirm_open_existing(self, label: str) -> bool:
        self.open_asked.append(label)
        return self.open_existing


class Recorder:
    """Collects controller callbacks."""

    def __init__(self) -> None:
        self.modes = []
        self.statuses: list[str] = []
        self.errors: list[str] = []
        self.directory_changes = 0

    def session_changed(self, session: Session) -> None:
        self.modes.append(session.mode)

    def status(self, message: str) -> None:
        self.statuses.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def directory_changed(self) -> None:
        self.directory_changes += 1


def make_controller(store, buffer, decisions, recorder, autosave_delay=TEST_AUTOSAVE_DELAY):
    return LabelSyncController(
        store,
        LabelDirectory(store),
        buffer,
        decisions,
        autosave_delay=autosave_delay,
        on_session_changed=recorder.session_changed,
        on_directory_changed=recorder.directory_changed,
        on_status=recorder.status,
        on_error=recorder.error,
    )


@pytest.fixture
def store():
    """Store with two text labels and one binary label."""
    return FakeStore({"a.txt": "x", "B.md": "# Notes", "logo.png": PNG_BYTES})


@pytest.fixture
def buffer():
    return FakeBuffer()


@pytest.fixture
def decisions(store):
    recording = RecordingDecisions()
    recording.store = store
    return recording


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def controller(store, buffer, decisions, recorder):
    """Controller wired to the fakes with a short autosave delay."""
    return make_controller(store, buffer, decisions, recorder)
