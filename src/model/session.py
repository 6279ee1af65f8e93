"""Editing session state."""

from dataclasses import dataclass
from enum import Enum

from model.label import LabelContent


class Mode(Enum):
    """Synchronization state of the editing session."""

    EMPTY = "empty"  # No label loaded
    LOADING = "loading"  # Fetch in flight
    CLEAN = "clean"  # Buffer matches the store
    DIRTY = "dirty"  # Unsaved edits, autosave armed
    SAVING = "saving"  # Write in flight
    SAVE_FAILED = "save_failed"  # Last write failed, edits kept


@dataclass
class Session:
    """The single active editing session, owned by the sync controller."""

    active_label: str | None = None
    mode: Mode = Mode.EMPTY
    dirty: bool = False
    content: LabelContent | None = None  # Metadata of the loaded label

    @property
    def is_text(self) -> bool:
        return self.content is not None and self.content.is_text

    @property
    def writable(self) -> bool:
        """Only text labels accept edits and saves."""
        return self.active_label is not None and self.is_text
