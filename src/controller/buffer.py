"""Buffer contract: the editable text the sync controller reads and writes."""

from __future__ import annotations

from typing import Callable, Protocol


class Buffer(Protocol):
    """An editable text buffer.

    The buffer accepts one change listener, invoked after every mutation,
    including mutations made through set_content().
    """

    def set_content(self, text: str) -> None: ...

    def get_content(self) -> str: ...

    def clear_edit_history(self) -> None: ...

    def on_change(self, callback: Callable[[], None]) -> None: ...

    def set_syntax_hint(self, hint: str | None) -> None: ...
