"""Store client contract consumed by the sync controller."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from model import LabelContent


class StoreClient(Protocol):
    """Async access to a label → content store.

    Every method may suspend. Failures are raised as StoreError subclasses.
    """

    async def list_labels(self) -> list[str]:
        """Return every label name (order is irrelevant)."""
        ...

    async def fetch_label(self, name: str) -> LabelContent:
        """Fetch one label. Raises NotFound or RemoteUnavailable."""
        ...

    async def create_label(self, name: str, initial_text: str = "") -> None:
        """Create a text label. Raises AlreadyExists or RemoteUnavailable."""
        ...

    async def write_label(self, name: str, text: str) -> None:
        """Overwrite a label unconditionally. Raises NotFound or RemoteUnavailable."""
        ...

    async def aclose(self) -> None:
        ...
