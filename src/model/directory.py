"""Label directory: the known set of label names."""

from __future__ import annotations

import logging
import unicodedata
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from store import StoreClient

log = logging.getLogger(__name__)


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(name: str) -> tuple[str, str, str]:
    """Sort key approximating locale collation.

    Compares base letters first (accents and case ignored), then the
    case-folded name, then the exact name so the order is total.
    """
    folded = name.casefold()
    return (_strip_accents(folded), folded, name)


class LabelDirectory:
    """Holds the set of label names listed by the store.

    The set is replaced wholesale by reload() and grows by one name when a
    label is created. Filtering never mutates it.
    """

    def __init__(self, store: StoreClient, names: set[str] | None = None) -> None:
        self._store = store
        self._names: set[str] = set(names or ())

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._names)

    async def reload(self) -> frozenset[str]:
        """Replace the held set with the store's listing.

        Raises:
            RemoteUnavailable: If the store cannot be listed. The previous
                set is kept.
        """
        listed = await self._store.list_labels()
        self._names = {name for name in listed if name}
        log.info(f"Loaded {len(self._names)} labels")
        return self.names

    def filtered(self, query: str = "") -> list[str]:
        """Names containing query (case-insensitive), in collation order."""
        needle = query.lower()
        matches = [name for name in self._names if needle in name.lower()]
        return sorted(matches, key=collation_key)

    def contains(self, name: str) -> bool:
        return name in self._names

    def add(self, name: str) -> None:
        self._names.add(name)
