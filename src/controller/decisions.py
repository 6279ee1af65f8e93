"""User decisions awaited by the sync controller."""

from __future__ import annotations

from typing import Protocol


class Decisions(Protocol):
    """Yes/no questions the controller blocks on before continuing."""

    async def confirm_save_before_switch(self, label: str) -> bool:
        """Unsaved changes in label: save them before switching?"""
        ...

    async def confirm_open_existing(self, label: str) -> bool:
        """Label already exists: open it instead of creating?"""
        ...
