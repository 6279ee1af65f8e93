"""UI helper functions for storeview."""

from __future__ import annotations

import math

from constants import NARROW_TERMINAL_WIDTH

SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


def format_bytes(size: int) -> str:
    """Format a byte count as a human-readable string (1024-step units)."""
    if size <= 0:
        return "0 Bytes"
    exponent = min(int(math.log(size, 1024)), len(SIZE_UNITS) - 1)
    # log() can land just below an exact power of 1024
    if exponent + 1 < len(SIZE_UNITS) and size >= 1024 ** (exponent + 1):
        exponent += 1
    value = round(size / 1024**exponent, 2)
    return f"{value:g} {SIZE_UNITS[exponent]}"


def binary_info(size: int) -> str:
    """Description shown in place of the editor for binary labels."""
    return f"Size: {format_bytes(size)}\nEncoding: Base64"


def empty_list_message(query: str) -> str:
    if query:
        return f'No labels matching "{query}"'
    return "No labels found. Create one to get started!"


def is_narrow(width: int) -> bool:
    """Whether a terminal this wide should keep the sidebar collapsed."""
    return width <= NARROW_TERMINAL_WIDTH
