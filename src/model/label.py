"""Label content model."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelContent:
    """Content of a single label as delivered by the store.

    Text labels carry their text. Binary labels only carry their size; the
    payload itself is never kept on the client.
    """

    is_text: bool
    size_bytes: int
    text: str | None = None

    def __post_init__(self) -> None:
        if self.size_bytes < 0:
            raise ValueError(f"size_bytes must be >= 0, got {self.size_bytes}")
        if self.is_text and self.text is None:
            raise ValueError("text content requires text")
        if not self.is_text and self.text is not None:
            raise ValueError("binary content cannot carry text")

    @classmethod
    def from_text(cls, text: str) -> LabelContent:
        """Build text content, deriving size from the UTF-8 encoding."""
        return cls(is_text=True, size_bytes=len(text.encode("utf-8")), text=text)

    @classmethod
    def binary(cls, size_bytes: int) -> LabelContent:
        return cls(is_text=False, size_bytes=size_bytes)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> LabelContent:
        """Parse a store response of the form {is_text, content, size_bytes}.

        Raises:
            ValueError: If the payload is missing fields or has wrong types.
        """
        is_text = data.get("is_text")
        if not isinstance(is_text, bool):
            raise ValueError("missing or invalid 'is_text'")

        if is_text:
            text = data.get("content")
            if not isinstance(text, str):
                raise ValueError("text label without string 'content'")
            content = cls.from_text(text)
            reported = data.get("size_bytes")
            if reported != content.size_bytes:
                log.debug(f"Store reported {reported} bytes, text encodes to {content.size_bytes}")
            return content

        size = data.get("size_bytes")
        if not isinstance(size, int) or isinstance(size, bool):
            raise ValueError("missing or invalid 'size_bytes'")
        return cls.binary(size)
