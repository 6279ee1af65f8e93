"""Model classes for storeview."""

from model.label import LabelContent
from model.session import Mode, Session
from model.directory import LabelDirectory, collation_key

__all__ = [
    "LabelContent",
    "LabelDirectory",
    "Mode",
    "Session",
    "collation_key",
]
