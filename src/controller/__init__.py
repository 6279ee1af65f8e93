"""Controller layer: the label sync state machine and the UI event mixins.

This package contains:
- sync: LabelSyncController, the session state machine
- buffer/decisions: contracts the controller is driven through
- Event handler mixins for different UI areas
"""

from controller.buffer import Buffer
from controller.decisions import Decisions
from controller.sync import LabelSyncController
from controller.validators import validate_label_name
from controller.labels import LabelEventsMixin
from controller.editor import EditorEventsMixin

__all__ = [
    # Sync
    "Buffer",
    "Decisions",
    "LabelSyncController",
    "validate_label_name",
    # Event mixins
    "EditorEventsMixin",
    "LabelEventsMixin",
]
