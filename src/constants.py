"""Shared constants for storeview."""

# Autosave fires after this many seconds without further edits
AUTOSAVE_DELAY = 1.0

# How long the "Saved" status stays visible
SAVED_STATUS_CLEAR_DELAY = 2.0

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_REQUEST_TIMEOUT = 10.0

LABELS_API_PATH = "/api/labels"

# Terminals at or below this width start with the sidebar collapsed
NARROW_TERMINAL_WIDTH = 80

STATUS_SAVING = "Saving..."
STATUS_SAVED = "Saved"
STATUS_SAVE_FAILED = "Save failed"
