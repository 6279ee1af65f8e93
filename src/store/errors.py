"""Store error taxonomy."""


class StoreError(Exception):
    """Base class for failures reported by a store client."""


class RemoteUnavailable(StoreError):
    """Network or server failure. Recoverable; the operation is abandoned."""


class NotFound(StoreError):
    """The label does not exist (it may have vanished since listing)."""


class AlreadyExists(StoreError):
    """Creation conflict: a label with this name already exists."""
