"""
PersistenceError - Raised by repository or transaction adapters when the store
rejects a write (constraint violation, lost connection, ...).
Maps to: HTTP 500 Internal Server Error
"""


class PersistenceError(Exception):
    """The underlying store could not complete the operation."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
