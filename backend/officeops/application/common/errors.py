"""
Application-level errors that are NOT turned into Result failures.

- ConfigurationError: missing/duplicate handler or listener registration.
  Raised while wiring the process; fatal at startup.
- InvalidOperationError: a component was driven through an illegal state
  transition (e.g. beginning a transaction twice). A programming error.
"""


class ConfigurationError(Exception):
    """Wiring is incomplete or inconsistent."""


class InvalidOperationError(Exception):
    """Operation not allowed in the current state."""
