# errors.py
from typing import List, Optional


class PortalError(Exception):
    """Base class for errors that are turned into an envelope response."""
    status_code = 500
    message = "Internal server error"

    def __init__(self, error: str):
        super().__init__(error)
        self.error = error


class ValidationError(PortalError):
    """A request body or form failed a structural rule.

    `error` is the first human-readable message, `errors` holds all of them
    in the order they were found.
    """
    status_code = 400
    message = "Validation failed"

    def __init__(self, error: str, errors: Optional[List[str]] = None):
        super().__init__(error)
        self.errors = errors or [error]


class InternalError(PortalError):
    """Anything unexpected. Reported generically, never retried."""
    status_code = 500
    message = "Internal server error"
