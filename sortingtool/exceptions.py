"""sortingtool exception classes."""

from __future__ import annotations


class SortingToolError(RuntimeError):
    """Base exception for sortingtool errors."""

    rc = 1


class UserError(SortingToolError):
    """Configuration errors that should be shown to user without traceback."""

    def __init__(self, message: str, rc: int = 2):
        super().__init__(message)
        self.rc = rc
