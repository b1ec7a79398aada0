"""Exception hierarchy.

Nothing here is fatal: storage errors are logged and absorbed by the
repository, submission errors are shown to the user once.
"""

from __future__ import annotations


class StresslessError(Exception):
    """Base class for all StressLess errors."""


class StorageError(StresslessError):
    """A key-value store could not be read or written."""


class SubmissionError(StresslessError):
    """A survey submission could not be scored or recorded."""

    def __init__(self, message: str = "Failed to process stress assessment") -> None:
        super().__init__(message)
        self.message = message
