"""
app/core/exceptions.py

Custom exception hierarchy for the application.

Raising typed exceptions from services lets controllers catch specific
cases and return the correct HTTP status code without leaking internals.
"""


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""


# ── Upload exceptions ──────────────────────────────────────────────────────────

class NoFilesProvidedError(AppBaseException):
    """Raised when an upload request carries no file parts."""


class FileTooLargeError(AppBaseException):
    """Raised when a single uploaded file exceeds the per-file size limit."""

    def __init__(self, filename: str, limit: int) -> None:
        super().__init__(f"'{filename}' exceeds the {limit}-byte upload limit.")
        self.filename = filename
        self.limit = limit


class FileWriteError(AppBaseException):
    """Raised when an uploaded file cannot be written to the storage directory."""


class NameAllocationError(AppBaseException):
    """Raised when no free on-disk name could be allocated for an upload."""


# ── Storage directory exceptions ───────────────────────────────────────────────

class DirectoryUncreatableError(AppBaseException):
    """Raised at startup when the storage directory cannot be created."""


class DirectoryUnreadableError(AppBaseException):
    """Raised when the storage directory cannot be enumerated."""
