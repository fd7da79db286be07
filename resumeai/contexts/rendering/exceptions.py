"""Custom exceptions for the rendering context."""

from typing import Dict, Optional


class PrintUnavailableError(Exception):
    """Raised when no print dialog can be opened (e.g. no browser configured, pop-ups blocked)."""

    pass


class ExportFailedError(Exception):
    """
    Raised when printing fails after the resume was saved.

    The record is already durable, so the caller can retry printing without
    saving again.

    Attributes:
        record: The saved record
        reason: Why printing failed
        original_error: The backend error
    """

    def __init__(self, record: Dict, reason: str, original_error: Optional[Exception] = None):
        self.record = record
        self.reason = reason
        self.original_error = original_error
        super().__init__(
            f"Export of '{record.get('name')}' failed: {reason}. "
            f"The resume was saved (id {record.get('id')}); retry the export to print it."
        )
