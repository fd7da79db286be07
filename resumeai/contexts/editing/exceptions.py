"""Custom exceptions for the editing context."""


class ReadOnlySessionError(Exception):
    """Raised when a resume opened in view mode is edited."""

    pass
