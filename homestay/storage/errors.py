class StorageError(Exception):
    """The relational store failed. Never raised for a missing row."""


class ConflictError(StorageError):
    """The write would break a uniqueness or reference rule."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field


class DuplicateError(ConflictError):
    """A unique column already holds the submitted value."""
