"""Domain error types."""


class PersistenceError(Exception):
    """Base class for failures reading or writing the document file."""


class DocumentNotFoundError(PersistenceError):
    """Raised when a document path no longer resolves to a file."""


class DocumentIOError(PersistenceError):
    """Raised when a document cannot be read or written."""


class TargetPathLockedError(Exception):
    """Raised when rebinding a session target that already has a path."""
