class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a request targets an entity that does not exist."""


class StorageError(Exception):
    """Raised by storage backends when the persisted blob cannot be read or written."""
