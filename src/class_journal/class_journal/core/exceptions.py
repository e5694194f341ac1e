class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when a referenced record (student, entry) does not exist."""


class StorageError(DomainError):
    """Raised when the database is unreachable or a statement/transaction fails."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
