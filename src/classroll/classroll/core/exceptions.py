class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "DomainError"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "ValidationError"


class InvalidStatus(ValidationError):
    """Raised when an attendance status is not one of P, L, A or empty."""

    code = "InvalidStatus"


class NotFound(DomainError):
    """Raised when a referenced row does not exist."""

    code = "NotFound"


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    code = "AuthenticationError"


class InvalidCredential(AuthenticationError):
    """Raised when the password does not match the stored hash."""

    code = "InvalidCredential"


class ConstraintViolation(DomainError):
    """Raised when a write breaks a uniqueness or reference constraint."""

    code = "ConstraintViolation"


class StorageError(DomainError):
    """Raised when the underlying SQLite query or connection fails."""

    code = "StorageError"
