"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
VALIDATION_ERROR = "VALIDATION_ERROR"
GENERIC_ERROR = "GENERIC_ERROR"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DomainValidationError(DomainError):
    """Raised when an identifier or input fails domain validation."""

    pass


class GenericError(DomainError):
    """Raised for failures that fit no more specific kind."""

    pass
