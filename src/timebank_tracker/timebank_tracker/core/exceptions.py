class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a record the operation depends on does not exist."""


class AuthenticationError(DomainError):
    """Raised when the request carries no authenticated user."""
