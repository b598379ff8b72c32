class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an employee or the requested shift data does not exist."""


class ConflictError(DomainError):
    """Raised when an operation conflicts with the current shift/employee state."""
