"""Error taxonomy shared by every domain module."""


class DomainError(Exception):
    """Base class for errors raised by domain services."""


class ValidationError(DomainError):
    """Raised when input violates a domain precondition."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness rule."""
