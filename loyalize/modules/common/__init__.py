"""Shared abstractions used across domain modules."""

from .exceptions import ConflictError, DomainError, NotFoundError, ValidationError
from .repository import AsyncRepository

__all__ = ["AsyncRepository", "ConflictError", "DomainError", "NotFoundError", "ValidationError"]
