"""Restaurant tables and seating."""

from .exceptions import TableNotFoundError, TableOccupiedError, TableSessionClosedError, TableSessionNotFoundError

__all__ = ["TableNotFoundError", "TableOccupiedError", "TableSessionClosedError", "TableSessionNotFoundError"]
