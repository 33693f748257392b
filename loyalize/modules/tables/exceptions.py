"""Table and seating specific exceptions."""

from loyalize.modules.common.exceptions import ConflictError, NotFoundError


class TableNotFoundError(NotFoundError):
    """Raised when the requested table cannot be found."""


class TableSessionNotFoundError(NotFoundError):
    """Raised when the requested seating session cannot be found."""


class TableOccupiedError(ConflictError):
    """Raised when seating a party at a table that is not available."""


class TableSessionClosedError(ConflictError):
    """Raised when reopening a session that has already been cleared."""
