"""Tier domain specific exceptions."""

from loyalize.modules.common.exceptions import NotFoundError


class TierNotFoundError(NotFoundError):
    """Raised when the requested tier cannot be found."""
