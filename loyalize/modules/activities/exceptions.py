"""Activity domain specific exceptions."""

from loyalize.modules.common.exceptions import ValidationError


class InvalidActivityError(ValidationError):
    """Raised for an unknown activity type or a negative amount."""
