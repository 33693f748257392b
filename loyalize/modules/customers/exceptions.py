"""Customer domain specific exceptions."""

from loyalize.modules.common.exceptions import ConflictError, NotFoundError


class CustomerNotFoundError(NotFoundError):
    """Raised when the requested customer cannot be found."""


class CustomerAlreadyExistsError(ConflictError):
    """Raised when attempting to create a customer with a duplicate email."""


class CustomerHasWalletError(ConflictError):
    """Raised when deleting a customer whose wallet must be preserved."""
