"""Wallet domain specific exceptions."""

from loyalize.modules.common.exceptions import ConflictError, NotFoundError, ValidationError


class WalletNotFoundError(NotFoundError):
    """Raised when the requested wallet cannot be found."""


class WalletAlreadyExistsError(ConflictError):
    """Raised when the customer already owns a wallet."""


class InvalidTransactionError(ValidationError):
    """Raised when a ledger posting has a bad type or a non-positive amount."""


class InvalidWalletStatusError(ValidationError):
    """Raised when a wallet status outside active/inactive is requested."""
