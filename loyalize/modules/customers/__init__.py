"""Customer domain exports."""

from .exceptions import CustomerAlreadyExistsError, CustomerHasWalletError, CustomerNotFoundError
from .models import Customer, CustomerCreateInput

__all__ = [
    "Customer",
    "CustomerAlreadyExistsError",
    "CustomerCreateInput",
    "CustomerHasWalletError",
    "CustomerNotFoundError",
]
