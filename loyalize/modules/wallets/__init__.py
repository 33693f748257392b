"""Wallet domain exports"""

from .exceptions import (
    InvalidTransactionError,
    InvalidWalletStatusError,
    WalletAlreadyExistsError,
    WalletNotFoundError,
)
from .models import WalletSnapshot, WalletSummary, WalletSummaryEntry, WalletTransactionRecord

__all__ = [
    "InvalidTransactionError",
    "InvalidWalletStatusError",
    "WalletAlreadyExistsError",
    "WalletNotFoundError",
    "WalletSnapshot",
    "WalletSummary",
    "WalletSummaryEntry",
    "WalletTransactionRecord",
]
