"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

CREDIT = "credit"
DEBIT = "debit"
TRANSACTION_TYPES = frozenset({CREDIT, DEBIT})

ACTIVE = "active"
INACTIVE = "inactive"
WALLET_STATUSES = frozenset({ACTIVE, INACTIVE})

# largest single posting or opening balance, in points
MAX_POINTS = 2**31 - 1


@dataclass(slots=True)
class WalletSnapshot:
    id: int
    customer_id: int
    balance: int
    status: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True)
class WalletTransactionRecord:
    id: int
    wallet_id: int
    type: str
    amount: int
    description: Optional[str]
    created_at: datetime

    @property
    def signed_amount(self) -> int:
        return self.amount if self.type == CREDIT else -self.amount


@dataclass(slots=True)
class WalletSummaryEntry:
    wallet: WalletSnapshot
    customer_name: Optional[str]


@dataclass(slots=True)
class WalletSummary:
    total_wallets: int
    active_wallets: int
    total_points: int
    wallets: list[WalletSummaryEntry] = field(default_factory=list)
