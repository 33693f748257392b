"""Repository protocol for wallet operations."""

from __future__ import annotations

from typing import Protocol, Sequence

from loyalize.db.models import Wallet as WalletModel, WalletTransaction as WalletTransactionModel


class WalletRepository(Protocol):
    async def get_wallet(self, wallet_id: int) -> WalletModel | None:
        ...

    async def get_wallet_by_customer(self, customer_id: int) -> WalletModel | None:
        ...

    async def list_wallets(self) -> Sequence[WalletModel]:
        ...

    async def create_wallet(self, *, customer_id: int, balance: int, status: str) -> WalletModel:
        ...

    async def set_status(self, wallet_id: int, status: str) -> WalletModel | None:
        ...

    async def apply_delta(self, wallet_id: int, delta: int) -> WalletModel | None:
        """Shift the stored balance by ``delta`` inside the database, never in Python."""
        ...

    async def add_transaction(
        self,
        *,
        wallet_id: int,
        type: str,
        amount: int,
        description: str | None,
    ) -> WalletTransactionModel:
        ...

    async def list_transactions(self, wallet_id: int) -> Sequence[WalletTransactionModel]:
        ...
