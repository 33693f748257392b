"""Wallet domain service"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.db.models import Wallet as WalletModel, WalletTransaction as WalletTransactionModel
from loyalize.infrastructure.database.repositories.customer_repository import SqlCustomerRepository
from loyalize.infrastructure.database.repositories.wallet_repository import SqlWalletRepository
from loyalize.modules.customers.exceptions import CustomerNotFoundError
from loyalize.modules.customers.repository import CustomerRepository

from .exceptions import InvalidWalletStatusError, WalletAlreadyExistsError, WalletNotFoundError
from .models import (
    ACTIVE,
    WALLET_STATUSES,
    WalletSnapshot,
    WalletSummary,
    WalletSummaryEntry,
    WalletTransactionRecord,
)
from .repository import WalletRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WalletService:
    repository: WalletRepository
    customers: CustomerRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WalletService":
        return cls(SqlWalletRepository(session), SqlCustomerRepository(session))

    async def create_wallet(self, customer_id: int, initial_balance: int = 0, status: str = ACTIVE) -> WalletSnapshot:
        """Open the customer's wallet.

        ``initial_balance`` is written straight to the balance column; no ledger
        entry is created for it.
        """
        if status not in WALLET_STATUSES:
            raise InvalidWalletStatusError(status)
        if await self.customers.get_by_id(customer_id) is None:
            raise CustomerNotFoundError(customer_id)
        if await self.repository.get_wallet_by_customer(customer_id) is not None:
            logger.warning("Customer %s already has a wallet", customer_id)
            raise WalletAlreadyExistsError(customer_id)

        wallet = await self.repository.create_wallet(
            customer_id=customer_id,
            balance=initial_balance,
            status=status,
        )
        logger.info("Wallet %s opened for customer %s with %s points", wallet.id, customer_id, initial_balance)
        return self._to_snapshot(wallet)

    async def get_wallet(self, wallet_id: int) -> WalletSnapshot:
        wallet = await self.repository.get_wallet(wallet_id)
        if wallet is None:
            raise WalletNotFoundError(wallet_id)
        return self._to_snapshot(wallet)

    async def get_wallet_by_customer(self, customer_id: int) -> WalletSnapshot | None:
        wallet = await self.repository.get_wallet_by_customer(customer_id)
        return self._to_snapshot(wallet) if wallet else None

    async def list_wallets(self) -> list[WalletSnapshot]:
        rows = await self.repository.list_wallets()
        return [self._to_snapshot(row) for row in rows]

    async def set_status(self, wallet_id: int, status: str) -> WalletSnapshot:
        if status not in WALLET_STATUSES:
            raise InvalidWalletStatusError(status)
        wallet = await self.repository.set_status(wallet_id, status)
        if wallet is None:
            raise WalletNotFoundError(wallet_id)
        logger.info("Wallet %s marked %s", wallet_id, status)
        return self._to_snapshot(wallet)

    async def list_transactions(self, wallet_id: int) -> list[WalletTransactionRecord]:
        rows = await self.repository.list_transactions(wallet_id)
        return [self._to_transaction(row) for row in rows]

    async def summarize(self) -> WalletSummary:
        wallets = await self.list_wallets()
        names = await self.customers.get_names(wallet.customer_id for wallet in wallets)
        return WalletSummary(
            total_wallets=len(wallets),
            active_wallets=sum(1 for wallet in wallets if wallet.status == ACTIVE),
            total_points=sum(wallet.balance for wallet in wallets),
            wallets=[
                WalletSummaryEntry(wallet=wallet, customer_name=names.get(wallet.customer_id))
                for wallet in wallets
            ],
        )

    @staticmethod
    def _to_snapshot(model: WalletModel) -> WalletSnapshot:
        return WalletSnapshot(
            id=model.id,
            customer_id=model.customer_id,
            balance=model.balance,
            status=model.status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _to_transaction(model: WalletTransactionModel) -> WalletTransactionRecord:
        return WalletTransactionRecord(
            id=model.id,
            wallet_id=model.wallet_id,
            type=model.type,
            amount=model.amount,
            description=model.description,
            created_at=model.created_at,
        )
