"""Ledger service: the single writer of wallet transactions.

Every posting inserts a transaction row and shifts the wallet balance by the
signed amount in the same database transaction. The balance shift is a single
``UPDATE wallets SET balance = balance + :delta`` executed by the repository,
so two requests posting against the same wallet serialize inside the database
and neither delta is lost. The caller owns the unit of work: the request
session commits both writes together or rolls both back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.infrastructure.database.repositories.wallet_repository import SqlWalletRepository

from .exceptions import InvalidTransactionError, WalletNotFoundError
from .models import CREDIT, MAX_POINTS, TRANSACTION_TYPES, WalletTransactionRecord
from .repository import WalletRepository
from .service import WalletService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LedgerService:
    repository: WalletRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "LedgerService":
        return cls(SqlWalletRepository(session))

    async def record_transaction(
        self,
        wallet_id: int,
        type: str,
        amount: int,
        description: Optional[str] = None,
    ) -> WalletTransactionRecord:
        if type not in TRANSACTION_TYPES:
            raise InvalidTransactionError(f"Unknown transaction type: {type!r}")
        if isinstance(amount, bool) or not isinstance(amount, int) or not 0 < amount <= MAX_POINTS:
            raise InvalidTransactionError(f"Amount must be an integer between 1 and {MAX_POINTS}, got {amount!r}")

        if await self.repository.get_wallet(wallet_id) is None:
            raise WalletNotFoundError(wallet_id)

        tx = await self.repository.add_transaction(
            wallet_id=wallet_id,
            type=type,
            amount=amount,
            description=description,
        )
        delta = amount if type == CREDIT else -amount
        wallet = await self.repository.apply_delta(wallet_id, delta)
        if wallet is None:
            # the wallet row vanished between the lookup and the update
            raise WalletNotFoundError(wallet_id)

        logger.info(
            "Wallet %s %s %s points (tx %s), balance now %s",
            wallet_id,
            "credited" if type == CREDIT else "debited",
            amount,
            tx.id,
            wallet.balance,
        )
        return WalletService._to_transaction(tx)
