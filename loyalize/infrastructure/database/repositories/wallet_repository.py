"""SQLAlchemy repository for wallets and their ledger entries."""

from __future__ import annotations

from sqlalchemy import desc, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.db.models import Wallet, WalletTransaction, utcnow
from loyalize.modules.wallets.exceptions import WalletAlreadyExistsError


class SqlWalletRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_wallet(self, wallet_id: int) -> Wallet | None:
        return await self.session.get(Wallet, wallet_id, populate_existing=True)

    async def get_wallet_by_customer(self, customer_id: int) -> Wallet | None:
        stmt = (
            select(Wallet)
            .where(Wallet.customer_id == customer_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_wallets(self) -> list[Wallet]:
        stmt = select(Wallet).order_by(desc(Wallet.id)).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_wallet(self, *, customer_id: int, balance: int, status: str) -> Wallet:
        now = utcnow()
        wallet = Wallet(
            customer_id=customer_id,
            balance=balance,
            status=status,
            created_at=now,
            updated_at=now,
        )
        self.session.add(wallet)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise WalletAlreadyExistsError(customer_id) from exc
        return wallet

    async def set_status(self, wallet_id: int, status: str) -> Wallet | None:
        stmt = (
            update(Wallet)
            .where(Wallet.id == wallet_id)
            .values(status=status, updated_at=utcnow())
            .execution_options(synchronize_session=False, populate_existing=True)
            .returning(Wallet)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def apply_delta(self, wallet_id: int, delta: int) -> Wallet | None:
        # balance arithmetic happens in the UPDATE itself so concurrent postings cannot lose updates
        stmt = (
            update(Wallet)
            .where(Wallet.id == wallet_id)
            .values(balance=Wallet.balance + delta, updated_at=utcnow())
            .execution_options(synchronize_session=False, populate_existing=True)
            .returning(Wallet)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def add_transaction(
        self,
        *,
        wallet_id: int,
        type: str,
        amount: int,
        description: str | None,
    ) -> WalletTransaction:
        tx = WalletTransaction(
            wallet_id=wallet_id,
            type=type,
            amount=amount,
            description=description,
            created_at=utcnow(),
        )
        self.session.add(tx)
        await self.session.flush()
        return tx

    async def list_transactions(self, wallet_id: int) -> list[WalletTransaction]:
        stmt = (
            select(WalletTransaction)
            .where(WalletTransaction.wallet_id == wallet_id)
            .order_by(desc(WalletTransaction.created_at), desc(WalletTransaction.id))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
