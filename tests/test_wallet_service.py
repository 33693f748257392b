import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from loyalize.db.models import Wallet as WalletModel, WalletTransaction as WalletTransactionModel
from loyalize.infrastructure.database.repositories.wallet_repository import SqlWalletRepository
from loyalize.modules.customers import CustomerCreateInput, CustomerNotFoundError
from loyalize.modules.customers.service import CustomerService
from loyalize.modules.wallets import InvalidWalletStatusError, WalletAlreadyExistsError, WalletNotFoundError
from loyalize.modules.wallets.ledger import LedgerService
from loyalize.modules.wallets.service import WalletService


async def test_create_wallet_seeds_balance_without_ledger_entry(session, customer):
    service = WalletService.with_session(session)

    wallet = await service.create_wallet(customer.id, initial_balance=100)
    await session.commit()

    assert wallet.customer_id == customer.id
    assert wallet.balance == 100
    assert wallet.status == "active"
    assert await service.list_transactions(wallet.id) == []


async def test_second_wallet_for_customer_is_rejected(session, session_factory, customer):
    service = WalletService.with_session(session)
    await service.create_wallet(customer.id)
    await session.commit()

    with pytest.raises(WalletAlreadyExistsError):
        await service.create_wallet(customer.id, initial_balance=500)
    await session.rollback()

    async with session_factory() as check:
        count = await check.scalar(select(func.count(WalletModel.id)).where(WalletModel.customer_id == customer.id))
    assert count == 1


async def test_unique_constraint_backs_the_duplicate_check(session, customer):
    repository = SqlWalletRepository(session)
    await repository.create_wallet(customer_id=customer.id, balance=0, status="active")
    await session.commit()

    with pytest.raises(WalletAlreadyExistsError):
        await repository.create_wallet(customer_id=customer.id, balance=10, status="active")


async def test_wallet_for_unknown_customer_is_rejected(session):
    with pytest.raises(CustomerNotFoundError):
        await WalletService.with_session(session).create_wallet(999)


async def test_lookup_by_customer_returns_none_when_absent(session, customer):
    service = WalletService.with_session(session)

    assert await service.get_wallet_by_customer(customer.id) is None
    assert await service.get_wallet_by_customer(999) is None

    wallet = await service.create_wallet(customer.id, initial_balance=5)
    found = await service.get_wallet_by_customer(customer.id)
    assert found is not None
    assert found.id == wallet.id


async def test_get_missing_wallet_raises(session):
    with pytest.raises(WalletNotFoundError):
        await WalletService.with_session(session).get_wallet(1)


async def test_set_status(session, customer):
    service = WalletService.with_session(session)
    wallet = await service.create_wallet(customer.id)

    updated = await service.set_status(wallet.id, "inactive")
    assert updated.status == "inactive"

    with pytest.raises(InvalidWalletStatusError):
        await service.set_status(wallet.id, "frozen")
    with pytest.raises(WalletNotFoundError):
        await service.set_status(wallet.id + 1, "active")


async def test_transactions_are_scoped_to_their_wallet(session, customer):
    other = await CustomerService.with_session(session).create_customer(
        CustomerCreateInput("Emily Watson", "emily.w@example.com")
    )
    service = WalletService.with_session(session)
    ledger = LedgerService.with_session(session)
    first = await service.create_wallet(customer.id)
    second = await service.create_wallet(other.id)

    await ledger.record_transaction(first.id, "credit", 10)
    await ledger.record_transaction(second.id, "credit", 20)
    await ledger.record_transaction(second.id, "debit", 5)
    await session.commit()

    assert [tx.amount for tx in await service.list_transactions(first.id)] == [10]
    assert [tx.amount for tx in await service.list_transactions(second.id)] == [5, 20]
    assert await service.list_transactions(second.id + 100) == []


async def test_summary_joins_customer_names(session, customer):
    other = await CustomerService.with_session(session).create_customer(
        CustomerCreateInput("David Kim", "david.k@example.com")
    )
    service = WalletService.with_session(session)
    await service.create_wallet(customer.id, initial_balance=40)
    await service.create_wallet(other.id, initial_balance=60, status="inactive")
    await session.commit()

    summary = await service.summarize()

    assert summary.total_wallets == 2
    assert summary.active_wallets == 1
    assert summary.total_points == 100
    assert {entry.customer_name for entry in summary.wallets} == {"Sofia Rodriguez", "David Kim"}


async def test_storage_rejects_non_positive_amounts(session, customer):
    wallet = await WalletService.with_session(session).create_wallet(customer.id)
    await session.commit()

    session.add(WalletTransactionModel(wallet_id=wallet.id, type="credit", amount=0))
    with pytest.raises(IntegrityError):
        await session.flush()


async def test_foreign_keys_are_enforced(session):
    session.add(WalletModel(customer_id=12345, balance=0, status="active"))
    with pytest.raises(IntegrityError):
        await session.flush()


async def test_timestamps_read_back_as_utc(session, session_factory, customer):
    wallet = await WalletService.with_session(session).create_wallet(customer.id)
    await session.commit()

    async with session_factory() as fresh:
        stored = await WalletService.with_session(fresh).get_wallet(wallet.id)

    assert stored.created_at.tzinfo is not None
    assert stored.created_at.utcoffset().total_seconds() == 0
    assert stored.created_at == wallet.created_at
