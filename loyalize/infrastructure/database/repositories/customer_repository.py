"""SQLAlchemy implementation of the customer repository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Iterable, Mapping, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.db.models import (
    Activity as ActivityModel,
    Customer as CustomerModel,
    Feedback as FeedbackModel,
    RestaurantTable as TableModel,
    TableSession as TableSessionModel,
    Wallet as WalletModel,
)
from loyalize.modules.customers.exceptions import CustomerAlreadyExistsError
from loyalize.modules.customers.models import Customer
from loyalize.modules.customers.repository import CustomerRepository

_UPDATABLE_FIELDS = frozenset({"name", "email", "phone", "tier", "segment", "visits", "spend"})
_NULLABLE_FIELDS = frozenset({"phone"})


class SqlCustomerRepository(CustomerRepository):
    """Customer repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, customer_id: int) -> Customer | None:
        model = await self._session.get(CustomerModel, customer_id)
        return self._to_domain(model)

    async def get_by_email(self, email: str) -> Customer | None:
        stmt = select(CustomerModel).where(CustomerModel.email == email)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def list_customers(self) -> Sequence[Customer]:
        stmt = select(CustomerModel).order_by(CustomerModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def get_names(self, customer_ids: Iterable[int]) -> dict[int, str]:
        ids = set(customer_ids)
        if not ids:
            return {}
        stmt = select(CustomerModel.id, CustomerModel.name).where(CustomerModel.id.in_(ids))
        result = await self._session.execute(stmt)
        return {row.id: row.name for row in result.all()}

    async def create_customer(self, values: Mapping[str, Any]) -> Customer:
        model = CustomerModel(**values)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            raise CustomerAlreadyExistsError(values.get("email")) from exc
        return self._to_domain(model)

    async def update_customer(self, customer_id: int, changes: Mapping[str, Any]) -> Customer | None:
        model = await self._session.get(CustomerModel, customer_id)
        if model is None:
            return None

        for key, value in changes.items():
            if key not in _UPDATABLE_FIELDS:
                continue
            if value is None and key not in _NULLABLE_FIELDS:
                continue
            setattr(model, key, value)

        await self._session.flush()
        return self._to_domain(model)

    async def has_wallet(self, customer_id: int) -> bool:
        stmt = select(WalletModel.id).where(WalletModel.customer_id == customer_id)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def delete_customer(self, customer_id: int) -> bool:
        """Delete the customer and their activity; feedback and seating history stay, detached."""
        await self._session.execute(delete(ActivityModel).where(ActivityModel.customer_id == customer_id))
        references = (
            (FeedbackModel, FeedbackModel.customer_id),
            (TableSessionModel, TableSessionModel.customer_id),
            (TableModel, TableModel.current_customer_id),
        )
        for model, column in references:
            await self._session.execute(
                update(model)
                .where(column == customer_id)
                .values({column: None})
                .execution_options(synchronize_session=False)
            )
        result = await self._session.execute(
            delete(CustomerModel)
            .where(CustomerModel.id == customer_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def record_visit(self, customer_id: int, amount: Decimal, visited_at: datetime) -> Customer | None:
        stmt = (
            update(CustomerModel)
            .where(CustomerModel.id == customer_id)
            .values(
                visits=CustomerModel.visits + 1,
                spend=CustomerModel.spend + amount,
                last_visit=visited_at,
            )
            .execution_options(synchronize_session=False, populate_existing=True)
            .returning(CustomerModel)
        )
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalars().first())

    @staticmethod
    def _to_domain(model: CustomerModel | None) -> Customer | None:
        if model is None:
            return None
        return Customer(
            id=model.id,
            name=model.name,
            email=model.email,
            tier=model.tier,
            segment=model.segment,
            visits=model.visits,
            spend=model.spend,
            phone=model.phone,
            last_visit=model.last_visit,
            avatar=model.avatar,
        )
