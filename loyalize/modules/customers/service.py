"""Domain services for customer management."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.infrastructure.database.repositories.customer_repository import SqlCustomerRepository

from .exceptions import CustomerAlreadyExistsError, CustomerHasWalletError, CustomerNotFoundError
from .models import Customer, CustomerCreateInput, initials
from .repository import CustomerRepository

logger = logging.getLogger(__name__)


class CustomerService:
    """Encapsulates customer use cases."""

    def __init__(self, repository: CustomerRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "CustomerService":
        return cls(SqlCustomerRepository(session))

    async def get_customer(self, customer_id: int) -> Customer:
        customer = await self._repository.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    async def find_customer(self, customer_id: int) -> Customer | None:
        return await self._repository.get_by_id(customer_id)

    async def list_customers(self) -> Sequence[Customer]:
        return await self._repository.list_customers()

    async def create_customer(self, payload: CustomerCreateInput) -> Customer:
        if await self._repository.get_by_email(payload.email) is not None:
            raise CustomerAlreadyExistsError(f"Email already registered: {payload.email}")

        values = asdict(payload)
        values["avatar"] = initials(payload.name)
        customer = await self._repository.create_customer(values)
        logger.info("Customer %s created (%s)", customer.id, customer.email)
        return customer

    async def update_customer(self, customer_id: int, changes: Mapping[str, Any]) -> Customer:
        email = changes.get("email")
        if email is not None:
            existing = await self._repository.get_by_email(email)
            if existing is not None and existing.id != customer_id:
                raise CustomerAlreadyExistsError(f"Email already registered: {email}")

        customer = await self._repository.update_customer(customer_id, changes)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    async def delete_customer(self, customer_id: int) -> None:
        if await self._repository.has_wallet(customer_id):
            raise CustomerHasWalletError(f"Customer {customer_id} owns a wallet")
        if not await self._repository.delete_customer(customer_id):
            raise CustomerNotFoundError(customer_id)
        logger.info("Customer %s deleted", customer_id)
