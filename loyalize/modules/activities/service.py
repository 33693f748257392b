"""Activity domain service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.db.models import Activity, utcnow
from loyalize.infrastructure.database.repositories.activity_repository import SqlActivityRepository
from loyalize.infrastructure.database.repositories.customer_repository import SqlCustomerRepository
from loyalize.modules.customers.exceptions import CustomerNotFoundError
from loyalize.modules.customers.repository import CustomerRepository

from .exceptions import InvalidActivityError

logger = logging.getLogger(__name__)

ACTIVITY_TYPES = frozenset({"visit", "reward", "signup"})
DEFAULT_FEED_LIMIT = 10


@dataclass(slots=True)
class ActivityService:
    repository: SqlActivityRepository
    customers: CustomerRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ActivityService":
        return cls(SqlActivityRepository(session), SqlCustomerRepository(session))

    async def list_recent(self, limit: int = DEFAULT_FEED_LIMIT) -> list[Activity]:
        return await self.repository.list_recent(limit)

    async def list_for_customer(self, customer_id: int) -> list[Activity]:
        return await self.repository.list_for_customer(customer_id)

    async def record_activity(
        self,
        *,
        customer_id: int,
        type: str,
        amount: Decimal = Decimal("0"),
        reward_used: Optional[str] = None,
    ) -> Activity:
        """Store an activity; a visit also bumps the customer's visit count and spend."""
        if type not in ACTIVITY_TYPES:
            raise InvalidActivityError(f"Unknown activity type: {type!r}")
        if amount < 0:
            raise InvalidActivityError("Amount cannot be negative")
        if await self.customers.get_by_id(customer_id) is None:
            raise CustomerNotFoundError(customer_id)

        activity = await self.repository.add(
            Activity(
                customer_id=customer_id,
                type=type,
                amount=amount,
                reward_used=reward_used,
                created_at=utcnow(),
            )
        )
        if type == "visit":
            await self.customers.record_visit(customer_id, amount, activity.created_at)
            logger.info("Visit recorded for customer %s (%s)", customer_id, amount)
        return activity
