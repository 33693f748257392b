"""Headline figures for the back-office dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.db.models import Activity, Customer


@dataclass(slots=True)
class DashboardStats:
    total_revenue: float
    active_members: int
    loyalty_visits: int
    rewards_redeemed: int


class DashboardService:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @classmethod
    def with_session(cls, session: AsyncSession) -> "DashboardService":
        return cls(session)

    async def stats(self) -> DashboardStats:
        customer_totals = select(
            func.coalesce(func.sum(Customer.spend), 0),
            func.count(Customer.id),
            func.coalesce(func.sum(Customer.visits), 0),
        )
        revenue, members, visits = (await self._session.execute(customer_totals)).one()

        rewards = await self._session.scalar(
            select(func.count(Activity.id)).where(Activity.type == "reward")
        )
        return DashboardStats(
            total_revenue=float(revenue),
            active_members=int(members),
            loyalty_visits=int(visits),
            rewards_redeemed=int(rewards or 0),
        )
