"""SQLAlchemy repository for customer activity."""

from __future__ import annotations

from sqlalchemy import desc, select

from loyalize.db.models import Activity
from loyalize.modules.common.repository import AsyncRepository


class SqlActivityRepository(AsyncRepository[Activity]):
    model = Activity

    async def list_recent(self, limit: int) -> list[Activity]:
        stmt = select(Activity).order_by(desc(Activity.created_at), desc(Activity.id)).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_for_customer(self, customer_id: int) -> list[Activity]:
        stmt = (
            select(Activity)
            .where(Activity.customer_id == customer_id)
            .order_by(desc(Activity.created_at), desc(Activity.id))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
