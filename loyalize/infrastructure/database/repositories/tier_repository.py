"""SQLAlchemy repository for loyalty tiers."""

from __future__ import annotations

from sqlalchemy import select

from loyalize.db.models import Tier
from loyalize.modules.common.repository import AsyncRepository


class SqlTierRepository(AsyncRepository[Tier]):
    model = Tier

    async def list_tiers(self) -> list[Tier]:
        result = await self.session.execute(select(Tier).order_by(Tier.threshold, Tier.id))
        return list(result.scalars().all())
