"""Tier domain service."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.db.models import Tier
from loyalize.infrastructure.database.repositories.tier_repository import SqlTierRepository

from .exceptions import TierNotFoundError


@dataclass(slots=True)
class TierService:
    repository: SqlTierRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TierService":
        return cls(SqlTierRepository(session))

    async def list_tiers(self) -> list[Tier]:
        return await self.repository.list_tiers()

    async def create_tier(
        self,
        *,
        name: str,
        requirement: str,
        threshold: Decimal,
        benefits: list[str],
    ) -> Tier:
        return await self.repository.add(
            Tier(name=name, requirement=requirement, threshold=threshold, benefits=list(benefits))
        )

    async def update_tier(self, tier_id: int, changes: Mapping[str, Any]) -> Tier:
        tier = await self.repository.patch(tier_id, changes)
        if tier is None:
            raise TierNotFoundError(tier_id)
        return tier
