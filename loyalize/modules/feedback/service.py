"""Feedback domain service."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.db.models import Feedback, utcnow
from loyalize.infrastructure.database.repositories.customer_repository import SqlCustomerRepository
from loyalize.infrastructure.database.repositories.feedback_repository import SqlFeedbackRepository
from loyalize.modules.customers.exceptions import CustomerNotFoundError
from loyalize.modules.customers.repository import CustomerRepository

from .models import ChannelCount, FeedbackStats, RatingCount


@dataclass(slots=True)
class FeedbackService:
    repository: SqlFeedbackRepository
    customers: CustomerRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "FeedbackService":
        return cls(SqlFeedbackRepository(session), SqlCustomerRepository(session))

    async def list_feedback(self) -> list[Feedback]:
        return await self.repository.list_feedback()

    async def create_feedback(
        self,
        *,
        rating: int,
        channel: str = "in-app",
        customer_id: Optional[int] = None,
        comment: Optional[str] = None,
    ) -> Feedback:
        if customer_id is not None and await self.customers.get_by_id(customer_id) is None:
            raise CustomerNotFoundError(customer_id)
        return await self.repository.add(
            Feedback(
                customer_id=customer_id,
                rating=rating,
                channel=channel,
                comment=comment,
                created_at=utcnow(),
            )
        )

    async def stats(self) -> FeedbackStats:
        avg_rating, total, positive = await self.repository.rating_totals()
        return FeedbackStats(
            avg_rating=avg_rating,
            total_reviews=total,
            positive_percent=math.floor(positive * 100 / total + 0.5) if total else 0,
            by_channel=[ChannelCount(channel, count) for channel, count in await self.repository.count_by_channel()],
            by_rating=[RatingCount(rating, count) for rating, count in await self.repository.count_by_rating()],
        )
