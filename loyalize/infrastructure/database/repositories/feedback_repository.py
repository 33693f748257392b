"""SQLAlchemy repository for guest feedback."""

from __future__ import annotations

from sqlalchemy import case, desc, func, select

from loyalize.db.models import Feedback
from loyalize.modules.common.repository import AsyncRepository


class SqlFeedbackRepository(AsyncRepository[Feedback]):
    model = Feedback

    async def list_feedback(self) -> list[Feedback]:
        stmt = select(Feedback).order_by(desc(Feedback.created_at), desc(Feedback.id))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def rating_totals(self) -> tuple[float, int, int]:
        """Return (average rating, review count, reviews rated 4 or higher)."""
        stmt = select(
            func.coalesce(func.avg(Feedback.rating), 0),
            func.count(Feedback.id),
            func.coalesce(func.sum(case((Feedback.rating >= 4, 1), else_=0)), 0),
        )
        avg, total, positive = (await self.session.execute(stmt)).one()
        return float(avg), int(total), int(positive)

    async def count_by_channel(self) -> list[tuple[str, int]]:
        stmt = select(Feedback.channel, func.count(Feedback.id)).group_by(Feedback.channel).order_by(Feedback.channel)
        result = await self.session.execute(stmt)
        return [(channel, int(count)) for channel, count in result.all()]

    async def count_by_rating(self) -> list[tuple[int, int]]:
        stmt = select(Feedback.rating, func.count(Feedback.id)).group_by(Feedback.rating).order_by(Feedback.rating)
        result = await self.session.execute(stmt)
        return [(int(rating), int(count)) for rating, count in result.all()]
