"""SQLAlchemy repositories for restaurant tables and seating sessions."""

from __future__ import annotations

from sqlalchemy import delete, desc, select

from loyalize.db.models import RestaurantTable, TableSession
from loyalize.modules.common.repository import AsyncRepository


class SqlTableRepository(AsyncRepository[RestaurantTable]):
    model = RestaurantTable

    async def list_tables(self) -> list[RestaurantTable]:
        result = await self.session.execute(select(RestaurantTable).order_by(RestaurantTable.name))
        return list(result.scalars().all())


class SqlTableSessionRepository(AsyncRepository[TableSession]):
    model = TableSession

    async def list_sessions(self, *, seated_only: bool = False) -> list[TableSession]:
        stmt = select(TableSession).order_by(desc(TableSession.started_at), desc(TableSession.id))
        if seated_only:
            stmt = stmt.where(TableSession.status == "seated")
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def has_seated(self, table_id: int, *, excluding: int | None = None) -> bool:
        stmt = select(TableSession.id).where(TableSession.table_id == table_id, TableSession.status == "seated")
        if excluding is not None:
            stmt = stmt.where(TableSession.id != excluding)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def delete_for_table(self, table_id: int) -> None:
        await self.session.execute(
            delete(TableSession)
            .where(TableSession.table_id == table_id)
            .execution_options(synchronize_session=False)
        )
