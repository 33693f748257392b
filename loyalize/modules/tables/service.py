"""Table and seating domain service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.db.models import RestaurantTable, TableSession, utcnow
from loyalize.infrastructure.database.repositories.customer_repository import SqlCustomerRepository
from loyalize.infrastructure.database.repositories.table_repository import (
    SqlTableRepository,
    SqlTableSessionRepository,
)
from loyalize.modules.customers.exceptions import CustomerNotFoundError
from loyalize.modules.customers.repository import CustomerRepository

from .exceptions import TableNotFoundError, TableOccupiedError, TableSessionClosedError, TableSessionNotFoundError

logger = logging.getLogger(__name__)

AVAILABLE = "available"
OCCUPIED = "occupied"
SEATED = "seated"
CLEARED = "cleared"


@dataclass(slots=True)
class TableService:
    tables: SqlTableRepository
    sessions: SqlTableSessionRepository
    customers: CustomerRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TableService":
        return cls(SqlTableRepository(session), SqlTableSessionRepository(session), SqlCustomerRepository(session))

    async def _ensure_customer(self, customer_id: Optional[int]) -> None:
        if customer_id is not None and await self.customers.get_by_id(customer_id) is None:
            raise CustomerNotFoundError(customer_id)

    async def list_tables(self) -> list[RestaurantTable]:
        return await self.tables.list_tables()

    async def get_table(self, table_id: int) -> RestaurantTable:
        table = await self.tables.get(table_id)
        if table is None:
            raise TableNotFoundError(table_id)
        return table

    async def create_table(self, values: Mapping[str, Any]) -> RestaurantTable:
        await self._ensure_customer(values.get("current_customer_id"))
        return await self.tables.add(RestaurantTable(**values))

    async def update_table(self, table_id: int, changes: Mapping[str, Any]) -> RestaurantTable:
        await self._ensure_customer(changes.get("current_customer_id"))
        table = await self.tables.patch(table_id, changes)
        if table is None:
            raise TableNotFoundError(table_id)
        return table

    async def delete_table(self, table_id: int) -> None:
        """Remove a table together with its finished sessions; refused while a party is seated."""
        await self.get_table(table_id)
        if await self.sessions.has_seated(table_id):
            raise TableOccupiedError(table_id)
        await self.sessions.delete_for_table(table_id)
        await self.tables.remove(table_id)

    async def list_sessions(self, *, active_only: bool = False) -> list[TableSession]:
        return await self.sessions.list_sessions(seated_only=active_only)

    async def seat(self, *, table_id: int, customer_id: Optional[int], party_size: int) -> TableSession:
        """Open a seating session and mark the table occupied."""
        table = await self.get_table(table_id)
        if table.status == OCCUPIED or await self.sessions.has_seated(table_id):
            raise TableOccupiedError(table_id)
        await self._ensure_customer(customer_id)

        session = await self.sessions.add(
            TableSession(
                table_id=table_id,
                customer_id=customer_id,
                party_size=party_size,
                status=SEATED,
                started_at=utcnow(),
            )
        )
        await self.tables.patch(table_id, {"status": OCCUPIED, "current_customer_id": customer_id})
        logger.info("Table %s seated (session %s, party of %s)", table.name, session.id, party_size)
        return session

    async def update_session(self, session_id: int, changes: Mapping[str, Any]) -> TableSession:
        """Patch a session. Clearing a seated session frees its table unless another party holds it."""
        session = await self.sessions.get(session_id)
        if session is None:
            raise TableSessionNotFoundError(session_id)

        if session.status == CLEARED and changes.get("status") == SEATED:
            raise TableSessionClosedError(session_id)

        changes = dict(changes)
        clearing = session.status == SEATED and changes.get("status") == CLEARED
        if clearing and changes.get("ended_at") is None:
            changes["ended_at"] = utcnow()
        if session.status == CLEARED and changes.get("status") == CLEARED:
            # already finished; keep the original end time
            changes.pop("ended_at", None)

        session = await self.sessions.patch(session_id, changes)
        if clearing and not await self.sessions.has_seated(session.table_id, excluding=session_id):
            await self.tables.patch(session.table_id, {"status": AVAILABLE, "current_customer_id": None})
            logger.info("Table %s cleared (session %s)", session.table_id, session_id)
        return session
