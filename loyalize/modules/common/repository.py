"""Repository abstractions for domain services."""

from __future__ import annotations

from typing import Any, Generic, Mapping, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class AsyncRepository(Generic[ModelT]):
    """Base repository exposing the SQLAlchemy session and single-row helpers."""

    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def add(self, instance: ModelT) -> ModelT:
        self.session.add(instance)
        await self.session.flush()
        return instance

    async def get(self, pk: int) -> ModelT | None:
        return await self.session.get(self.model, pk)

    async def patch(self, pk: int, changes: Mapping[str, Any]) -> ModelT | None:
        instance = await self.get(pk)
        if instance is None:
            return None
        for key, value in changes.items():
            setattr(instance, key, value)
        await self.session.flush()
        return instance

    async def remove(self, pk: int) -> bool:
        instance = await self.get(pk)
        if instance is None:
            return False
        await self.session.delete(instance)
        await self.session.flush()
        return True
