"""Repository protocol for customers."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Iterable, Mapping, Protocol, Sequence

from .models import Customer


class CustomerRepository(Protocol):
    """Abstract repository interface for customer persistence."""

    async def get_by_id(self, customer_id: int) -> Customer | None:
        ...

    async def get_by_email(self, email: str) -> Customer | None:
        ...

    async def list_customers(self) -> Sequence[Customer]:
        ...

    async def get_names(self, customer_ids: Iterable[int]) -> dict[int, str]:
        ...

    async def create_customer(self, values: Mapping[str, Any]) -> Customer:
        ...

    async def update_customer(self, customer_id: int, changes: Mapping[str, Any]) -> Customer | None:
        ...

    async def has_wallet(self, customer_id: int) -> bool:
        ...

    async def delete_customer(self, customer_id: int) -> bool:
        ...

    async def record_visit(self, customer_id: int, amount: Decimal, visited_at: datetime) -> Customer | None:
        ...
