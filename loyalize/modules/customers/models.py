"""Domain models for customers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(slots=True)
class Customer:
    id: int
    name: str
    email: str
    tier: str
    segment: str
    visits: int
    spend: Decimal
    phone: Optional[str] = None
    last_visit: Optional[datetime] = None
    avatar: Optional[str] = None


@dataclass(slots=True)
class CustomerCreateInput:
    name: str
    email: str
    phone: Optional[str] = None
    tier: str = "Silver"
    segment: str = "Occasional"
    visits: int = 0
    spend: Decimal = Decimal("0")


def initials(name: str) -> str:
    """Avatar text: first letter of each word, upper-cased, at most two letters."""
    return "".join(part[0] for part in name.split() if part).upper()[:2]
