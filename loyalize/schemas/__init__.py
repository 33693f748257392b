"""Pydantic schemas used across the project."""
from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from loyalize.modules.wallets.models import MAX_POINTS


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class HealthResponse(ApiModel):
    status: str = "ok"
    version: str


# --- customers -------------------------------------------------------------


class CustomerCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: Optional[str] = Field(default=None, max_length=40)
    tier: str = "Silver"
    segment: str = "Occasional"
    visits: int = Field(default=0, ge=0)
    spend: Decimal = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)


class CustomerUpdate(ApiModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    email: Optional[str] = Field(default=None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: Optional[str] = Field(default=None, max_length=40)
    tier: Optional[str] = None
    segment: Optional[str] = None
    visits: Optional[int] = Field(default=None, ge=0)
    spend: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)


class CustomerResponse(ApiModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    tier: str
    segment: str
    visits: int
    spend: Decimal
    last_visit: Optional[datetime] = None
    avatar: Optional[str] = None


# --- activity --------------------------------------------------------------


class ActivityCreate(ApiModel):
    customer_id: int = Field(..., gt=0)
    type: Literal["visit", "reward", "signup"]
    amount: Decimal = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    reward_used: Optional[str] = Field(default=None, max_length=255)


class ActivityResponse(ApiModel):
    id: int
    customer_id: int
    type: str
    amount: Optional[Decimal] = None
    reward_used: Optional[str] = None
    created_at: datetime


# --- tiers -----------------------------------------------------------------


class TierCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=50)
    requirement: str = Field(..., min_length=1, max_length=255)
    threshold: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    benefits: list[str] = Field(default_factory=list)


class TierUpdate(ApiModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    requirement: Optional[str] = Field(default=None, min_length=1, max_length=255)
    threshold: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    benefits: Optional[list[str]] = None


class TierResponse(ApiModel):
    id: int
    name: str
    requirement: str
    threshold: Decimal
    benefits: list[str]


# --- tables & seating ------------------------------------------------------

TableStatus = Literal["available", "occupied", "reserved"]


class TableCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=50)
    capacity: int = Field(default=4, ge=1, le=20)
    location: str = "Main"
    status: TableStatus = "available"
    current_customer_id: Optional[int] = None
    notes: Optional[str] = None


class TableUpdate(ApiModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    capacity: Optional[int] = Field(default=None, ge=1, le=20)
    location: Optional[str] = None
    status: Optional[TableStatus] = None
    current_customer_id: Optional[int] = None
    notes: Optional[str] = None


class TableResponse(ApiModel):
    id: int
    name: str
    capacity: int
    location: str
    status: str
    current_customer_id: Optional[int] = None
    notes: Optional[str] = None


class TableSessionCreate(ApiModel):
    table_id: int = Field(..., gt=0)
    customer_id: Optional[int] = Field(default=None, gt=0)
    party_size: int = Field(default=2, ge=1)


class TableSessionUpdate(ApiModel):
    status: Optional[Literal["seated", "cleared"]] = None
    party_size: Optional[int] = Field(default=None, ge=1)
    ended_at: Optional[datetime] = None


class TableSessionResponse(ApiModel):
    id: int
    table_id: int
    customer_id: Optional[int] = None
    party_size: int
    status: str
    started_at: datetime
    ended_at: Optional[datetime] = None


# --- feedback --------------------------------------------------------------


class FeedbackCreate(ApiModel):
    customer_id: Optional[int] = Field(default=None, gt=0)
    rating: int = Field(..., ge=1, le=5)
    channel: str = Field(default="in-app", max_length=30)
    comment: Optional[str] = None


class FeedbackResponse(ApiModel):
    id: int
    customer_id: Optional[int] = None
    rating: int
    channel: str
    comment: Optional[str] = None
    created_at: datetime


class ChannelCountResponse(ApiModel):
    channel: str
    count: int


class RatingCountResponse(ApiModel):
    rating: int
    count: int


class FeedbackStatsResponse(ApiModel):
    avg_rating: float
    total_reviews: int
    positive_percent: int
    by_channel: list[ChannelCountResponse]
    by_rating: list[RatingCountResponse]


class DashboardStatsResponse(ApiModel):
    total_revenue: float
    active_members: int
    loyalty_visits: int
    rewards_redeemed: int


# --- wallets ---------------------------------------------------------------


class WalletCreate(ApiModel):
    customer_id: int = Field(..., gt=0)
    balance: int = Field(default=0, ge=-MAX_POINTS, le=MAX_POINTS)
    status: Literal["active", "inactive"] = "active"


class WalletStatusUpdate(ApiModel):
    status: Literal["active", "inactive"]


class WalletResponse(ApiModel):
    id: int
    customer_id: int
    balance: int
    status: str
    created_at: datetime
    updated_at: datetime


class WalletTransactionCreate(ApiModel):
    type: Literal["credit", "debit"]
    amount: int = Field(..., gt=0, le=MAX_POINTS)
    description: Optional[str] = Field(default=None, max_length=255)


class WalletTransactionResponse(ApiModel):
    id: int
    wallet_id: int
    type: str
    amount: int
    description: Optional[str] = None
    created_at: datetime


class WalletSummaryEntryResponse(ApiModel):
    wallet: WalletResponse
    customer_name: Optional[str] = None


class WalletSummaryResponse(ApiModel):
    total_wallets: int
    active_wallets: int
    total_points: int
    wallets: list[WalletSummaryEntryResponse]
