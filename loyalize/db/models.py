"""SQLAlchemy ORM models."""
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    BigInteger,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.types import TypeDecorator

from loyalize.infrastructure.database.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UtcDateTime(TypeDecorator):
    """Timezone-aware UTC datetimes on every backend.

    SQLite drops the offset on storage, so values read back are tagged UTC again.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(40))
    tier = Column(String(50), nullable=False, default="Silver")
    segment = Column(String(50), nullable=False, default="Occasional")
    visits = Column(Integer, nullable=False, default=0)
    spend = Column(Numeric(10, 2), nullable=False, default=0)
    last_visit = Column(UtcDateTime())
    avatar = Column(String(4))

    activities = relationship("Activity", back_populates="customer", passive_deletes=True)


class Activity(Base):
    __tablename__ = "activity"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    type = Column(String(20), nullable=False)  # visit, reward, signup
    amount = Column(Numeric(10, 2), default=0)
    reward_used = Column(String(255))
    created_at = Column(UtcDateTime(), nullable=False, default=utcnow)

    customer = relationship("Customer", back_populates="activities")


class Tier(Base):
    __tablename__ = "tiers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    requirement = Column(String(255), nullable=False)
    threshold = Column(Numeric(10, 2), nullable=False)
    benefits = Column(JSON, nullable=False, default=list)


class RestaurantTable(Base):
    __tablename__ = "restaurant_tables"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    capacity = Column(Integer, nullable=False, default=4)
    location = Column(String(50), nullable=False, default="Main")
    status = Column(String(20), nullable=False, default="available")  # available, occupied, reserved
    current_customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True)
    notes = Column(Text)


class TableSession(Base):
    __tablename__ = "table_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    table_id = Column(Integer, ForeignKey("restaurant_tables.id"), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True)
    party_size = Column(Integer, nullable=False, default=2)
    status = Column(String(20), nullable=False, default="seated")  # seated, cleared
    started_at = Column(UtcDateTime(), nullable=False, default=utcnow)
    ended_at = Column(UtcDateTime())

    table = relationship("RestaurantTable")


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True)
    rating = Column(Integer, nullable=False)
    channel = Column(String(30), nullable=False, default="in-app")
    comment = Column(Text)
    created_at = Column(UtcDateTime(), nullable=False, default=utcnow)


class Wallet(Base):
    __tablename__ = "wallets"
    __table_args__ = (UniqueConstraint("customer_id", name="uq_wallets_customer_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False)
    balance = Column(BigInteger, nullable=False, default=0)
    status = Column(String(20), nullable=False, default="active")  # active, inactive
    created_at = Column(UtcDateTime(), nullable=False, default=utcnow)
    updated_at = Column(UtcDateTime(), nullable=False, default=utcnow)

    customer = relationship("Customer")
    transactions = relationship("WalletTransaction", back_populates="wallet")


class WalletTransaction(Base):
    __tablename__ = "wallet_transactions"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_wallet_transactions_amount_positive"),
        CheckConstraint("type IN ('credit', 'debit')", name="ck_wallet_transactions_type"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    wallet_id = Column(Integer, ForeignKey("wallets.id"), nullable=False, index=True)
    type = Column(String(10), nullable=False)  # credit, debit
    amount = Column(BigInteger, nullable=False)
    description = Column(String(255))
    created_at = Column(UtcDateTime(), nullable=False, default=utcnow)

    wallet = relationship("Wallet", back_populates="transactions")
