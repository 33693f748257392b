"""SQLAlchemy-backed repository implementations."""

from .activity_repository import SqlActivityRepository
from .customer_repository import SqlCustomerRepository
from .feedback_repository import SqlFeedbackRepository
from .table_repository import SqlTableRepository, SqlTableSessionRepository
from .tier_repository import SqlTierRepository
from .wallet_repository import SqlWalletRepository

__all__ = [
    "SqlActivityRepository",
    "SqlCustomerRepository",
    "SqlFeedbackRepository",
    "SqlTableRepository",
    "SqlTableSessionRepository",
    "SqlTierRepository",
    "SqlWalletRepository",
]
