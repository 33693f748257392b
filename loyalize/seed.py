"""
Populate an empty database with sample tiers, customers and activity.

    python -m loyalize.seed
"""
import asyncio
import logging
from decimal import Decimal

from loyalize.core.config import get_settings
from loyalize.core.logging import configure_logging
from loyalize.infrastructure.database.session import dispose_engine, get_session_factory, init_db
from loyalize.modules.activities.service import ActivityService
from loyalize.modules.customers import CustomerCreateInput
from loyalize.modules.customers.service import CustomerService
from loyalize.modules.tiers.service import TierService

logger = logging.getLogger("loyalize.seed")

SEED_TIERS = [
    {
        "name": "Silver",
        "requirement": "Join Loyalize",
        "threshold": Decimal("0"),
        "benefits": ["5% Cashback", "Birthday Dessert", "Exclusive Newsletter"],
    },
    {
        "name": "Gold",
        "requirement": "Spend $500+",
        "threshold": Decimal("500"),
        "benefits": ["10% Cashback", "Priority Seating", "Free Drink every visit", "Skip the Line"],
    },
    {
        "name": "Platinum",
        "requirement": "Spend $2,500+",
        "threshold": Decimal("2500"),
        "benefits": [
            "15% Cashback",
            "Chef's Table Access",
            "Personal Concierge",
            "Private Event Invite",
            "Zero Service Fees",
        ],
    },
]

SEED_CUSTOMERS = [
    CustomerCreateInput("Sofia Rodriguez", "sofia.r@example.com", tier="Platinum", segment="High Spender", visits=42, spend=Decimal("3240")),
    CustomerCreateInput("James Chen", "james.c@example.com", tier="Gold", segment="Regular", visits=18, spend=Decimal("1150")),
    CustomerCreateInput("Emily Watson", "emily.w@example.com", tier="Silver", segment="Occasional", visits=5, spend=Decimal("240")),
    CustomerCreateInput("Michael Johnson", "michael.j@example.com", tier="Platinum", segment="VIP", visits=56, spend=Decimal("4800")),
    CustomerCreateInput("Sarah Miller", "sarah.m@example.com", tier="Gold", segment="Regular", visits=22, spend=Decimal("1350")),
    CustomerCreateInput("David Kim", "david.k@example.com", tier="Silver", segment="Growing", visits=8, spend=Decimal("450")),
    CustomerCreateInput("Jessica Taylor", "jessica.t@example.com", tier="Platinum", segment="High Spender", visits=38, spend=Decimal("2900")),
    CustomerCreateInput("Robert Anderson", "robert.a@example.com", tier="Silver", segment="At Risk", visits=3, spend=Decimal("150")),
]


async def seed() -> None:
    await init_db()

    async with get_session_factory()() as db:
        customers = CustomerService.with_session(db)
        if await customers.list_customers():
            logger.info("Database already seeded, skipping")
            return

        tiers = TierService.with_session(db)
        for tier in SEED_TIERS:
            await tiers.create_tier(**tier)

        created = [await customers.create_customer(payload) for payload in SEED_CUSTOMERS]

        activities = ActivityService.with_session(db)
        await activities.record_activity(customer_id=created[0].id, type="visit", amount=Decimal("120"), reward_used="Free Dessert")
        await activities.record_activity(customer_id=created[3].id, type="visit", amount=Decimal("350"))
        await activities.record_activity(customer_id=created[1].id, type="reward", reward_used="Birthday Discount (20%)")
        await db.commit()

        logger.info("Seeded %s tiers and %s customers", len(SEED_TIERS), len(created))


async def main() -> None:
    configure_logging(get_settings())
    try:
        await seed()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
