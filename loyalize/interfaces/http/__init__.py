from fastapi import APIRouter

from loyalize.interfaces.http.routers import activities, customers, dashboard, feedback, tables, tiers, wallets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
    router.include_router(customers.router, prefix="/customers", tags=["customers"])
    router.include_router(activities.router, prefix="/activities", tags=["activities"])
    router.include_router(tiers.router, prefix="/tiers", tags=["tiers"])
    router.include_router(tables.router, prefix="/tables", tags=["tables"])
    router.include_router(tables.sessions_router, prefix="/table-sessions", tags=["tables"])
    router.include_router(feedback.router, prefix="/feedback", tags=["feedback"])
    router.include_router(wallets.router, prefix="/wallets", tags=["wallets"])
    return router


__all__ = [
    "create_api_router",
]
