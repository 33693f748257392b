"""Dashboard headline figures."""

from .service import DashboardService, DashboardStats

__all__ = ["DashboardService", "DashboardStats"]
