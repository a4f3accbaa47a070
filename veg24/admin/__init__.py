"""Admin dashboard statistics."""

from veg24.admin.service import LOW_STOCK_COUNT, dashboard_stats

__all__ = ["LOW_STOCK_COUNT", "dashboard_stats"]
