"""Dashboard statistics.

Revenue, order and customer figures are fixed demo values; only the
product total reflects the live catalog.
"""

from collections.abc import Sequence
from typing import Any

from veg24.catalog.schema import Product

LOW_STOCK_COUNT = 2


def dashboard_stats(products: Sequence[Product]) -> dict[str, Any]:
    """Build the admin dashboard payload.

    Args:
        products: Current catalog.

    Returns:
        Dashboard response body.
    """
    return {
        "success": True,
        "stats": {
            "revenue": {"today": 12500, "weekly": 85000, "monthly": 320000},
            "orders": {"total": 150, "pending": 12, "delivered": 138},
            "customers": {"total": 89, "new": 15},
            "products": {"total": len(products), "lowStock": LOW_STOCK_COUNT},
        },
    }


__all__ = ["LOW_STOCK_COUNT", "dashboard_stats"]
