"""Admin endpoints."""

from typing import Any

from fastapi import APIRouter

from veg24.admin.service import dashboard_stats
from web.deps import AppStore

router = APIRouter()


@router.get("/dashboard")
def dashboard(store: AppStore) -> dict[str, Any]:
    """Get dashboard statistics."""
    return dashboard_stats(store.products)
