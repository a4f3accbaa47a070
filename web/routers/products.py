"""Product catalog endpoints."""

from fastapi import APIRouter

from veg24.catalog.service import list_products
from veg24.types import LocalizedProduct
from web.deps import AppStore, RequestLocale

router = APIRouter()


@router.get("", response_model=None)
def list_products_endpoint(
    store: AppStore, locale: RequestLocale
) -> list[LocalizedProduct]:
    """List products localized for the detected locale.

    Returns:
        Every catalog product, in catalog order.
    """
    return list_products(store.products, locale)
