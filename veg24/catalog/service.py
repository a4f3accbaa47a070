"""Catalog service: seed data and per-locale rendering."""

from collections.abc import Iterable

from veg24.catalog.schema import Product
from veg24.types import LocalizedProduct

SEED_CATALOG: list[dict[str, object]] = [
    {
        "id": 1,
        "name": {"en": "Tomato", "hi": "टमाटर", "kn": "ಟೊಮೇಟೊ", "mr": "टोमॅटो"},
        "price": {"current": 40, "unit": "kg"},
        "stock": 100,
        "tags": ["daily-fresh", "organic"],
        "image": "https://via.placeholder.com/300x200/FF6B6B/FFFFFF?text=Tomato",
    },
    {
        "id": 2,
        "name": {"en": "Potato", "hi": "आलू", "kn": "ಆಲೂಗಡ್ಡೆ", "mr": "बटाटा"},
        "price": {"current": 30, "unit": "kg"},
        "stock": 50,
        "tags": ["local"],
        "image": "https://via.placeholder.com/300x200/4ECDC4/FFFFFF?text=Potato",
    },
]


def seed_products() -> list[Product]:
    """Build a fresh copy of the startup catalog.

    Returns:
        Products in catalog order.
    """
    return [Product.model_validate(entry) for entry in SEED_CATALOG]


def localize_product(product: Product, locale: str) -> LocalizedProduct:
    """Render a product for one locale.

    The name collapses to a single string and the price to its current
    value; the unit is not part of the storefront payload.

    Args:
        product: Catalog product.
        locale: Locale code.

    Returns:
        Localized product dict.
    """
    return {
        "id": product.id,
        "name": product.display_name(locale),
        "price": product.price.current,
        "stock": product.stock,
        "tags": list(product.tags),
        "image": product.image,
    }


def list_products(products: Iterable[Product], locale: str) -> list[LocalizedProduct]:
    """Render every product for a locale, preserving catalog order."""
    return [localize_product(p, locale) for p in products]


__all__ = ["SEED_CATALOG", "list_products", "localize_product", "seed_products"]
