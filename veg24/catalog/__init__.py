"""Product catalog.

Public API:
- Product, Price: pydantic models for catalog entries
- seed_products: build the startup catalog
- localize_product, list_products: render products for a locale
"""

from veg24.catalog.schema import Price, Product
from veg24.catalog.service import list_products, localize_product, seed_products

__all__ = [
    "Price",
    "Product",
    "list_products",
    "localize_product",
    "seed_products",
]
