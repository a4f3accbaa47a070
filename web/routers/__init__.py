"""Router modules for FastAPI web API."""

from web.routers import admin, auth, config, health, products, translations

__all__ = ["admin", "auth", "config", "health", "products", "translations"]
