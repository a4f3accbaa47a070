"""FastAPI web application for the VEG24 Fresh storefront.

All business logic is delegated to core modules in veg24/.
"""

from web.app import app, create_app

__all__ = ["app", "create_app"]
