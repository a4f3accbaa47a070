"""FastAPI application factory and main app.

This module creates the FastAPI application with all routers, middleware
and the in-memory store configured.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from veg24 import __version__
from veg24.config import Settings, configure_logging, get_settings
from veg24.i18n.io import write_bundles
from veg24.store import Store
from web.errors import register_exception_handlers
from web.middleware import SecurityHeadersMiddleware
from web.routers import admin, auth, config, health, products, translations
from web.routers.health import ENDPOINTS

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager.

    Writes the translation bundles on startup.
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    write_bundles(settings.locales_dir)
    logger.info(
        "VEG24 backend started on http://%s:%d", settings.host, settings.port
    )
    for endpoint in ENDPOINTS:
        logger.info("  %s", endpoint)
    yield


def create_app(
    settings: Settings | None = None, store: Store | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings; loaded from the environment if not provided.
        store: Optional store; a freshly seeded one if not provided.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()

    application = FastAPI(
        title="VEG24 Fresh API",
        description="Demo backend for the VEG24 Fresh grocery storefront",
        version=__version__,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.store = store if store is not None else Store()

    application.add_middleware(SecurityHeadersMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(application)

    # Include routers
    application.include_router(health.router, tags=["health"])
    application.include_router(config.router, prefix="/config", tags=["config"])
    application.include_router(
        translations.router, prefix="/api/translations", tags=["translations"]
    )
    application.include_router(
        products.router, prefix="/api/products", tags=["products"]
    )
    application.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    application.include_router(admin.router, prefix="/api/admin", tags=["admin"])

    # Frontend assets; mounted last so API routes take precedence
    if settings.static_dir.is_dir():
        application.mount(
            "/",
            StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

    return application


# Create the default application instance
app = create_app()
