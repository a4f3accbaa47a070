"""Request dependencies for FastAPI.

The application keeps its settings and in-memory store on ``app.state``;
these helpers hand them to route handlers through dependency injection.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends, Request

from veg24.config import Settings
from veg24.i18n.detect import COOKIE_NAME, QUERY_PARAM, detect_locale
from veg24.store import Store


def get_app_settings(request: Request) -> Settings:
    """Get settings from app state.

    Args:
        request: FastAPI request object.

    Returns:
        Settings the application was created with.
    """
    settings: Any = request.app.state.settings
    return settings  # type: ignore[no-any-return]


def get_store(request: Request) -> Store:
    """Get the in-memory store from app state."""
    store: Any = request.app.state.store
    return store  # type: ignore[no-any-return]


def get_locale(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> str:
    """Detect the locale for a request.

    Looks at the lng query parameter, the i18next cookie and the
    Accept-Language header, falling back to the default locale.
    """
    return detect_locale(
        query=request.query_params.get(QUERY_PARAM),
        cookie=request.cookies.get(COOKIE_NAME),
        accept_language=request.headers.get("accept-language"),
        supported=settings.supported_locales,
        fallback=settings.default_locale,
    )


AppSettings = Annotated[Settings, Depends(get_app_settings)]
AppStore = Annotated[Store, Depends(get_store)]
RequestLocale = Annotated[str, Depends(get_locale)]
