"""Configuration endpoints."""

from typing import Any

from fastapi import APIRouter

from web.deps import AppSettings

router = APIRouter()


@router.get("")
def get_config(settings: AppSettings) -> dict[str, Any]:
    """Get effective configuration.

    Returns:
        Current configuration as JSON.
    """
    return {
        "host": settings.host,
        "port": settings.port,
        "locales_dir": str(settings.locales_dir),
        "static_dir": str(settings.static_dir),
        "default_locale": settings.default_locale,
        "supported_locales": settings.supported_locales,
        "otp_expires_in": settings.otp_expires_in,
        "cors_origins": settings.cors_origins,
        "log_level": settings.log_level,
    }
