"""Configuration settings for veg24.

Uses pydantic-settings for config parsing from environment variables
and defaults. Configuration precedence: CLI flags > env vars > defaults.
"""

import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from veg24.types import DEFAULT_LOCALE, Locale

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Never printed by print_settings_json
SECRET_FIELDS = {"demo_otp"}

_log_handler: logging.Handler | None = None


def _default_locales_dir() -> Path:
    """Return the default directory for generated locale bundles."""
    return Path.cwd() / "locales"


def _default_static_dir() -> Path:
    """Return the default frontend directory served as static files."""
    return Path.cwd().parent / "frontend"


class Settings(BaseSettings):
    """Application settings.

    Settings are loaded from environment variables with the VEG24_ prefix.
    The listen port is also read from a plain PORT variable.
    """

    model_config = SettingsConfigDict(
        env_prefix="VEG24_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(
        default=5000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("VEG24_PORT", "PORT", "port"),
        description="Port to listen on",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by CORS",
    )

    # Paths
    locales_dir: Path = Field(
        default_factory=_default_locales_dir,
        description="Directory where translation bundles are written",
    )
    static_dir: Path = Field(
        default_factory=_default_static_dir,
        description="Frontend directory served as static files",
    )

    # Localization
    default_locale: str = Field(
        default=DEFAULT_LOCALE.value, description="Fallback locale"
    )
    supported_locales: list[str] = Field(
        default_factory=lambda: [locale.value for locale in Locale],
        description="Locales offered to clients",
    )

    # Demo OTP
    demo_otp: str = Field(
        default="123456",
        min_length=6,
        max_length=6,
        description="Fixed code accepted by the demo OTP flow",
    )
    otp_expires_in: int = Field(
        default=120,
        ge=1,
        description="Advertised OTP lifetime in seconds",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )


def get_settings() -> Settings:
    """Get the application settings.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()


def print_settings_json(settings: Settings | None = None) -> str:
    """Render effective settings as JSON.

    Args:
        settings: Optional settings instance; uses default if not provided.

    Returns:
        JSON string of effective settings.
    """
    if settings is None:
        settings = get_settings()
    return settings.model_dump_json(indent=2, exclude=SECRET_FIELDS)


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single stream handler.

    Safe to call more than once; later calls only adjust the level.

    Args:
        level: Logging level name.
    """
    global _log_handler

    root = logging.getLogger()
    if _log_handler is None:
        _log_handler = logging.StreamHandler(sys.stdout)
        _log_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    if _log_handler not in root.handlers:
        root.addHandler(_log_handler)
    root.setLevel(level)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


__all__ = ["Settings", "configure_logging", "get_settings", "print_settings_json"]
