"""OTP service.

Both operations are stubs: the code is a fixed value from settings and the
token is not checked anywhere. Verification appends a new user on every
success, even for a phone number that has been seen before.
"""

import contextlib
import logging
import threading
import time

from veg24.auth.schema import AuthSession, OtpDispatch, User
from veg24.config import Settings, get_settings

logger = logging.getLogger(__name__)

PHONE_LENGTH = 10
TOKEN_PREFIX = "demo-token-"


class AuthError(Exception):
    """Base class for OTP flow rejections."""

    code = "auth_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidPhoneError(AuthError):
    """Raised when the phone number is missing or not 10 characters."""

    code = "invalid_phone"

    def __init__(self, phone: str | None = None) -> None:
        self.phone = phone
        super().__init__("Invalid phone number")


class MissingCredentialsError(AuthError):
    """Raised when verify is called without both phone and code."""

    code = "missing_credentials"

    def __init__(self) -> None:
        super().__init__("Phone and OTP required")


class InvalidOtpError(AuthError):
    """Raised when the submitted code does not match."""

    code = "invalid_otp"

    def __init__(self) -> None:
        super().__init__("Invalid OTP")


def send_otp(phone: str | None, settings: Settings | None = None) -> OtpDispatch:
    """Pretend to send an OTP to a phone number.

    Args:
        phone: Phone number; must be exactly 10 characters.
        settings: Optional settings; uses default if not provided.

    Returns:
        Dispatch result including the demo code.

    Raises:
        InvalidPhoneError: If phone is missing or has the wrong length.
    """
    if settings is None:
        settings = get_settings()
    if not phone or len(phone) != PHONE_LENGTH:
        raise InvalidPhoneError(phone)

    logger.info("Demo OTP for %s: %s", phone, settings.demo_otp)
    return OtpDispatch(demo_otp=settings.demo_otp, expires_in=settings.otp_expires_in)


def make_token() -> str:
    """Return a demo token stamped with the current epoch milliseconds."""
    return f"{TOKEN_PREFIX}{time.time_ns() // 1_000_000}"


def verify_otp(
    users: list[User],
    phone: str | None,
    otp: str | None,
    settings: Settings | None = None,
    lock: "threading.Lock | None" = None,
) -> AuthSession:
    """Check a code and register a user.

    Args:
        users: User list to append to.
        phone: Phone number the code was sent to.
        otp: Submitted code.
        settings: Optional settings; uses default if not provided.
        lock: Optional lock held while the id is assigned and the user appended.

    Returns:
        Session with a demo token and the new user.

    Raises:
        MissingCredentialsError: If phone or otp is empty.
        InvalidOtpError: If otp is not the demo code.
    """
    if settings is None:
        settings = get_settings()
    if not phone or not otp:
        raise MissingCredentialsError()
    if otp != settings.demo_otp:
        logger.warning("Rejected OTP for %s", phone)
        raise InvalidOtpError()

    with lock if lock is not None else contextlib.nullcontext():
        user = User(id=len(users) + 1, phone=phone, name=f"User{phone[-4:]}")
        users.append(user)
    logger.info("Registered user %d for %s", user.id, phone)
    return AuthSession(token=make_token(), user=user)


__all__ = [
    "AuthError",
    "InvalidOtpError",
    "InvalidPhoneError",
    "MissingCredentialsError",
    "make_token",
    "send_otp",
    "verify_otp",
]
