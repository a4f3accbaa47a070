"""Demo OTP authentication endpoints.

- POST /api/auth/send-otp - "Send" the demo code to a phone number
- POST /api/auth/verify-otp - Check the code and register a user

Rejected input raises AuthError, which the application turns into a 400
payload (see web.errors).
"""

from typing import Any

from fastapi import APIRouter

from veg24.auth.schema import SendOtpRequest, VerifyOtpRequest
from veg24.auth.service import send_otp, verify_otp
from web.deps import AppSettings, AppStore

router = APIRouter()


@router.post("/send-otp")
def send_otp_endpoint(body: SendOtpRequest, settings: AppSettings) -> dict[str, Any]:
    """Send an OTP.

    Args:
        body: Request body with the phone number.
        settings: Application settings.

    Returns:
        Dispatch result including the demo code.
    """
    dispatch = send_otp(body.phone, settings=settings)
    return dispatch.model_dump(by_alias=True)


@router.post("/verify-otp")
def verify_otp_endpoint(
    body: VerifyOtpRequest, settings: AppSettings, store: AppStore
) -> dict[str, Any]:
    """Verify an OTP.

    Args:
        body: Request body with phone and code.
        settings: Application settings.
        store: In-memory store receiving the new user.

    Returns:
        Token and user.
    """
    session = verify_otp(
        store.users,
        body.phone,
        body.otp,
        settings=settings,
        lock=store.users_lock,
    )
    return session.model_dump()
