"""Demo phone-OTP authentication.

Public API:
- send_otp, verify_otp: the two steps of the OTP flow
- User, OtpDispatch, AuthSession: pydantic models
- AuthError and subclasses: input rejections
"""

from veg24.auth.schema import AuthSession, OtpDispatch, User
from veg24.auth.service import (
    AuthError,
    InvalidOtpError,
    InvalidPhoneError,
    MissingCredentialsError,
    send_otp,
    verify_otp,
)

__all__ = [
    "AuthError",
    "AuthSession",
    "InvalidOtpError",
    "InvalidPhoneError",
    "MissingCredentialsError",
    "OtpDispatch",
    "User",
    "send_otp",
    "verify_otp",
]
