"""Pydantic models for the OTP flow."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A user created by a successful OTP verification."""

    id: int = Field(ge=1)
    phone: str
    name: str


class SendOtpRequest(BaseModel):
    """Body of a send-otp request. Validation happens in the service."""

    model_config = ConfigDict(extra="ignore")

    phone: str | None = None


class VerifyOtpRequest(BaseModel):
    """Body of a verify-otp request."""

    model_config = ConfigDict(extra="ignore")

    phone: str | None = None
    otp: str | None = None


class OtpDispatch(BaseModel):
    """Response to a send-otp request.

    The code is echoed back because no SMS is ever sent.
    """

    success: bool = True
    message: str = "OTP sent successfully"
    demo_otp: str
    expires_in: int = Field(serialization_alias="expiresIn")


class AuthSession(BaseModel):
    """Response to a successful verify-otp request."""

    success: bool = True
    token: str
    user: User
