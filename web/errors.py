"""Error payloads and application-level exception handlers.

Error bodies follow the storefront's shape,
``{"success": false, "message": ...}``, rather than FastAPI's default
``{"detail": ...}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from veg24.auth.service import AuthError

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


def error_response(
    message: str, status_code: int = status.HTTP_400_BAD_REQUEST
) -> JSONResponse:
    """Build a failure payload.

    Args:
        message: Human-readable reason.
        status_code: HTTP status code.

    Returns:
        JSON response with success=false.
    """
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.debug("Rejected body for %s: %s", request.url.path, exc.errors())
        return error_response(INVALID_BODY_MESSAGE)

    @app.exception_handler(AuthError)
    async def auth_exception_handler(request: Request, exc: AuthError) -> JSONResponse:
        logger.debug("Rejected %s: %s", request.url.path, exc.code)
        return error_response(exc.message)
