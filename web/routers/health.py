"""Health check and landing page endpoints."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from veg24 import __version__
from web.deps import AppSettings

router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)

ENDPOINTS = [
    "GET /api/products",
    "POST /api/auth/send-otp",
    "POST /api/auth/verify-otp",
    "GET /api/translations/:lang",
    "GET /api/admin/dashboard",
]


@router.get("/health")
def health() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status with version.
    """
    return {"status": "ok", "version": __version__}


@router.get("/", response_class=HTMLResponse, name="landing")
def landing(request: Request, settings: AppSettings) -> Response:
    """Serve the frontend's index.html, or the built-in landing page."""
    index = settings.static_dir / "index.html"
    if index.is_file():
        return FileResponse(index)

    return templates.TemplateResponse(
        request=request,
        name="index.html",
        context={
            "version": __version__,
            "endpoints": ENDPOINTS,
            "port": settings.port,
        },
    )
