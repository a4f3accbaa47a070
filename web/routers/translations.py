"""Translation bundle endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from veg24.i18n.io import LocaleNotFoundError, load_bundle
from veg24.types import TranslationBundle
from web.deps import AppSettings

router = APIRouter()


@router.get("/{lang}", response_model=None)
def get_translations(
    lang: str, settings: AppSettings
) -> TranslationBundle | JSONResponse:
    """Get the translation bundle for a language.

    Args:
        lang: Language code.
        settings: Application settings.

    Returns:
        Bundle contents, or a 404 error payload for an unknown language.
    """
    try:
        return load_bundle(settings.locales_dir, lang)
    except LocaleNotFoundError:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Language not found"},
        )
