"""Reading and writing translation bundle files.

Bundles live at ``<locales_dir>/<lang>/translation.json``. They are
written once at startup and read back from disk on every request, so
edits made while the server runs are picked up.
"""

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path

from veg24.i18n.bundles import TRANSLATIONS
from veg24.types import TranslationBundle

logger = logging.getLogger(__name__)

BUNDLE_FILENAME = "translation.json"

# Language tags only; keeps request paths inside the locales directory
LANG_PATTERN = re.compile(r"^[A-Za-z]{2,3}([-_][A-Za-z0-9]{2,8})*$")


class LocaleNotFoundError(Exception):
    """Raised when no bundle exists for a language code."""

    def __init__(self, lang: str) -> None:
        self.lang = lang
        super().__init__(f"Language not found: {lang}")


def bundle_path(locales_dir: Path, lang: str) -> Path:
    """Return the bundle file path for a language.

    Args:
        locales_dir: Root locales directory.
        lang: Language code.

    Returns:
        Path to the bundle file (which may not exist).

    Raises:
        LocaleNotFoundError: If lang is not a plain language tag.
    """
    if not LANG_PATTERN.match(lang):
        raise LocaleNotFoundError(lang)
    return locales_dir / lang / BUNDLE_FILENAME


def write_bundles(
    locales_dir: Path,
    bundles: Mapping[str, TranslationBundle] = TRANSLATIONS,
) -> list[Path]:
    """Write bundles to disk, replacing existing files.

    Args:
        locales_dir: Root locales directory; created if missing.
        bundles: Bundles keyed by language code.

    Returns:
        Paths written, in input order.
    """
    written: list[Path] = []
    for lang, data in bundles.items():
        path = bundle_path(locales_dir, lang)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
        )
        written.append(path)

    logger.info("Wrote %d translation bundles to %s", len(written), locales_dir)
    return written


def load_bundle(locales_dir: Path, lang: str) -> TranslationBundle:
    """Load one bundle from disk.

    Args:
        locales_dir: Root locales directory.
        lang: Language code.

    Returns:
        Flat key -> string mapping.

    Raises:
        LocaleNotFoundError: If no bundle exists for lang.
    """
    path = bundle_path(locales_dir, lang)
    if not path.is_file():
        raise LocaleNotFoundError(lang)

    data: TranslationBundle = json.loads(path.read_text(encoding="utf-8"))
    return data


__all__ = [
    "BUNDLE_FILENAME",
    "LocaleNotFoundError",
    "bundle_path",
    "load_bundle",
    "write_bundles",
]
