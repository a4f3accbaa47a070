"""Translation bundles and locale detection.

Public API:
- TRANSLATIONS: built-in bundles per locale
- write_bundles, load_bundle, bundle_path: bundle files on disk
- detect_locale: pick a locale for a request
- LocaleNotFoundError: unknown or unsafe language code
"""

from veg24.i18n.bundles import TRANSLATIONS
from veg24.i18n.detect import detect_locale, parse_accept_language
from veg24.i18n.io import (
    LocaleNotFoundError,
    bundle_path,
    load_bundle,
    write_bundles,
)

__all__ = [
    "TRANSLATIONS",
    "LocaleNotFoundError",
    "bundle_path",
    "detect_locale",
    "load_bundle",
    "parse_accept_language",
    "write_bundles",
]
