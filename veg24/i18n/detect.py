"""Locale detection for incoming requests.

Candidates are checked in this order: the ``lng`` query parameter, the
``i18next`` cookie, then the ``Accept-Language`` header by descending
quality. A candidate matches a supported locale exactly or through its
base language (``hi-IN`` -> ``hi``), ignoring case.
"""

from collections.abc import Iterable, Sequence

QUERY_PARAM = "lng"
COOKIE_NAME = "i18next"


def parse_accept_language(header: str | None) -> list[str]:
    """Parse an Accept-Language header into tags, best first.

    Entries with q=0 or a malformed weight are dropped. Ties keep header
    order.

    Args:
        header: Raw header value.

    Returns:
        Language tags ordered by quality.
    """
    if not header:
        return []

    weighted: list[tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                continue
        if quality <= 0:
            continue
        weighted.append((-quality, index, tag))

    return [tag for _, _, tag in sorted(weighted)]


def match_locale(candidate: str, supported: Sequence[str]) -> str | None:
    """Match one candidate tag against supported locales."""
    normalized = candidate.strip().replace("_", "-").lower()
    if not normalized:
        return None
    lookup = {s.lower(): s for s in supported}
    if normalized in lookup:
        return lookup[normalized]
    base = normalized.split("-", 1)[0]
    return lookup.get(base)


def detect_locale(
    query: str | None,
    cookie: str | None,
    accept_language: str | None,
    supported: Sequence[str],
    fallback: str,
) -> str:
    """Pick the locale for a request.

    Args:
        query: Value of the lng query parameter.
        cookie: Value of the i18next cookie.
        accept_language: Raw Accept-Language header.
        supported: Supported locale codes.
        fallback: Locale used when nothing matches.

    Returns:
        A supported locale code, or fallback.
    """
    candidates: Iterable[str] = [
        *(c for c in (query, cookie) if c),
        *parse_accept_language(accept_language),
    ]
    for candidate in candidates:
        matched = match_locale(candidate, supported)
        if matched is not None:
            return matched
    return fallback


__all__ = [
    "COOKIE_NAME",
    "QUERY_PARAM",
    "detect_locale",
    "match_locale",
    "parse_accept_language",
]
