"""Shared type definitions for veg24.

This module contains enums, TypedDicts and type aliases shared across
subpackages to avoid circular imports.
"""

from enum import Enum
from typing import TypedDict


class Locale(str, Enum):
    """Locales the storefront ships translations for."""

    EN = "en"
    HI = "hi"
    KN = "kn"
    MR = "mr"


DEFAULT_LOCALE = Locale.EN

# Flat key -> localized string mapping
TranslationBundle = dict[str, str]


class LocalizedProduct(TypedDict):
    """Product as served to the storefront for a single locale."""

    id: int
    name: str
    price: int | float
    stock: int
    tags: list[str]
    image: str


__all__ = [
    "DEFAULT_LOCALE",
    "Locale",
    "LocalizedProduct",
    "TranslationBundle",
]
