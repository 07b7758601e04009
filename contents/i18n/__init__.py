"""
i18n (Internationalization) package

Provides locale normalization, primary-language matching and RTL
detection for localized content entries.
"""

from .locale import (
    RTL_LOCALES,
    is_rtl_locale,
    normalize_locale,
    primary_language,
    same_language,
)

__all__ = [
    "RTL_LOCALES",
    "is_rtl_locale",
    "normalize_locale",
    "primary_language",
    "same_language",
]
