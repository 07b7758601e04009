"""
Locale helpers

Pure functions for BCP 47 locale handling:
- Tag normalization ("en_gb" → "en-GB")
- Primary-language extraction and comparison
- RTL (right-to-left) language detection
"""

from __future__ import annotations

import re

from contents.exceptions import InvalidArgumentError

# ── Constants ─────────────────────────────────────────────────────────────────

# BCP 47 base language codes whose scripts read right-to-left
RTL_LOCALES: frozenset[str] = frozenset({"ar", "he", "fa", "ur", "yi", "ku"})

_SUBTAG = re.compile(r"^[A-Za-z0-9]{1,8}$")
_LANGUAGE = re.compile(r"^[A-Za-z]{2,8}$")


# ── Public helpers ────────────────────────────────────────────────────────────


def normalize_locale(locale: str) -> str:
    """Return the canonical BCP 47 spelling of a locale tag.

    Accepts both "-" and "_" as subtag separators. The language subtag is
    lower-cased, a four-letter script subtag is title-cased and a region
    subtag (two letters or three digits) is upper-cased. Other subtags are
    lower-cased.

    Args:
        locale: Locale string, e.g. "en", "en_GB", "zh-hant-tw".

    Returns:
        The normalized tag, e.g. "en-GB", "zh-Hant-TW".

    Raises:
        InvalidArgumentError: if the tag is empty or malformed.
    """
    if not isinstance(locale, str) or not locale.strip():
        raise InvalidArgumentError("Locale must be a non-empty string", argument="locale", value=locale)

    parts = locale.strip().replace("_", "-").split("-")
    if not _LANGUAGE.match(parts[0]) or not all(_SUBTAG.match(p) for p in parts[1:]):
        raise InvalidArgumentError(f"Malformed locale tag '{locale}'", argument="locale", value=locale)

    normalized = [parts[0].lower()]
    for index, part in enumerate(parts[1:], start=1):
        if index == 1 and len(part) == 4 and part.isalpha():
            normalized.append(part.title())
        elif (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit()):
            normalized.append(part.upper())
        else:
            normalized.append(part.lower())
    return "-".join(normalized)


def primary_language(locale: str) -> str:
    """Return the lower-cased primary language subtag of a locale.

    "en-GB" and "en_US" both give "en".
    """
    return locale.replace("_", "-").split("-")[0].lower()


def same_language(locale: str | None, other: str | None) -> bool:
    """Return True when both locales are present and share a primary language.

    Region and script subtags are ignored, so "en-GB" matches "en".
    """
    if not locale or not other:
        return False
    return primary_language(locale) == primary_language(other)


def is_rtl_locale(locale: str) -> bool:
    """Return True when the given BCP 47 locale is right-to-left.

    Compares only the base language tag, so both "ar" and "ar-SA" are
    correctly identified as RTL.

    Args:
        locale: BCP 47 locale string, e.g. "ar", "fr-CA", "zh-Hant".

    Returns:
        True if the base language is in RTL_LOCALES, False otherwise.
    """
    return primary_language(locale) in RTL_LOCALES
