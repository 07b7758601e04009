"""
MIME-type Constants for the common contents format

This module defines the base MIME-type strings of the content catalog,
so they are not hardcoded throughout the codebase.
"""

from enum import Enum


class MimeTypeName(str, Enum):
    """Enumeration of the recognized base content types."""

    TEXT_SUBJECT = "text/vnd.content.subject"
    TEXT_DESCRIPTION = "text/vnd.content.description"
    TEXT_BODY = "text/vnd.content.body"
    TEXT_APPICON = "text/vnd.content.appicon"
    IMAGE_APPICON = "image/vnd.content.appicon"


# Separator between a base type and its variant parameters
PARAMS_SEPARATOR = ";"

# Top-level type whose payloads are always text
TEXT_TOP_LEVEL_TYPE = "text"


def is_catalog_type(value: str) -> bool:
    """
    Check if value is one of the catalog base types.

    Args:
        value: MIME-type string, without parameters

    Returns:
        bool: True if value names a catalog entry
    """
    try:
        MimeTypeName(value)
    except ValueError:
        return False
    return True


def is_text_type(value: str) -> bool:
    """
    Check if a MIME-type string has the top-level type "text".

    Args:
        value: MIME-type string, with or without parameters

    Returns:
        bool: True for "text/..." types
    """
    return value.split("/")[0].strip().lower() == TEXT_TOP_LEVEL_TYPE
