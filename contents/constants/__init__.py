"""Constants package for the common contents format."""

from .mime_types import PARAMS_SEPARATOR, TEXT_TOP_LEVEL_TYPE, MimeTypeName, is_catalog_type, is_text_type

__all__ = [
    "MimeTypeName",
    "PARAMS_SEPARATOR",
    "TEXT_TOP_LEVEL_TYPE",
    "is_catalog_type",
    "is_text_type",
]
