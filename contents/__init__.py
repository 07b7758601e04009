"""
Common contents format

Authoring and querying of localized, multi-format content entries: a piece
of content tagged with a MIME type and an optional locale, collected into an
ordered set and serializable to maps or JSON.
"""

import logging

from .collection import Appendable, Buildable, Builder, ContentCollection
from .content import ContentEntry, Payload
from .exceptions import ContentError, DeserializationError, InvalidArgumentError, SerializationError
from .mime_type import (
    IMAGE_APPICON,
    IMAGE_APPICON_VAL,
    TEXT_APPICON,
    TEXT_APPICON_VAL,
    TEXT_BODY,
    TEXT_BODY_VAL,
    TEXT_DESCRIPTION,
    TEXT_DESCRIPTION_VAL,
    TEXT_SUBJECT,
    TEXT_SUBJECT_VAL,
    MimeType,
)
from .serialization import decode_entries, decode_entry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.2.0"

__all__ = [
    # Value objects
    "MimeType",
    "ContentEntry",
    "Payload",
    # Collection and builder roles
    "ContentCollection",
    "Builder",
    "Appendable",
    "Buildable",
    # Decoding
    "decode_entry",
    "decode_entries",
    # Errors
    "ContentError",
    "InvalidArgumentError",
    "SerializationError",
    "DeserializationError",
    # Catalog
    "TEXT_SUBJECT",
    "TEXT_DESCRIPTION",
    "TEXT_BODY",
    "TEXT_APPICON",
    "IMAGE_APPICON",
    "TEXT_SUBJECT_VAL",
    "TEXT_DESCRIPTION_VAL",
    "TEXT_BODY_VAL",
    "TEXT_APPICON_VAL",
    "IMAGE_APPICON_VAL",
]
