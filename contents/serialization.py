"""
Serialization

JSON encoding of content projections and the decoder that reads content
entries back from JSON text or from their map form.

Binary payloads are written as standard base64 strings. When reading, a
string payload under a non-text MIME type (e.g. "image/...") is turned back
into bytes if it is valid base64, otherwise it is kept as text.
"""

import base64
import binascii
import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from contents.config import settings
from contents.constants.mime_types import is_text_type
from contents.content import ContentEntry, Payload
from contents.exceptions import DeserializationError, SerializationError
from contents.schemas.content import ContentEntrySchema

logger = logging.getLogger(__name__)


def _default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(projections: list[dict[str, Any]]) -> str:
    """
    Write entry projections as a JSON array.

    Args:
        projections: Map forms of the entries, in order

    Returns:
        JSON string

    Raises:
        SerializationError: if a value cannot be encoded
    """
    try:
        return json.dumps(
            projections,
            default=_default,
            ensure_ascii=settings.json_ensure_ascii,
            indent=settings.json_indent,
        )
    except (TypeError, ValueError) as e:
        logger.warning("Could not write contents as JSON: %s", e, extra={"entries": len(projections), "error": str(e)})
        raise SerializationError(details={"error": str(e)}) from e


def _payload(mime_type: str, content: str | bytes) -> Payload:
    if isinstance(content, bytes) or is_text_type(mime_type):
        return content
    try:
        return base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError):
        return content


def decode_entry(obj: Mapping[str, Any]) -> ContentEntry:
    """
    Read one content entry from its map form.

    Args:
        obj: Mapping with "mimeType", "content" and an optional "locale"

    Returns:
        ContentEntry: the decoded entry

    Raises:
        DeserializationError: if required fields are missing or malformed
    """
    if not isinstance(obj, Mapping):
        raise DeserializationError(f"Content entry must be an object, got {type(obj).__name__}")
    try:
        schema = ContentEntrySchema.model_validate(dict(obj))
    except ValidationError as e:
        logger.warning("Invalid content entry (%d errors)", e.error_count(), extra={"error": str(e)})
        raise DeserializationError("Invalid content entry", errors=e.errors(include_url=False)) from e

    return ContentEntry(schema.mime_type, _payload(schema.mime_type, schema.content), schema.locale)


def decode_entries(data: str | bytes | Mapping[str, Any] | list[Any]) -> list[ContentEntry]:
    """
    Read content entries from JSON text, a single object or a list of objects.

    Raises:
        DeserializationError: if the JSON is invalid or an entry is malformed
    """
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except ValueError as e:
            logger.warning("Invalid contents JSON: %s", e, extra={"error": str(e)})
            raise DeserializationError(f"Invalid JSON: {e}") from e

    if isinstance(data, Mapping):
        data = [data]
    if not isinstance(data, list):
        raise DeserializationError(f"Expected a JSON object or array, got {type(data).__name__}")

    entries = [decode_entry(item) for item in data]
    logger.debug("Decoded %d content entries", len(entries), extra={"entries": len(entries)})
    return entries
