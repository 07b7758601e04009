"""
Contents collection and chaining builder

Provides an easy to use API for authoring content:

    ContentCollection.start(TEXT_SUBJECT).and_value("Introducing, the magnificent")
        .and_with_mime_type(TEXT_BODY).and_value("Welcome...", "en")
        .as_json()

The builder roles narrow what can be called next:
    Builder     — can add a value, with an optional locale
    Appendable  — can also switch to another MIME type
    Buildable   — can also produce the resulting contents

All builders of one chain share the same backing collection, so a chain
must stay with a single owner until a terminal operation returns its copy.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from contents.constants.mime_types import is_catalog_type
from contents.content import ContentEntry, Payload
from contents.mime_type import MimeType
from contents.serialization import decode_entries, encode_json

logger = logging.getLogger(__name__)


class ContentCollection:
    """Ordered, append-only sequence of content entries, queryable by MIME type and locale."""

    def __init__(self, values: Iterable[ContentEntry] | None = None):
        self._values: list[ContentEntry] = list(values) if values is not None else []

    @classmethod
    def start(cls, mime_type: MimeType | str) -> Builder:
        """
        Create a new contents builder, starting off with the given MIME type.

        Args:
            mime_type: MIME type for the first values

        Returns:
            Builder: a builder over a new, empty collection
        """
        return Builder(_as_mime_type(mime_type), cls())

    @classmethod
    def from_json(cls, data: str | bytes) -> ContentCollection:
        """Create a collection from the JSON form produced by as_json()."""
        return cls(decode_entries(data))

    @property
    def entries(self) -> tuple[ContentEntry, ...]:
        return tuple(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[ContentEntry]:
        return iter(tuple(self._values))

    def __bool__(self) -> bool:
        return bool(self._values)

    def __repr__(self) -> str:
        return f"ContentCollection({self._values!r})"

    def _append(self, entry: ContentEntry) -> None:
        self._values.append(entry)
        logger.debug(
            "Appended content entry #%d", len(self._values), extra={"mime_type": entry.mime_type, "locale": entry.locale}
        )

    # ── Lookup ────────────────────────────────────────────────────────────────

    def for_mime_type(self, mime_type: MimeType) -> Payload | None:
        """
        Retrieve the content matching the given MIME type.

        Matching is exact, so the plain type and each of its variants are
        looked up independently. The first entry in insertion order wins.

        Args:
            mime_type: type to match

        Returns:
            The content found, or None if no entry matches
        """
        for entry in self._values:
            if entry.matches_type(mime_type):
                return entry.content
        return None

    def for_mime_type_and_locale(self, mime_type: MimeType, locale: str) -> Payload | None:
        """
        Retrieve the content matching the given MIME type and locale.

        Only the primary language of the locales is compared.

        Returns:
            The content found, or None if no entry matches
        """
        for entry in self._values:
            if entry.matches_type_and_locale(mime_type, locale):
                return entry.content
        return None

    # ── Serialization ─────────────────────────────────────────────────────────

    def as_list(self) -> tuple[ContentEntry, ...]:
        """Return a read-only copy of the entries, in insertion order."""
        return tuple(self._values)

    def as_map(self) -> list[dict[str, Any]]:
        """Return the map form of every entry, in insertion order."""
        return [entry.to_projection() for entry in self._values]

    def as_json(self) -> str:
        """Return the entries as a JSON array; binary content is base64 encoded."""
        return encode_json(self.as_map())


class Builder:
    """Builder can add a value, with an optional locale."""

    def __init__(self, mime_type: MimeType, contents: ContentCollection):
        self._mime_type = mime_type
        self._contents = contents

    @property
    def mime_type(self) -> MimeType:
        """The MIME type values are currently added for."""
        return self._mime_type

    def and_value(self, value: Payload | None, locale: str | None = None) -> Builder:
        """
        Add a value for the current MIME type.

        None, empty or whitespace-only text and None or empty bytes are
        ignored: no entry is added. A plain builder then becomes appendable,
        so the chain can switch type; other builders are returned as is.

        Args:
            value: text or binary content to add
            locale: optional language tag of the value

        Returns:
            Buildable: a buildable builder, or an appendable one if value was ignored
        """
        if _is_blank(value):
            logger.debug("Ignoring empty content value", extra={"mime_type": self._mime_type.mime_type, "locale": locale})
            return self if isinstance(self, Appendable) else Appendable(self._mime_type, self._contents)

        self._contents._append(ContentEntry(self._mime_type.mime_type, value, locale))
        return Buildable(self._mime_type, self._contents)


class Appendable(Builder):
    """Appendable can append another MIME-type content entry to the builder."""

    def and_with_mime_type(self, mime_type: MimeType | str) -> Builder:
        """Switch to the given MIME type for the values added next."""
        return Builder(_as_mime_type(mime_type), self._contents)


class Buildable(Appendable):
    """Buildable can build the resulting contents."""

    def as_list(self) -> tuple[ContentEntry, ...]:
        """Build the contents as a read-only sequence of content entries."""
        return self._contents.as_list()

    def as_map(self) -> list[dict[str, Any]]:
        """Build the contents as a list of maps, in the JSON projection form."""
        return self._contents.as_map()

    def as_json(self) -> str:
        """Build the contents as a JSON string."""
        return self._contents.as_json()


def _as_mime_type(mime_type: MimeType | str) -> MimeType:
    if not isinstance(mime_type, MimeType):
        mime_type = MimeType.parse(mime_type)
    if not is_catalog_type(mime_type.base_type):
        logger.debug("Building with MIME type outside the catalog", extra={"mime_type": mime_type.mime_type})
    return mime_type


def _is_blank(value: Payload | None) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (bytes, bytearray)):
        return len(value) == 0
    return False
