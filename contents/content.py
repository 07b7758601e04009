"""
Content entry value object

A single unit of the common content format: a MIME type, the content data
and an optional locale for localization.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from contents.exceptions import InvalidArgumentError
from contents.i18n.locale import is_rtl_locale, normalize_locale, same_language
from contents.mime_type import MimeType

# Exactly one of the two payload kinds
Payload = str | bytes


@dataclass(frozen=True)
class ContentEntry:
    """
    Immutable content entry.

    Attributes:
        mime_type: Composed MIME-type string, e.g. "text/vnd.content.body;foo".
                   Any non-empty string is accepted, not only catalog types.
        content:   Text (str) or binary (bytes) payload.
        locale:    Normalized BCP 47 tag, e.g. "sv" or "en-GB", or None.
    """

    mime_type: str
    content: Payload
    locale: str | None = None

    def __post_init__(self):
        mime_type = self.mime_type.mime_type if isinstance(self.mime_type, MimeType) else self.mime_type
        if not isinstance(mime_type, str) or not mime_type.strip():
            raise InvalidArgumentError("Content MIME type must be a non-empty string", argument="mime_type", value=mime_type)
        object.__setattr__(self, "mime_type", mime_type)

        content = self.content
        if isinstance(content, bytearray):
            content = bytes(content)
        if not isinstance(content, (str, bytes)):
            raise InvalidArgumentError(
                f"Content must be str or bytes, got {type(content).__name__}", argument="content", value=content
            )
        object.__setattr__(self, "content", content)

        if self.locale is not None:
            object.__setattr__(self, "locale", normalize_locale(self.locale))

    @property
    def is_binary(self) -> bool:
        return isinstance(self.content, bytes)

    @property
    def is_rtl(self) -> bool:
        """True when the entry is localized to a right-to-left language."""
        return self.locale is not None and is_rtl_locale(self.locale)

    def matches_type(self, mime_type: MimeType) -> bool:
        """Exact match on the composed MIME type; a variant never matches its base."""
        return self.mime_type == mime_type.mime_type

    def matches_type_and_locale(self, mime_type: MimeType, locale: str) -> bool:
        """Match on MIME type and on the primary language of the locale.

        Region and script are ignored, so an entry in "en-GB" matches "en".
        An entry without a locale never matches.
        """
        return self.matches_type(mime_type) and same_language(self.locale, locale)

    def to_projection(self) -> dict[str, Any]:
        """Return the map form of this entry; "locale" is left out when absent."""
        projection: dict[str, Any] = {"mimeType": self.mime_type, "content": self.content}
        if self.locale is not None:
            projection["locale"] = self.locale
        return projection

    def __str__(self) -> str:
        if self.locale is not None:
            return f"Content [mimeType={self.mime_type}, content={self.content}, locale={self.locale}]"
        return f"Content [mimeType={self.mime_type}, content={self.content}]"
