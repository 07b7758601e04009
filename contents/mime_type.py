"""
MIME-type value object

A content MIME type is a base type from the catalog, optionally extended
with a parameter suffix to form a variant, e.g. "text/vnd.content.body;foo".
The composed string is the only identity: a variant never equals its base.
"""

from __future__ import annotations

from dataclasses import dataclass

from contents.constants.mime_types import PARAMS_SEPARATOR, MimeTypeName, is_text_type
from contents.exceptions import InvalidArgumentError


@dataclass(frozen=True, eq=False)
class MimeType:
    """
    Immutable MIME type with optional variant parameters.

    Attributes:
        base_type: Type without parameters, e.g. "text/vnd.content.body".
        params:    Variant suffix, e.g. "foo", or None for the plain type.
    """

    base_type: str
    params: str | None = None

    def __post_init__(self):
        if not isinstance(self.base_type, str) or not self.base_type.strip():
            raise InvalidArgumentError("MIME type must be a non-empty string", argument="base_type", value=self.base_type)
        if PARAMS_SEPARATOR in self.base_type:
            raise InvalidArgumentError(
                f"Base type must not contain '{PARAMS_SEPARATOR}'", argument="base_type", value=self.base_type
            )
        if self.params is not None:
            _check_params(self.params)

    @classmethod
    def parse(cls, value: str) -> MimeType:
        """Split a composed MIME-type string back into base type and params."""
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError("MIME type must be a non-empty string", argument="value", value=value)
        base, sep, params = value.partition(PARAMS_SEPARATOR)
        return cls(base, params if sep else None)

    @property
    def mime_type(self) -> str:
        """The composed identity string."""
        if self.params is None:
            return self.base_type
        return f"{self.base_type}{PARAMS_SEPARATOR}{self.params}"

    @property
    def base(self) -> MimeType:
        """This type without any variant parameters."""
        return self if self.params is None else MimeType(self.base_type)

    @property
    def is_text(self) -> bool:
        """True for types whose top-level type is "text"."""
        return is_text_type(self.base_type)

    def with_params(self, params: str) -> MimeType:
        """
        Create a variant of this type carrying the given parameters.

        Args:
            params: Variant suffix, must be non-blank and free of ";"

        Returns:
            MimeType: a new value composed as "base;params"

        Raises:
            InvalidArgumentError: if params is blank or contains ";"
        """
        return MimeType(self.base_type, params)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MimeType):
            return self.mime_type == other.mime_type
        if isinstance(other, str):
            return self.mime_type == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.mime_type)

    def __str__(self) -> str:
        return self.mime_type

    def __repr__(self) -> str:
        return f"MimeType({self.mime_type!r})"


def _check_params(params: str) -> None:
    if not isinstance(params, str) or not params.strip():
        raise InvalidArgumentError("MIME type params must be a non-empty string", argument="params", value=params)
    if PARAMS_SEPARATOR in params:
        raise InvalidArgumentError(f"MIME type params must not contain '{PARAMS_SEPARATOR}'", argument="params", value=params)


# ── Catalog ───────────────────────────────────────────────────────────────────

TEXT_SUBJECT_VAL = MimeTypeName.TEXT_SUBJECT.value
TEXT_DESCRIPTION_VAL = MimeTypeName.TEXT_DESCRIPTION.value
TEXT_BODY_VAL = MimeTypeName.TEXT_BODY.value
TEXT_APPICON_VAL = MimeTypeName.TEXT_APPICON.value
IMAGE_APPICON_VAL = MimeTypeName.IMAGE_APPICON.value

TEXT_SUBJECT = MimeType(TEXT_SUBJECT_VAL)
TEXT_DESCRIPTION = MimeType(TEXT_DESCRIPTION_VAL)
TEXT_BODY = MimeType(TEXT_BODY_VAL)
TEXT_APPICON = MimeType(TEXT_APPICON_VAL)
IMAGE_APPICON = MimeType(IMAGE_APPICON_VAL)
