from pydantic import BaseModel, ConfigDict, Field, field_validator

from contents.i18n.locale import normalize_locale


class ContentEntrySchema(BaseModel):
    mime_type: str = Field(..., alias="mimeType", min_length=1, title="MIME Type", description="Composed MIME type of the entry.")
    content: str | bytes = Field(..., title="Content", description="Text, base64 text or raw bytes of the entry.")
    locale: str | None = Field(None, title="Locale", description="BCP 47 language tag of the entry.")

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        json_schema_extra={
            "example": {
                "mimeType": "text/vnd.content.body",
                "content": "Säg det",
                "locale": "sv",
            }
        },
    )

    @field_validator("mime_type")
    @classmethod
    def mime_type_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("mimeType must not be blank")
        return value

    @field_validator("locale")
    @classmethod
    def locale_is_language_tag(cls, value: str | None) -> str | None:
        return normalize_locale(value) if value is not None else None
