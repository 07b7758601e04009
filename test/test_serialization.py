"""
Tests for the JSON encoder and the content entry decoder

Tests reading entries from JSON documents and maps, binary recovery,
round trips through as_json(), and rejection of malformed input.
"""

import base64
import json

import pytest

from contents import IMAGE_APPICON, IMAGE_APPICON_VAL, TEXT_APPICON, TEXT_BODY, ContentCollection, ContentEntry
from contents.exceptions import DeserializationError
from contents.serialization import decode_entries, decode_entry, encode_json


class TestDecodeEntries:
    """Test reading entries from JSON"""

    def test_deserializes_json_contents(self):
        document = json.loads(
            """
            {
              "contents": [{
                  "mimeType": "text/vnd.content.description",
                  "content": "Kontakt"
                }, {
                  "mimeType": "text/vnd.content.description",
                  "locale": "en",
                  "content": "Contact"
                }]
            }
            """
        )

        entries = decode_entries(document["contents"])

        assert entries == [
            ContentEntry("text/vnd.content.description", "Kontakt"),
            ContentEntry("text/vnd.content.description", "Contact", "en"),
        ]

    def test_reads_single_object(self):
        entries = decode_entries('{"mimeType": "text/vnd.content.appicon", "content": "some-app-icon", "locale": "sv"}')

        assert len(entries) == 1
        assert entries[0].content == "some-app-icon"
        assert entries[0].locale == "sv"

    def test_reads_json_bytes(self):
        entries = decode_entries('[{"mimeType": "text/vnd.content.body", "content": "Säg det"}]'.encode())
        assert entries[0].content == "Säg det"

    def test_reads_byte_content_from_json(self):
        text = ContentCollection.start(IMAGE_APPICON).and_value(bytes([1, 2, 3])).as_json()

        entry = decode_entries(text)[0]

        assert entry.mime_type == IMAGE_APPICON_VAL
        assert entry.content == bytes([1, 2, 3])

    def test_non_base64_text_under_binary_type_stays_text(self):
        entry = decode_entry({"mimeType": IMAGE_APPICON_VAL, "content": "not base64!"})
        assert entry.content == "not base64!"

    def test_text_type_is_never_base64_decoded(self):
        entry = decode_entry({"mimeType": TEXT_BODY.mime_type, "content": "AQID"})
        assert entry.content == "AQID"

    def test_map_with_bytes_keeps_bytes(self):
        entry = decode_entry({"mimeType": IMAGE_APPICON_VAL, "content": b"\x01\x02"})
        assert entry.content == b"\x01\x02"

    def test_locale_is_normalized(self):
        entry = decode_entry({"mimeType": TEXT_BODY.mime_type, "content": "Colour", "locale": "en_gb"})
        assert entry.locale == "en-GB"

    def test_unknown_fields_are_ignored(self):
        entry = decode_entry({"mimeType": TEXT_BODY.mime_type, "content": "x", "extra": 1})
        assert entry == ContentEntry(TEXT_BODY.mime_type, "x")


class TestRoundTrip:
    """Test that as_json() output decodes to equal entries"""

    def test_text_round_trip(self):
        built = (
            ContentCollection.start(TEXT_BODY)
            .and_value("Say it")
            .and_value("Säg det", "sv")
            .and_with_mime_type(TEXT_BODY.with_params("short"))
            .and_value("Say", "en-GB")
        )

        assert decode_entries(built.as_json()) == list(built.as_list())

    def test_binary_round_trip(self):
        built = ContentCollection.start(IMAGE_APPICON).and_value(bytes(range(256))).and_value(b"\xff", "ar")

        assert decode_entries(built.as_json()) == list(built.as_list())

    def test_map_round_trip(self):
        built = ContentCollection.start(TEXT_BODY).and_value("x", "sv").and_with_mime_type(IMAGE_APPICON).and_value(b"1")

        assert [decode_entry(m) for m in built.as_map()] == list(built.as_list())

    def test_base64_looking_text_under_binary_type_is_read_as_bytes(self):
        """Text payloads under non-text types are not preserved when they look like base64"""
        built = ContentCollection.start(IMAGE_APPICON).and_value("icon")

        entry = decode_entries(built.as_json())[0]

        assert entry.content == base64.b64decode("icon")
        assert entry != built.as_list()[0]

    def test_bytes_under_text_type_are_read_as_base64_text(self):
        """Binary payloads under text types come back as their base64 string"""
        built = ContentCollection.start(TEXT_APPICON).and_value(b"\x89PNG")

        entry = decode_entries(built.as_json())[0]

        assert entry.content == "iVBORw=="
        assert entry != built.as_list()[0]


class TestDecodeErrors:
    """Test that malformed input raises DeserializationError"""

    def test_invalid_json(self):
        with pytest.raises(DeserializationError):
            decode_entries("[{not json")

    @pytest.mark.parametrize("document", ['"text"', "42", "null", "[1]"])
    def test_wrong_shape(self, document):
        with pytest.raises(DeserializationError):
            decode_entries(document)

    def test_missing_mime_type(self):
        with pytest.raises(DeserializationError) as exc_info:
            decode_entry({"content": "x"})
        assert exc_info.value.details["errors"][0]["loc"] == ("mimeType",)

    def test_missing_content(self):
        with pytest.raises(DeserializationError) as exc_info:
            decode_entry({"mimeType": TEXT_BODY.mime_type})
        assert exc_info.value.details["errors"][0]["loc"] == ("content",)

    @pytest.mark.parametrize(
        "obj",
        [
            {"mimeType": "", "content": "x"},
            {"mimeType": "   ", "content": "x"},
            {"mimeType": 42, "content": "x"},
            {"mimeType": "text/plain", "content": 42},
            {"mimeType": "text/plain", "content": "x", "locale": "not a locale"},
            {"mimeType": "text/plain", "content": "x", "locale": 7},
        ],
    )
    def test_malformed_fields(self, obj):
        with pytest.raises(DeserializationError):
            decode_entry(obj)


class TestEncodeJson:
    """Test the JSON encoder"""

    def test_encodes_in_order(self):
        text = encode_json([{"mimeType": "a", "content": "1"}, {"mimeType": "b", "content": "2"}])
        assert text == '[{"mimeType": "a", "content": "1"}, {"mimeType": "b", "content": "2"}]'

    def test_encodes_bytes_as_base64(self):
        assert encode_json([{"mimeType": "a", "content": b"\x01\x02\x03"}]) == '[{"mimeType": "a", "content": "AQID"}]'
