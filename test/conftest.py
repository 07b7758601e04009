"""
Pytest configuration and fixtures for contents tests
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from contents import TEXT_BODY, ContentCollection, ContentEntry  # noqa: E402
from contents.config import settings  # noqa: E402


@pytest.fixture
def body_entries():
    """Body text in the default language and in Swedish"""
    return [
        ContentEntry(TEXT_BODY.mime_type, "Say it"),
        ContentEntry(TEXT_BODY.mime_type, "Säg det", "sv"),
    ]


@pytest.fixture
def body_contents(body_entries):
    return ContentCollection(body_entries)


@pytest.fixture
def json_settings():
    """Restore JSON output settings changed by a test"""
    saved = (settings.json_ensure_ascii, settings.json_indent)
    yield settings
    settings.json_ensure_ascii, settings.json_indent = saved
