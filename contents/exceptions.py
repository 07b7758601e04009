"""
Custom Exception Classes for the common contents format

This module defines the exceptions raised by the library, so callers can
catch a single base class or react to the specific failure.
"""

from typing import Any


class ContentError(Exception):
    """Base exception class for all content-related exceptions"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Argument Exceptions
# ============================================================================


class InvalidArgumentError(ContentError, ValueError):
    """Raised when a value object is given a malformed argument"""

    def __init__(self, message: str, argument: str | None = None, value: Any = None):
        details: dict[str, Any] = {}
        if argument:
            details["argument"] = argument
            details["value"] = value
        super().__init__(message=message, details=details)


# ============================================================================
# Serialization Exceptions
# ============================================================================


class SerializationError(ContentError):
    """Raised when contents cannot be written as JSON"""

    def __init__(self, message: str = "Could not write contents as JSON string", details: dict[str, Any] | None = None):
        super().__init__(message=message, details=details)


class DeserializationError(ContentError):
    """Raised when a JSON document does not describe valid content entries"""

    def __init__(
        self,
        message: str = "Could not read content entries",
        errors: list[dict[str, Any]] | None = None,
    ):
        details = {"errors": errors} if errors else {}
        super().__init__(message=message, details=details)
