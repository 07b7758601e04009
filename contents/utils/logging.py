"""
Structured Logging

Provides JSON-formatted log output for the contents library. The library
only logs through module loggers below "contents"; applications opt in to
output by calling setup_structured_logging().
"""

import json
import logging
from datetime import datetime, timezone

from contents.config import settings

LOGGER_NAME = "contents"

# Extra fields copied from log records into the JSON document
EXTRA_FIELDS = ("mime_type", "locale", "entries", "error")


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs in a format suitable for log aggregation systems
    like ELK Stack, Loki, or CloudWatch.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields from record
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, default=str)


def setup_structured_logging(
    log_level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> logging.Logger:
    """
    Configure logging output for the library.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR), defaults to settings.log_level
        json_format: Use JSON formatter, defaults to settings.log_json
        log_file: Optional file path for log output

    Returns:
        The configured "contents" logger
    """
    if log_level is None:
        log_level = settings.log_level
    if json_format is None:
        json_format = settings.log_json

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()

    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    logger.addHandler(handler)
    return logger
