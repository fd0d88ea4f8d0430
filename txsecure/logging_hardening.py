"""Logging Hardening and Redaction.

This module provides filters to prevent record ciphertext material and the
master key from appearing in application logs.
"""
import logging
import re

_RECORD_HEX_FIELDS = "payloadNonce|payloadCt|payloadTag|dekWrapNonce|dekWrapped|dekWrapTag"

# Hex values attached to record field names, in JSON or keyword form,
# plus any master key assignment.
SECRET_PATTERNS = [
    (re.compile(r'("(?:' + _RECORD_HEX_FIELDS + r')":\s*")[0-9a-fA-F]+(")'), r'\1[REDACTED]\2'),
    (re.compile(r"('(?:" + _RECORD_HEX_FIELDS + r")':\s*')[0-9a-fA-F]+(')"), r'\1[REDACTED]\2'),
    (re.compile(r'\b(' + _RECORD_HEX_FIELDS + r')=[0-9a-fA-F]+'), r'\1=[REDACTED]'),
    (re.compile(r'(?i)\b(master_key(?:_hex)?)=\S+'), r'\1=[REDACTED]'),
]


def redact_string(text: str) -> str:
    """Redact secret-like patterns from a string."""
    for pattern, replacement in SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


class SecretRedactionFilter(logging.Filter):
    """Filter that redacts secret-like patterns from log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact_string(record.msg)

        # Also redact arguments if they are strings
        if isinstance(record.args, tuple) and record.args:
            record.args = tuple(
                redact_string(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )

        return True


def setup_logging_redaction() -> None:
    """Apply the SecretRedactionFilter to the root logger and all known loggers."""
    redact_filter = SecretRedactionFilter()

    root_logger = logging.getLogger()

    # Remove existing filters if any (to avoid duplicates)
    for f in root_logger.filters[:]:
        if isinstance(f, SecretRedactionFilter):
            root_logger.removeFilter(f)

    root_logger.addFilter(redact_filter)

    # Filters on the root logger do not apply to records from child loggers
    for name in list(logging.root.manager.loggerDict):
        logger = logging.getLogger(name)
        for f in logger.filters[:]:
            if isinstance(f, SecretRedactionFilter):
                logger.removeFilter(f)
        logger.addFilter(redact_filter)

    logging.getLogger(__name__).info("Logging redaction filters active.")
