"""Stable listing and report contract surface for gomodreport."""

from contract.listing import (
    FALSE_TOKEN,
    FIELD_COUNT,
    FIELD_SEPARATOR,
    LIST_FORMAT,
    NO_MODULE_TOKEN,
    REPLACEMENT_ARROW,
    REPORT_SCHEMA_VERSION,
    TRUE_TOKEN,
)

__all__ = [
    "FALSE_TOKEN",
    "FIELD_COUNT",
    "FIELD_SEPARATOR",
    "LIST_FORMAT",
    "NO_MODULE_TOKEN",
    "REPLACEMENT_ARROW",
    "REPORT_SCHEMA_VERSION",
    "TRUE_TOKEN",
]
