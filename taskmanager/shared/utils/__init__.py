"""Shared utilities: datetime, generators, sanitization."""

from taskmanager.shared.utils.datetime import (
    ensure_utc,
    parse_iso_date,
    parse_iso_datetime,
    to_iso,
    utc_now,
)
from taskmanager.shared.utils.generators import generate_cuid
from taskmanager.shared.utils.sanitization import (
    InputSanitizer,
    sanitize_text,
    validate_identifier,
)

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "to_iso",
    "parse_iso_date",
    "parse_iso_datetime",
    "InputSanitizer",
    "sanitize_text",
    "validate_identifier",
]
