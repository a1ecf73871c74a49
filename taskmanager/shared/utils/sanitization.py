"""Input sanitization utilities for XSS and injection prevention."""

import html
import re
from typing import ClassVar

import nh3


class InputSanitizer:
    """
    Sanitize user inputs to prevent XSS and injection attacks.

    Free-text task fields (title, description, comments) are rendered by the
    dashboards and embedded in notification emails, so markup is stripped
    before persistence rather than rejected.
    """

    ALLOWED_TAGS: ClassVar[list[str]] = []
    ALLOWED_ATTRIBUTES: ClassVar[dict[str, list[str]]] = {}
    IDENTIFIER_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[a-zA-Z0-9_@.:+-]+$")
    MAX_CLEAN_PASSES: ClassVar[int] = 5

    @classmethod
    def sanitize_html(cls, value: str) -> str:
        """Remove all HTML tags and sanitize with nh3 (strict by default).

        Content of <script> and <style> elements is dropped together with
        the tags.

        Args:
            value: Raw string that may contain HTML.

        Returns:
            Sanitized string safe for HTML display.
        """
        if not value:
            return value
        # nh3: tags = set of allowed tag names; attributes = dict[tag, set[attr]]
        attrs = {k: set(v) for k, v in cls.ALLOWED_ATTRIBUTES.items()}
        return nh3.clean(
            value,
            tags=set(cls.ALLOWED_TAGS),
            attributes=attrs,
        )

    @classmethod
    def sanitize_text(cls, value: str) -> str:
        """Strip markup from plain text and trim surrounding whitespace.

        Unlike sanitize_html, the result is plain text: entities are decoded
        ("R&D" stays "R&D"). Cleaning repeats until the value is stable, so
        escaped markup such as "&lt;script&gt;" cannot decode into a tag.
        """
        if not value:
            return value
        current = value
        for _ in range(cls.MAX_CLEAN_PASSES):
            cleaned = html.unescape(cls.sanitize_html(current))
            if cleaned == current:
                return cleaned.strip()
            current = cleaned
        # Not stable after MAX_CLEAN_PASSES: keep the escaped form.
        return cls.sanitize_html(current).strip()

    @classmethod
    def sanitize_identifier(cls, value: str) -> str:
        """Validate a user or task identifier (Cognito subs, CUIDs, emails as usernames).

        Args:
            value: Raw identifier string.

        Returns:
            The stripped identifier if valid.

        Raises:
            ValueError: If format is invalid.
        """
        stripped = value.strip() if value else value
        if not stripped or not cls.IDENTIFIER_PATTERN.match(stripped):
            raise ValueError("Invalid identifier format")
        return stripped


def sanitize_text(value: str) -> str:
    """Strip markup and surrounding whitespace from free text."""
    return InputSanitizer.sanitize_text(value)


def validate_identifier(value: str) -> str:
    """Validate and return identifier; raises ValueError if invalid."""
    return InputSanitizer.sanitize_identifier(value)
