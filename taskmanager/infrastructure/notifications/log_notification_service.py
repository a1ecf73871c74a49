"""Log-only notification sender (EMAIL_BACKEND=log)."""

from __future__ import annotations

import logging

from taskmanager.shared.telemetry.logging import get_logger
from taskmanager.shared.utils.generators import generate_cuid

logger = get_logger(__name__)


class LogOnlyNotificationService:
    """INotificationService implementation that logs instead of sending email.

    Use for local development when no SES identity is configured.
    """

    async def send(self, to: str, subject: str, body: str) -> str:
        """Log the notification and return a synthetic message id."""
        message_id = f"log-{generate_cuid()}"
        logger.info(
            "Notify: would send message %s (subject=%r)",
            message_id,
            (subject or "")[:80],
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Notify recipient: %s", to)
            logger.debug("Notify body (first 500 chars): %s", (body or "")[:500])
        return message_id
