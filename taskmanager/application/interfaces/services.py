"""Service interfaces (ports) for the application layer.

Protocols define contracts for outbound services (DIP).
"""

from __future__ import annotations

from typing import Protocol


# Notification service interface
class INotificationService(Protocol):
    """Protocol for sending one email to one recipient."""

    async def send(self, to: str, subject: str, body: str) -> str:
        """Send the message and return the provider message id.

        Raises NotificationException if the provider rejects or fails the send.
        """
