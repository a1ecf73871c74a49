"""Amazon SES notification sender (implements INotificationService)."""

from __future__ import annotations

import asyncio
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from taskmanager.domain.exceptions import NotificationException
from taskmanager.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_CHARSET = "UTF-8"


class SESNotificationService:
    """Sends plain-text emails through SES (SendEmail API).

    Uses boto3 (sync) via asyncio.to_thread for async API. One call per
    recipient; SES returns a MessageId receipt per accepted message.
    """

    def __init__(
        self,
        sender: str,
        region: str = "eu-west-1",
        configuration_set: str | None = None,
        client: Any = None,
    ) -> None:
        """Initialize SES client.

        Args:
            sender: Verified SES identity used as the From address.
            region: AWS region of the SES identity.
            configuration_set: Optional SES configuration set (delivery events).
            client: Optional pre-built boto3 SES client.
        """
        self.sender = sender
        self.configuration_set = configuration_set
        self._client = client if client is not None else boto3.client("ses", region_name=region)

    def _send_sync(self, to: str, subject: str, body: str) -> str:
        params: dict[str, Any] = {
            "Source": self.sender,
            "Destination": {"ToAddresses": [to]},
            "Message": {
                "Subject": {"Data": subject, "Charset": _CHARSET},
                "Body": {"Text": {"Data": body, "Charset": _CHARSET}},
            },
        }
        if self.configuration_set:
            params["ConfigurationSetName"] = self.configuration_set
        resp = self._client.send_email(**params)
        return resp["MessageId"]

    async def send(self, to: str, subject: str, body: str) -> str:
        """Send one email; raise NotificationException on SES or transport errors."""
        try:
            message_id = await asyncio.to_thread(self._send_sync, to, subject, body)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            logger.error("SES rejected message (code=%s)", code)
            raise NotificationException(f"SES send failed: {code}", recipients=[to]) from e
        except BotoCoreError as e:
            logger.error("SES send failed: %s", e)
            raise NotificationException("SES send failed", recipients=[to]) from e
        logger.debug("SES accepted message %s", message_id)
        return message_id
