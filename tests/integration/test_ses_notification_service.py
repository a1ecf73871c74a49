"""SESNotificationService against a mocked boto3 SES client."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from taskmanager.domain.exceptions import NotificationException
from taskmanager.infrastructure.notifications import (
    LogOnlyNotificationService,
    SESNotificationService,
)


async def test_send_builds_ses_request() -> None:
    client = MagicMock()
    client.send_email.return_value = {"MessageId": "0100-abc"}
    service = SESNotificationService(
        sender="tasks@example.com", configuration_set="task-events", client=client
    )
    message_id = await service.send("u1@example.com", "New Task Assigned: X", "Body")
    assert message_id == "0100-abc"
    kwargs = client.send_email.call_args.kwargs
    assert kwargs["Source"] == "tasks@example.com"
    assert kwargs["Destination"] == {"ToAddresses": ["u1@example.com"]}
    assert kwargs["Message"]["Subject"]["Data"] == "New Task Assigned: X"
    assert kwargs["Message"]["Body"]["Text"]["Data"] == "Body"
    assert kwargs["ConfigurationSetName"] == "task-events"


async def test_send_without_configuration_set() -> None:
    client = MagicMock()
    client.send_email.return_value = {"MessageId": "m"}
    await SESNotificationService(sender="s@example.com", client=client).send("a@example.com", "s", "b")
    assert "ConfigurationSetName" not in client.send_email.call_args.kwargs


async def test_rejected_message_raises_notification_exception() -> None:
    client = MagicMock()
    client.send_email.side_effect = ClientError(
        {"Error": {"Code": "MessageRejected", "Message": "Email address is not verified."}},
        "SendEmail",
    )
    service = SESNotificationService(sender="s@example.com", client=client)
    with pytest.raises(NotificationException) as exc_info:
        await service.send("a@example.com", "s", "b")
    assert exc_info.value.message == "SES send failed: MessageRejected"
    assert exc_info.value.details["recipients"] == ["a@example.com"]


async def test_transport_error_raises_notification_exception() -> None:
    client = MagicMock()
    client.send_email.side_effect = EndpointConnectionError(endpoint_url="https://email.eu-west-1.amazonaws.com")
    service = SESNotificationService(sender="s@example.com", client=client)
    with pytest.raises(NotificationException):
        await service.send("a@example.com", "s", "b")


async def test_log_only_sender_returns_message_id() -> None:
    message_id = await LogOnlyNotificationService().send("a@example.com", "s", "b")
    assert message_id.startswith("log-")
