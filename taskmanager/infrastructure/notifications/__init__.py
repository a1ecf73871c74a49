"""Notification senders: Amazon SES and log-only."""

from taskmanager.infrastructure.notifications.log_notification_service import (
    LogOnlyNotificationService,
)
from taskmanager.infrastructure.notifications.ses_notification_service import (
    SESNotificationService,
)

__all__ = ["LogOnlyNotificationService", "SESNotificationService"]
