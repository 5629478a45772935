"""Internal dispatch handler — sends notifications through the email channel.

Reacts to NotificationCreated events and hands the message to the email
adapter. Updates the notification status to SENT or FAILED based on the
result. There is no retry.
"""

from notifications.channel import get_email_channel
from notifications.channel.email_port import SENT
from notifications.domain import notifications
from notifications.notification.events import NotificationCreated
from notifications.notification.notification import Notification, NotificationStatus
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.logging import get_logger

logger = get_logger(__name__)


@notifications.event_handler(part_of=Notification)
class NotificationDispatcher:
    """Sends notifications via the email channel when they are created."""

    @handle(NotificationCreated)
    def on_notification_created(self, event: NotificationCreated) -> None:
        repo = current_domain.repository_for(Notification)

        try:
            notification = repo.get(event.notification_id)
        except ObjectNotFoundError:
            logger.error(
                "Failed to load notification for dispatch",
                notification_id=str(event.notification_id),
            )
            return

        # Only dispatch PENDING notifications
        if NotificationStatus(notification.status) != NotificationStatus.PENDING:
            logger.info(
                "Notification not in PENDING status, skipping dispatch",
                notification_id=str(event.notification_id),
                status=notification.status,
            )
            return

        result = get_email_channel().send(
            to=notification.recipient_email,
            subject=notification.subject or "",
            body=notification.body,
            html_body=notification.html_body,
        )

        if result.get("status") == SENT:
            notification.mark_sent(message_id=result.get("message_id"))
        else:
            notification.mark_failed(result.get("error", "Unknown dispatch error"))
            logger.error(
                "Notification dispatch failed",
                notification_id=str(notification.id),
                error=notification.failure_reason,
            )

        repo.add(notification)
