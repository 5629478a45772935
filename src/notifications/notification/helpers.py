"""Shared helper for notification event handlers.

Provides the common pattern: render template → create Notification.
Dispatch happens when NotificationCreated is handled.
"""

from notifications.notification.notification import Notification
from notifications.templates import get_template
from protean.utils.globals import current_domain
from shared.logging import get_logger

logger = get_logger(__name__)


def create_notification(
    recipient_id: str,
    recipient_email: str | None,
    notification_type: str,
    context: dict,
    source_event_type: str | None = None,
) -> str | None:
    """Render the template for ``notification_type`` and record a Notification.

    Returns:
        The notification ID, or None when the event carried no email address.
    """
    if not recipient_email:
        logger.info(
            "No recipient email on event, skipping notification",
            recipient_id=recipient_id,
            notification_type=notification_type,
            source_event_type=source_event_type,
        )
        return None

    template_cls = get_template(notification_type)
    rendered = template_cls.render(context)

    notification = Notification.create(
        recipient_id=recipient_id,
        recipient_email=recipient_email,
        notification_type=notification_type,
        subject=rendered.get("subject"),
        body=rendered["body"],
        html_body=rendered.get("html_body"),
        source_event_type=source_event_type,
    )
    current_domain.repository_for(Notification).add(notification)

    logger.info(
        "Notification created",
        recipient_id=recipient_id,
        notification_type=notification_type,
        notification_id=str(notification.id),
    )

    return str(notification.id)
