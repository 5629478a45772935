"""Inbound cross-domain event handler — Notifications reacts to Identity events.

Listens for UserRegistered to send welcome emails.
"""

from notifications.domain import notifications
from notifications.notification.helpers import create_notification
from notifications.notification.notification import Notification, NotificationType
from protean.utils.mixins import handle
from shared.events.identity import UserRegistered

notifications.register_external_event(UserRegistered, "Identity.UserRegistered.v1")


@notifications.event_handler(part_of=Notification, stream_category="identity::user")
class IdentityEventsHandler:
    """Reacts to Identity domain events to send user notifications."""

    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        """Send welcome email when a new user registers."""
        create_notification(
            recipient_id=str(event.user_id),
            recipient_email=event.email,
            notification_type=NotificationType.WELCOME.value,
            context={
                "username": event.username,
                "first_name": event.first_name,
                "last_name": event.last_name,
            },
            source_event_type="Identity.UserRegistered.v1",
        )
