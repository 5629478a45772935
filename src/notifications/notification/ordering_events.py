"""Inbound cross-domain event handler — Notifications reacts to Ordering events.

Listens for OrderCreated to send the order confirmation email.
"""

import json

from notifications.domain import notifications
from notifications.notification.helpers import create_notification
from notifications.notification.notification import Notification, NotificationType
from protean.utils.mixins import handle
from shared.events.ordering import OrderCreated

notifications.register_external_event(OrderCreated, "Ordering.OrderCreated.v1")


@notifications.event_handler(part_of=Notification, stream_category="ordering::order")
class OrderingEventsHandler:
    """Reacts to Ordering domain events to send user notifications."""

    @handle(OrderCreated)
    def on_order_created(self, event: OrderCreated) -> None:
        create_notification(
            recipient_id=str(event.user_id),
            recipient_email=event.customer_email,
            notification_type=NotificationType.ORDER_CONFIRMATION.value,
            context={
                "order_id": str(event.order_id),
                "items": json.loads(event.items) if event.items else [],
                "total_amount": f"{event.total_amount:.2f}",
                "currency": event.currency,
            },
            source_event_type="Ordering.OrderCreated.v1",
        )
