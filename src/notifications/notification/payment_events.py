"""Inbound cross-domain event handler — Notifications reacts to Payment events.

Listens for PaymentSucceeded (receipt) and PaymentFailed (failure notice).
"""

from notifications.domain import notifications
from notifications.notification.helpers import create_notification
from notifications.notification.notification import Notification, NotificationType
from protean.utils.mixins import handle
from shared.events.payments import PaymentFailed, PaymentSucceeded

notifications.register_external_event(PaymentSucceeded, "Payments.PaymentSucceeded.v1")
notifications.register_external_event(PaymentFailed, "Payments.PaymentFailed.v1")


@notifications.event_handler(part_of=Notification, stream_category="payments::payment")
class PaymentEventsHandler:
    """Reacts to Payment domain events to send user notifications."""

    @handle(PaymentSucceeded)
    def on_payment_succeeded(self, event: PaymentSucceeded) -> None:
        """Send payment receipt when payment is captured."""
        create_notification(
            recipient_id=str(event.user_id),
            recipient_email=event.email,
            notification_type=NotificationType.PAYMENT_RECEIPT.value,
            context={
                "username": event.username,
                "order_id": str(event.order_id),
                "amount": f"{event.amount:.2f}",
                "currency": event.currency,
            },
            source_event_type="Payments.PaymentSucceeded.v1",
        )

    @handle(PaymentFailed)
    def on_payment_failed(self, event: PaymentFailed) -> None:
        create_notification(
            recipient_id=str(event.user_id),
            recipient_email=event.email,
            notification_type=NotificationType.PAYMENT_FAILED.value,
            context={
                "username": event.username,
                "order_id": str(event.order_id),
                "reason": event.reason,
            },
            source_event_type="Payments.PaymentFailed.v1",
        )
