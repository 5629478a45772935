"""Notification aggregate (CQRS) — tracks a single email sent to a recipient.

Notifications are created reactively from cross-domain events. Delivery is
best-effort: each notification is sent once and ends up SENT or FAILED.

State Machine:
    PENDING → SENT
    PENDING → FAILED
"""

from datetime import UTC, datetime
from enum import Enum

from notifications.domain import notifications
from notifications.notification.events import (
    NotificationCreated,
    NotificationFailed,
    NotificationSent,
)
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class NotificationType(Enum):
    WELCOME = "Welcome"
    ORDER_CONFIRMATION = "OrderConfirmation"
    PAYMENT_RECEIPT = "PaymentReceipt"
    PAYMENT_FAILED = "PaymentFailed"
    PRODUCT_CREATED = "ProductCreated"


class NotificationStatus(Enum):
    PENDING = "Pending"
    SENT = "Sent"
    FAILED = "Failed"


# ---------------------------------------------------------------------------
# State Machine
# ---------------------------------------------------------------------------
_VALID_TRANSITIONS = {
    NotificationStatus.PENDING: {NotificationStatus.SENT, NotificationStatus.FAILED},
    NotificationStatus.SENT: set(),  # Terminal
    NotificationStatus.FAILED: set(),  # Terminal
}


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@notifications.aggregate
class Notification:
    """An email sent to a recipient in reaction to another domain's event."""

    # Recipient
    recipient_id: Identifier(required=True)
    recipient_email: String(required=True, max_length=254)

    notification_type: String(choices=NotificationType, required=True)

    # Content
    subject: String(max_length=500)
    body: Text(required=True)
    html_body: Text()

    # Source event correlation
    source_event_type: String(max_length=200)

    # Status
    status: String(choices=NotificationStatus, default=NotificationStatus.PENDING.value)

    # Delivery tracking
    message_id: String(max_length=200)
    sent_at: DateTime()
    failure_reason: String(max_length=500)

    # Timestamps
    created_at: DateTime()
    updated_at: DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        recipient_id,
        recipient_email,
        notification_type,
        body,
        subject=None,
        html_body=None,
        source_event_type=None,
    ):
        """Create a new notification in PENDING status."""
        now = datetime.now(UTC)

        notification = cls(
            recipient_id=recipient_id,
            recipient_email=recipient_email,
            notification_type=notification_type,
            subject=subject,
            body=body,
            html_body=html_body,
            source_event_type=source_event_type,
            status=NotificationStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

        notification.raise_(
            NotificationCreated(
                notification_id=str(notification.id),
                recipient_id=str(recipient_id),
                recipient_email=recipient_email,
                notification_type=notification_type,
                subject=subject,
                source_event_type=source_event_type,
                created_at=now,
            )
        )

        return notification

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        """Validate state machine transition."""
        current = NotificationStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def mark_sent(self, message_id=None, sent_at=None):
        """Mark notification as accepted by the email channel."""
        self._assert_can_transition(NotificationStatus.SENT)

        now = sent_at or datetime.now(UTC)
        self.status = NotificationStatus.SENT.value
        self.message_id = message_id
        self.sent_at = now
        self.updated_at = now

        self.raise_(
            NotificationSent(
                notification_id=str(self.id),
                recipient_id=str(self.recipient_id),
                message_id=message_id,
                sent_at=now,
            )
        )

    def mark_failed(self, reason):
        """Mark notification as failed."""
        self._assert_can_transition(NotificationStatus.FAILED)

        now = datetime.now(UTC)
        self.status = NotificationStatus.FAILED.value
        self.failure_reason = reason
        self.updated_at = now

        self.raise_(
            NotificationFailed(
                notification_id=str(self.id),
                recipient_id=str(self.recipient_id),
                reason=reason,
                failed_at=now,
            )
        )
