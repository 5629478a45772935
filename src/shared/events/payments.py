"""Cross-domain event contracts for Payments events.

Payments is an external producer: nothing in this repository raises these
events, but Notifications consumes them from the ``payments::payment``
stream. The contracts pin the fields that producer is expected to send.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Identifier, String


class PaymentSucceeded(BaseEvent):
    """Payment for an order was captured."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    email = String(required=True)
    username = String()
    amount = Float(required=True)
    currency = String(required=True)
    succeeded_at = DateTime(required=True)


class PaymentFailed(BaseEvent):
    """Payment for an order could not be captured."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    email = String(required=True)
    username = String()
    amount = Float()
    currency = String()
    reason = String()
    failed_at = DateTime(required=True)
