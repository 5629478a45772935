"""Cross-domain event contracts for Ordering domain events.

Registered as external events by consumers (Notifications) with the
same __type__ strings the Ordering domain publishes under.

The source-of-truth events are in src/ordering/order/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Identifier, String, Text


class OrderCreated(BaseEvent):
    """An order was placed from a priced snapshot of the user's cart."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    customer_email = String()
    items = Text(required=True)  # JSON: list of {product_id, title, quantity, unit_price, currency}
    total_amount = Float(required=True)
    currency = String(required=True)
    shipping_address = Text(required=True)  # JSON: {street, city, state, zip, country}
    status = String(required=True)
    created_at = DateTime(required=True)

