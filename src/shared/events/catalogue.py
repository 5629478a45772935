"""Cross-domain event contracts for Catalogue domain events.

The source-of-truth events are in src/catalogue/product/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Identifier, Integer, String, Text


class ProductCreated(BaseEvent):
    """A seller listed a new product."""

    __version__ = 1

    product_id = Identifier(required=True)
    seller_id = Identifier(required=True)
    seller_email = String()
    title = String(required=True)
    description = Text()
    price_amount = Float(required=True)
    price_currency = String(required=True)
    stock = Integer()
    created_at = DateTime(required=True)
