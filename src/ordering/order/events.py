"""Domain events for the Order aggregate.

OrderCreated carries a denormalized snapshot of the order so consumers never
have to call back into Ordering.
"""

from protean.fields import DateTime, Float, Identifier, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderCreated:
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


@ordering.event(part_of="Order")
class OrderConfirmed:
    __version__ = 1

    order_id = Identifier(required=True)
    confirmed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderShipped:
    __version__ = 1

    order_id = Identifier(required=True)
    shipped_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderDelivered:
    __version__ = 1

    order_id = Identifier(required=True)
    delivered_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderCancelled:
    """A pending order was cancelled by its owner."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    cancelled_at = DateTime(required=True)


@ordering.event(part_of="Order")
class ShippingAddressUpdated:
    """The shipping address of a pending order was replaced."""

    __version__ = 1

    order_id = Identifier(required=True)
    street = String(required=True)
    city = String(required=True)
    state = String()
    zip = String(required=True)
    country = String(required=True)
    updated_at = DateTime(required=True)
