"""Order aggregate: a priced, frozen snapshot of a user's cart.

Unit prices and titles are copied onto the order lines when it is placed
and are never re-read from the catalogue afterwards.

State Machine:
    PENDING → CONFIRMED → SHIPPED → DELIVERED
    PENDING → CANCELED
"""

import json
import math
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from ordering.domain import ordering
from ordering.order.pricing import order_total
from ordering.order.events import (
    OrderCancelled,
    OrderConfirmed,
    OrderCreated,
    OrderDelivered,
    OrderShipped,
    ShippingAddressUpdated,
)

DEFAULT_PAGE_SIZE = 10


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELED = "CANCELED"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELED},
    OrderStatus.CONFIRMED: {OrderStatus.SHIPPED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELED: set(),  # Terminal
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class Money:
    amount = Float(required=True, min_value=0.0)
    currency = String(required=True, max_length=3)


@ordering.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships to, captured when the order is placed.

    The address is a copy: later changes to the user's address book do not
    affect orders already placed.
    """

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    zip = String(required=True, max_length=20)
    country = String(required=True, max_length=100)

    def to_dict(self) -> dict:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
            "country": self.country,
        }


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    title = String(max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = ValueObject(Money, required=True)

    def to_dict(self) -> dict:
        return {
            "product": str(self.product_id),
            "title": self.title,
            "quantity": self.quantity,
            "price": {"amount": self.unit_price.amount, "currency": self.unit_price.currency},
        }


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    user_id = Identifier(required=True)
    customer_email = String(max_length=254)
    items = HasMany(OrderItem)
    total_amount = ValueObject(Money, required=True)
    status = String(max_length=20, choices=OrderStatus, default=OrderStatus.PENDING.value)
    shipping_address = ValueObject(ShippingAddress, required=True)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def order_must_have_items(self):
        if not self.items:
            raise ValidationError({"items": ["Cart is empty"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, shipping_address, lines, currency, customer_email=None):
        """Create a PENDING order from priced lines.

        ``lines`` are dicts with product_id, title, quantity and unit_price;
        every line is priced in ``currency``.
        """
        now = datetime.now(UTC)
        total = order_total(lines)

        order = cls(
            user_id=user_id,
            customer_email=customer_email,
            items=[
                OrderItem(
                    product_id=line["product_id"],
                    title=line.get("title"),
                    quantity=line["quantity"],
                    unit_price=Money(amount=line["unit_price"], currency=currency),
                )
                for line in lines
            ],
            total_amount=Money(amount=total, currency=currency),
            status=OrderStatus.PENDING.value,
            shipping_address=shipping_address,
            created_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                user_id=str(user_id),
                customer_email=customer_email,
                items=json.dumps(
                    [
                        {
                            "product_id": str(item.product_id),
                            "title": item.title,
                            "quantity": item.quantity,
                            "unit_price": item.unit_price.amount,
                            "currency": item.unit_price.currency,
                        }
                        for item in order.items
                    ]
                ),
                total_amount=total,
                currency=currency,
                shipping_address=json.dumps(order.shipping_address.to_dict()),
                status=order.status,
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # State machine
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target):
        current = OrderStatus(self.status)
        if target not in _VALID_TRANSITIONS[current]:
            raise InvalidOperationError(f"Cannot transition from {current.value} to {target.value}")

    def is_owned_by(self, user_id) -> bool:
        return str(self.user_id) == str(user_id)

    def cancel(self):
        if self.status != OrderStatus.PENDING.value:
            raise InvalidOperationError("Only pending orders can be canceled")

        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELED.value
        self.updated_at = now
        self.raise_(OrderCancelled(order_id=str(self.id), user_id=str(self.user_id), cancelled_at=now))

    def update_shipping_address(self, address):
        if self.status != OrderStatus.PENDING.value:
            raise InvalidOperationError("Only pending orders can update address")

        now = datetime.now(UTC)
        self.shipping_address = address
        self.updated_at = now
        self.raise_(
            ShippingAddressUpdated(
                order_id=str(self.id),
                street=address.street,
                city=address.city,
                state=address.state,
                zip=address.zip,
                country=address.country,
                updated_at=now,
            )
        )

    def confirm(self):
        self._assert_can_transition(OrderStatus.CONFIRMED)
        now = datetime.now(UTC)
        self.status = OrderStatus.CONFIRMED.value
        self.updated_at = now
        self.raise_(OrderConfirmed(order_id=str(self.id), confirmed_at=now))

    def ship(self):
        self._assert_can_transition(OrderStatus.SHIPPED)
        now = datetime.now(UTC)
        self.status = OrderStatus.SHIPPED.value
        self.updated_at = now
        self.raise_(OrderShipped(order_id=str(self.id), shipped_at=now))

    def deliver(self):
        self._assert_can_transition(OrderStatus.DELIVERED)
        now = datetime.now(UTC)
        self.status = OrderStatus.DELIVERED.value
        self.updated_at = now
        self.raise_(OrderDelivered(order_id=str(self.id), delivered_at=now))

    def transition_to(self, status: str):
        """Drive the order to ``status`` through the matching state-machine step."""
        try:
            target = OrderStatus(status)
        except ValueError as exc:
            raise ValidationError({"status": [f"Unknown order status: {status}"]}) from exc

        steps = {
            OrderStatus.CONFIRMED: self.confirm,
            OrderStatus.SHIPPED: self.ship,
            OrderStatus.DELIVERED: self.deliver,
            OrderStatus.CANCELED: self.cancel,
        }
        if target not in steps:
            raise InvalidOperationError(f"Cannot transition from {self.status} to {target.value}")
        steps[target]()

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "user": str(self.user_id),
            "items": [item.to_dict() for item in self.items],
            "total_amount": {"amount": self.total_amount.amount, "currency": self.total_amount.currency},
            "status": self.status,
            "shipping_address": self.shipping_address.to_dict(),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------
@ordering.repository(part_of=Order)
class OrderRepository:
    def fetch(self, order_id) -> Order:
        try:
            return self.get(order_id)
        except ObjectNotFoundError as exc:
            raise ObjectNotFoundError("Order not found") from exc

    def page_for_user(self, user_id, page=1, limit=DEFAULT_PAGE_SIZE):
        """Return ``(orders, total)`` for one page of a user's orders, newest first."""
        result = (
            self._dao.query.filter(user_id=str(user_id))
            .order_by("-created_at")
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return result.items, result.total


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0
