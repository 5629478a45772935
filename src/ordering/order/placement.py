"""Order placement — command and handler.

Reads the caller's cart and the current product records, prices the lines
and persists a PENDING order. Nothing is persisted if any step fails, and
the cart is left untouched.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.clients import ProductUnavailable, get_upstream_client
from ordering.domain import ordering
from ordering.order.order import Order, ShippingAddress
from ordering.order.pricing import distinct_product_ids, price_cart
from shared.logging import get_logger

logger = get_logger(__name__)


@ordering.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    customer_email = String(max_length=254)
    auth_token = Text(required=True)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    pincode = String(required=True, max_length=20)
    country = String(required=True, max_length=100)


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        client = get_upstream_client()

        lines = client.get_cart(command.auth_token)
        if not lines:
            raise ValidationError({"cart": ["Cart is empty"]})

        try:
            products = client.get_products(distinct_product_ids(lines), command.auth_token)
        except ProductUnavailable as exc:
            raise ValidationError({"items": [str(exc)]}) from exc

        priced, currency = price_cart(lines, products)

        order = Order.place(
            user_id=command.user_id,
            customer_email=command.customer_email,
            shipping_address=ShippingAddress(
                street=command.street,
                city=command.city,
                state=command.state,
                zip=command.pincode,
                country=command.country,
            ),
            lines=priced,
            currency=currency,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            total=order.total_amount.amount,
            currency=currency,
        )
        return order.to_dict()
