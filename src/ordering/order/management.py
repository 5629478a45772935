"""Changes to an existing order — commands and handler.

Owners may cancel a pending order or change its shipping address. Admins
drive fulfilment through the CONFIRMED, SHIPPED and DELIVERED states.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order, ShippingAddress
from shared.exceptions import PermissionDenied
from shared.logging import get_logger

logger = get_logger(__name__)

FORBIDDEN_MESSAGE = "Forbidden: You do not have access to this order"


@ordering.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)


@ordering.command(part_of="Order")
class UpdateShippingAddress:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    pincode = String(required=True, max_length=20)
    country = String(required=True, max_length=100)


@ordering.command(part_of="Order")
class ChangeOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)


def readable_order(order_id, user_id, is_admin=False) -> Order:
    """Load an order the caller may see: their own, or any order for an admin."""
    order = current_domain.repository_for(Order).fetch(order_id)
    if not is_admin and not order.is_owned_by(user_id):
        raise PermissionDenied(FORBIDDEN_MESSAGE)
    return order


def _owned_order(repo, order_id, user_id) -> Order:
    order = repo.fetch(order_id)
    if not order.is_owned_by(user_id):
        logger.info("User tried to modify an order they do not own", order_id=str(order_id), user_id=str(user_id))
        raise PermissionDenied(FORBIDDEN_MESSAGE)
    return order


@ordering.command_handler(part_of=Order)
class ManageOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        repo = current_domain.repository_for(Order)
        order = _owned_order(repo, command.order_id, command.user_id)
        order.cancel()
        repo.add(order)

        logger.info("Order canceled", order_id=str(order.id))
        return order.to_dict()

    @handle(UpdateShippingAddress)
    def update_shipping_address(self, command):
        repo = current_domain.repository_for(Order)
        order = _owned_order(repo, command.order_id, command.user_id)
        order.update_shipping_address(
            ShippingAddress(
                street=command.street,
                city=command.city,
                state=command.state,
                zip=command.pincode,
                country=command.country,
            )
        )
        repo.add(order)
        return order.to_dict()

    @handle(ChangeOrderStatus)
    def change_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.fetch(command.order_id)
        previous = order.status
        order.transition_to(command.status)
        repo.add(order)

        logger.info("Order status changed", order_id=str(order.id), previous=previous, status=order.status)
        return order.to_dict()
