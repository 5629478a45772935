"""Cart access and item management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from cart.cart.cart import Cart
from cart.domain import cart
from shared.logging import get_logger

logger = get_logger(__name__)


@cart.command(part_of="Cart")
class OpenCart:
    """Fetch the user's cart, creating an empty one on first access."""

    user_id = Identifier(required=True)


@cart.command(part_of="Cart")
class AddItemToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@cart.command(part_of="Cart")
class UpdateCartItem:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


def _get_or_open(repo, user_id) -> Cart:
    try:
        return repo.get(user_id)
    except ObjectNotFoundError:
        logger.debug("Opening new cart", user_id=str(user_id))
        user_cart = Cart.open(user_id=user_id)
        repo.add(user_cart)
        return user_cart


@cart.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(OpenCart)
    def open_cart(self, command):
        repo = current_domain.repository_for(Cart)
        return _get_or_open(repo, command.user_id).to_dict()

    @handle(AddItemToCart)
    def add_item(self, command):
        repo = current_domain.repository_for(Cart)
        user_cart = _get_or_open(repo, command.user_id)
        user_cart.add_item(product_id=command.product_id, quantity=command.quantity)
        repo.add(user_cart)
        return user_cart.to_dict()

    @handle(UpdateCartItem)
    def update_item(self, command):
        repo = current_domain.repository_for(Cart)
        try:
            user_cart = repo.get(command.user_id)
        except ObjectNotFoundError as exc:
            raise ObjectNotFoundError("Cart not found") from exc

        user_cart.update_item(product_id=command.product_id, quantity=command.quantity)
        repo.add(user_cart)
        return user_cart.to_dict()
