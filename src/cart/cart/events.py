"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer

from cart.domain import cart


@cart.event(part_of="Cart")
class CartItemAdded:
    """A product was added to the cart, or its quantity was increased."""

    __version__ = 1

    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@cart.event(part_of="Cart")
class CartItemQuantityUpdated:
    """The quantity of a product already in the cart was replaced."""

    __version__ = 1

    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
