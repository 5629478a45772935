"""Cart aggregate (CQRS) — a user's list of products and quantities.

The cart is keyed by its owner's user id, so each user has at most one.
Adding a product already in the cart sums the quantities; updating a line
replaces its quantity outright.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from cart.cart.events import CartItemAdded, CartItemQuantityUpdated
from cart.domain import cart


@cart.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@cart.aggregate
class Cart:
    user_id = Identifier(identifier=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def open(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def _find_item(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def add_item(self, product_id, quantity):
        """Add a product, or increase its quantity if it is already in the cart."""
        _assert_positive(quantity)

        existing = self._find_item(product_id)
        if existing:
            existing.quantity += quantity
            new_quantity = existing.quantity
        else:
            self.add_items(CartItem(product_id=product_id, quantity=quantity))
            new_quantity = quantity

        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemAdded(
                user_id=str(self.user_id),
                product_id=str(product_id),
                quantity=quantity,
                new_quantity=new_quantity,
            )
        )

    def update_item(self, product_id, quantity):
        """Replace the quantity of a product already in the cart."""
        _assert_positive(quantity)

        item = self._find_item(product_id)
        if item is None:
            raise ObjectNotFoundError("Item not found in cart")

        previous_quantity = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemQuantityUpdated(
                user_id=str(self.user_id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    # -------------------------------------------------------------------
    # Read helpers
    # -------------------------------------------------------------------
    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    def to_dict(self) -> dict:
        return {
            "user": str(self.user_id),
            "items": [{"product_id": str(i.product_id), "quantity": i.quantity} for i in self.items],
            "total_quantity": self.total_quantity,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


def _assert_positive(quantity):
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError({"qty": ["Quantity must be a positive integer"]})
