import pytest
from cart.cart.cart import Cart
from cart.cart.items import AddItemToCart, OpenCart, UpdateCartItem
from protean import current_domain
from protean.exceptions import ObjectNotFoundError


class TestOpenCart:
    def test_first_access_creates_empty_cart(self):
        cart = current_domain.process(OpenCart(user_id="user-001"), asynchronous=False)

        assert cart["user"] == "user-001"
        assert cart["items"] == []
        assert current_domain.repository_for(Cart).get("user-001") is not None

    def test_second_access_returns_the_same_cart(self):
        current_domain.process(AddItemToCart(user_id="user-001", product_id="p1", quantity=1), asynchronous=False)
        cart = current_domain.process(OpenCart(user_id="user-001"), asynchronous=False)
        assert cart["items"] == [{"product_id": "p1", "quantity": 1}]


class TestAddItemToCart:
    def test_add_then_add_again_sums(self):
        current_domain.process(AddItemToCart(user_id="user-001", product_id="p1", quantity=2), asynchronous=False)
        cart = current_domain.process(
            AddItemToCart(user_id="user-001", product_id="p1", quantity=3), asynchronous=False
        )

        assert cart["items"] == [{"product_id": "p1", "quantity": 5}]
        assert cart["total_quantity"] == 5

    def test_carts_are_per_user(self):
        current_domain.process(AddItemToCart(user_id="user-001", product_id="p1", quantity=2), asynchronous=False)
        other = current_domain.process(OpenCart(user_id="user-002"), asynchronous=False)
        assert other["items"] == []


class TestUpdateCartItem:
    def test_update_replaces_quantity(self):
        current_domain.process(AddItemToCart(user_id="user-001", product_id="p1", quantity=2), asynchronous=False)
        cart = current_domain.process(
            UpdateCartItem(user_id="user-001", product_id="p1", quantity=9), asynchronous=False
        )
        assert cart["items"] == [{"product_id": "p1", "quantity": 9}]

    def test_update_without_cart_is_not_found(self):
        with pytest.raises(ObjectNotFoundError) as exc:
            current_domain.process(UpdateCartItem(user_id="nobody", product_id="p1", quantity=1), asynchronous=False)
        assert exc.value.args[0] == "Cart not found"

    def test_update_missing_item_is_not_found(self):
        current_domain.process(OpenCart(user_id="user-001"), asynchronous=False)
        with pytest.raises(ObjectNotFoundError) as exc:
            current_domain.process(UpdateCartItem(user_id="user-001", product_id="p9", quantity=1), asynchronous=False)
        assert exc.value.args[0] == "Item not found in cart"
