"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.order.management import CancelOrder, ChangeOrderStatus
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder
from protean.exceptions import InvalidOperationError, ValidationError
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then

SHOPPER_ID = "user-001"
SHOPPER_TOKEN = "token-user-001"


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for the exception raised by a step, if any."""
    return {"exc": None}


@pytest.fixture()
def placed():
    """Container for the order placed during the scenario."""
    return {"order_id": None}


# ---------------------------------------------------------------------------
# Command fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def run(error):
    def _run(command):
        try:
            return current_domain.process(command, asynchronous=False)
        except (ValidationError, InvalidOperationError) as exc:
            error["exc"] = exc
            return None

    return _run


@pytest.fixture()
def place_order(run, placed):
    def _place():
        result = run(
            PlaceOrder(
                user_id=SHOPPER_ID,
                customer_email="jane@example.com",
                auth_token=SHOPPER_TOKEN,
                street="1 Main St",
                city="Pune",
                state="MH",
                pincode="411001",
                country="India",
            )
        )
        if result:
            placed["order_id"] = result["id"]

    return _place


@pytest.fixture()
def move_order(run, placed):
    def _move(status):
        run(ChangeOrderStatus(order_id=placed["order_id"], status=status))

    return _move


@pytest.fixture()
def cancel_order(run, placed):
    def _cancel():
        run(CancelOrder(order_id=placed["order_id"], user_id=SHOPPER_ID))

    return _cancel


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalogue lists "{title}" at {price:g} with {stock:d} in stock'))
def _(upstream, title, price, stock):
    upstream.add_product(title.lower(), title, float(price), stock=stock)


@given(parsers.re(r"the shopper's cart holds (?P<lines>.+)"))
def _(upstream, lines):
    cart = []
    for part in lines.split(" and "):
        qty, title = part.split(" ", 1)
        cart.append((title.strip('"').lower(), int(qty)))
    upstream.set_cart(SHOPPER_TOKEN, cart)


@given("the shopper placed an order")
def _(place_order, error):
    place_order()
    assert error["exc"] is None


@given(parsers.cfparse('the order was moved to "{status}"'))
def _(move_order, error, status):
    move_order(status)
    assert error["exc"] is None


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order is "{status}"'))
def _(placed, error, status):
    assert error["exc"] is None
    assert current_domain.repository_for(Order).get(placed["order_id"]).status == status


@then(parsers.cfparse("the order total is {total:g}"))
def _(placed, total):
    order = current_domain.repository_for(Order).get(placed["order_id"])
    assert order.total_amount.amount == total


@then(parsers.cfparse('the order is rejected with "{message}"'))
def _(error, message):
    exc = error["exc"]
    assert exc is not None
    if isinstance(exc, ValidationError):
        assert message in [m for msgs in exc.messages.values() for m in msgs]
    else:
        assert str(exc) == message
