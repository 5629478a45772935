"""BDD tests for placing, fulfilling and canceling orders."""

from pytest_bdd import parsers, scenarios, when

scenarios("features/order_lifecycle.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the shopper places an order")
def _(place_order):
    place_order()


@when(parsers.cfparse('the order is moved to "{status}"'))
def _(move_order, status):
    move_order(status)


@when("the shopper cancels the order")
def _(cancel_order):
    cancel_order()
