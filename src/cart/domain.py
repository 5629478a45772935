"""Cart bounded context — one shopping cart per user.

Carts hold product references and quantities only. Prices and stock are
looked up when an order is placed, never at cart time.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

cart = Domain(name="cart")
