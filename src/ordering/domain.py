"""Ordering bounded context — orders placed from a priced snapshot of the cart.

Placing an order reads the caller's cart and the current product records
over HTTP, checks stock, freezes unit prices onto the order and publishes
OrderCreated. Orders are a standard CQRS aggregate (not event sourced).
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

ordering = Domain(name="ordering")
