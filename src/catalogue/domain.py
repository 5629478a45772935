"""Catalogue bounded context — products listed by sellers.

Each product belongs to exactly one seller; only that seller may change or
remove it. Ordering reads products over HTTP to price carts and check stock.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
catalogue = Domain(name="catalogue")
