"""Upstream client port (abstract interface).

Ordering reads two other services when an order is placed: the caller's
cart and the current record of every product in it. Adapters implement
this contract over HTTP (production) or in memory (tests).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shared.exceptions import UpstreamError

__all__ = ["CartLine", "ProductSnapshot", "ProductUnavailable", "UpstreamClient", "UpstreamError"]


@dataclass(frozen=True)
class CartLine:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class ProductSnapshot:
    """The fields of a product that ordering copies onto an order line."""

    product_id: str
    title: str
    price_amount: float
    price_currency: str
    stock: int


class ProductUnavailable(Exception):
    """A product referenced by the cart no longer exists."""

    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class UpstreamClient(ABC):
    """Read access to the cart and product services on behalf of a caller."""

    @abstractmethod
    def get_cart(self, auth_token: str) -> list[CartLine]:
        """Return the lines of the caller's cart (empty when there is no cart)."""
        ...

    @abstractmethod
    def get_products(self, product_ids: list[str], auth_token: str) -> dict[str, ProductSnapshot]:
        """Fetch every product in ``product_ids``.

        Raises ProductUnavailable when one of them does not exist and
        UpstreamError on any other failure. Either failure fails the batch.
        """
        ...
