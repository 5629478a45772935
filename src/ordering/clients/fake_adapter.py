"""In-memory upstream client for development and testing."""

from ordering.clients.port import CartLine, ProductSnapshot, ProductUnavailable, UpstreamClient
from shared.exceptions import UpstreamError


class FakeUpstreamClient(UpstreamClient):
    """Serves carts and products registered on it.

    Carts are keyed by auth token, so each test user gets their own.
    """

    def __init__(self) -> None:
        self.carts: dict[str, list[CartLine]] = {}
        self.products: dict[str, ProductSnapshot] = {}
        self.fail_with: str | None = None
        self.calls: list[dict] = []

    def set_cart(self, auth_token: str, lines: list[tuple[str, int]]) -> None:
        self.carts[auth_token] = [CartLine(product_id=str(pid), quantity=qty) for pid, qty in lines]

    def add_product(self, product_id, title, price_amount, stock, price_currency="INR") -> ProductSnapshot:
        snapshot = ProductSnapshot(
            product_id=str(product_id),
            title=title,
            price_amount=price_amount,
            price_currency=price_currency,
            stock=stock,
        )
        self.products[str(product_id)] = snapshot
        return snapshot

    def configure(self, fail_with: str | None = None) -> None:
        """Make every call raise UpstreamError with ``fail_with`` until reset."""
        self.fail_with = fail_with

    def get_cart(self, auth_token: str) -> list[CartLine]:
        self.calls.append({"method": "get_cart", "auth_token": auth_token})
        if self.fail_with:
            raise UpstreamError(self.fail_with, service="cart")
        return list(self.carts.get(auth_token, []))

    def get_products(self, product_ids: list[str], auth_token: str) -> dict[str, ProductSnapshot]:
        self.calls.append({"method": "get_products", "product_ids": list(product_ids), "auth_token": auth_token})
        if self.fail_with:
            raise UpstreamError(self.fail_with, service="product")

        found = {}
        for pid in product_ids:
            if pid not in self.products:
                raise ProductUnavailable(pid)
            found[pid] = self.products[pid]
        return found
