"""HTTP adapter for the cart and product services.

Product records are fetched concurrently on a small thread pool sharing one
pooled ``requests.Session``. The batch is awaited jointly: the first failure
fails the whole fetch. There are no retries.
"""

from concurrent.futures import ThreadPoolExecutor

import requests
from requests.adapters import HTTPAdapter

from ordering.clients.port import CartLine, ProductSnapshot, ProductUnavailable, UpstreamClient
from shared.exceptions import UpstreamError
from shared.logging import get_logger

logger = get_logger(__name__)

MAX_WORKERS = 8


def _create_http_session() -> requests.Session:
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=10, pool_maxsize=20, max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


class HttpUpstreamClient(UpstreamClient):
    def __init__(
        self,
        cart_service_url: str,
        product_service_url: str,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self.cart_service_url = cart_service_url.rstrip("/")
        self.product_service_url = product_service_url.rstrip("/")
        self.timeout = timeout
        self.session = session or _create_http_session()

    def _get(self, url: str, auth_token: str, service: str) -> requests.Response:
        try:
            return self.session.get(
                url,
                headers={"Authorization": f"Bearer {auth_token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Upstream request failed", service=service, url=url, error=str(exc))
            raise UpstreamError(f"{service} service unreachable", service=service) from exc

    def get_cart(self, auth_token: str) -> list[CartLine]:
        url = f"{self.cart_service_url}/api/cart"
        response = self._get(url, auth_token, "cart")
        if response.status_code == 404:
            return []
        if not response.ok:
            logger.error("Upstream returned an error status", service="cart", url=url, status_code=response.status_code)
            raise UpstreamError("Cart service error", service="cart", status_code=response.status_code)

        cart = (response.json() or {}).get("cart") or {}
        return [
            CartLine(product_id=str(item["productId"]), quantity=int(item["quantity"]))
            for item in cart.get("items", [])
        ]

    def _get_product(self, product_id: str, auth_token: str) -> ProductSnapshot:
        url = f"{self.product_service_url}/api/products/{product_id}"
        response = self._get(url, auth_token, "product")
        if response.status_code == 404:
            raise ProductUnavailable(product_id)
        if not response.ok:
            logger.error("Upstream returned an error status", service="product", url=url, status_code=response.status_code)
            raise UpstreamError("Product service error", service="product", status_code=response.status_code)

        data = (response.json() or {}).get("data") or {}
        price = data.get("price") or {}
        return ProductSnapshot(
            product_id=str(data.get("id", product_id)),
            title=data.get("title", ""),
            price_amount=float(price.get("amount", 0)),
            price_currency=price.get("currency", "INR"),
            stock=int(data.get("stock") or 0),
        )

    def get_products(self, product_ids: list[str], auth_token: str) -> dict[str, ProductSnapshot]:
        if not product_ids:
            return {}

        with ThreadPoolExecutor(max_workers=min(MAX_WORKERS, len(product_ids))) as pool:
            futures = {pid: pool.submit(self._get_product, pid, auth_token) for pid in product_ids}
            # result() re-raises the first failure; remaining fetches are discarded
            return {pid: future.result() for pid, future in futures.items()}
