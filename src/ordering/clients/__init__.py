"""Upstream client factory.

Provides get_upstream_client() / set_upstream_client() to swap implementations:
- HttpUpstreamClient talking to the cart and product services (default)
- FakeUpstreamClient for development and testing
"""

from ordering.clients.http_adapter import HttpUpstreamClient
from ordering.clients.port import CartLine, ProductSnapshot, ProductUnavailable, UpstreamClient, UpstreamError
from shared.config import get_settings

__all__ = [
    "CartLine",
    "ProductSnapshot",
    "ProductUnavailable",
    "UpstreamClient",
    "UpstreamError",
    "get_upstream_client",
    "reset_upstream_client",
    "set_upstream_client",
]

_current_client: UpstreamClient | None = None


def get_upstream_client() -> UpstreamClient:
    """Return the current upstream client. Defaults to HTTP using the configured service URLs."""
    global _current_client
    if _current_client is None:
        settings = get_settings()
        _current_client = HttpUpstreamClient(
            cart_service_url=settings.cart_service_url,
            product_service_url=settings.product_service_url,
            timeout=settings.http_timeout_seconds,
        )
    return _current_client


def set_upstream_client(client: UpstreamClient) -> None:
    """Override the active upstream client (useful for tests)."""
    global _current_client
    _current_client = client


def reset_upstream_client() -> None:
    """Reset to the default client."""
    global _current_client
    _current_client = None
