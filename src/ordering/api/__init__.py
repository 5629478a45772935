"""Ordering domain API package."""

from ordering.api.routes import router

__all__ = ["router"]
