"""Image store factory.

Provides get_image_store() / set_image_store() to swap implementations.
FakeImageStore is the default; a CDN-backed adapter can be installed at
start-up with set_image_store().
"""

from catalogue.images.fake_store import FakeImageStore
from catalogue.images.port import ImageStore

_current_store: ImageStore | None = None


def get_image_store() -> ImageStore:
    """Return the current image store. Defaults to FakeImageStore."""
    global _current_store
    if _current_store is None:
        _current_store = FakeImageStore()
    return _current_store


def set_image_store(store: ImageStore) -> None:
    """Override the active image store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_image_store() -> None:
    """Reset to default image store."""
    global _current_store
    _current_store = None
