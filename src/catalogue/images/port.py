"""Image store port (abstract interface).

Product images are handed to an external store that returns public URLs.
Adapters are swapped without touching domain or API code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class StoredImage:
    """Where an uploaded image can be fetched from."""

    url: str
    thumbnail: str
    file_id: str


class ImageStore(ABC):
    """Abstract image store interface."""

    @abstractmethod
    def upload(self, content: bytes, filename: str, content_type: str | None = None) -> StoredImage:
        """Store an image and return its public location."""
        ...

    @abstractmethod
    def delete(self, file_id: str) -> None:
        """Remove a stored image. Unknown ids are ignored."""
        ...
