"""In-memory image store for development and tests."""

from uuid import uuid4

from catalogue.images.port import ImageStore, StoredImage


class FakeImageStore(ImageStore):
    """Keeps uploaded bytes in memory and hands out predictable URLs."""

    base_url = "https://images.shopfront.local"

    def __init__(self):
        self.files: dict[str, dict] = {}

    def upload(self, content: bytes, filename: str, content_type: str | None = None) -> StoredImage:
        file_id = uuid4().hex
        self.files[file_id] = {
            "filename": filename,
            "content_type": content_type,
            "size": len(content),
            "content": content,
        }
        url = f"{self.base_url}/{file_id}/{filename}"
        return StoredImage(url=url, thumbnail=f"{url}?tr=w-200", file_id=file_id)

    def delete(self, file_id: str) -> None:
        self.files.pop(file_id, None)

    def reset(self):
        """Forget every stored file (useful between tests)."""
        self.files.clear()
