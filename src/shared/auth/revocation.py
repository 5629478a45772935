"""Revocation list for logged-out tokens.

Entries are keyed by the token's ``jti`` and expire together with the token,
so the list never grows beyond the set of still-valid revoked tokens.

Provides get_revocation_list() / set_revocation_list() to swap implementations:
- MemoryRevocationList for development and testing
- RedisRevocationList when ``REDIS_URL`` is configured
"""

import threading
from abc import ABC, abstractmethod
from datetime import UTC, datetime

import redis

from shared.config import get_settings
from shared.logging import get_logger

logger = get_logger(__name__)


class RevocationList(ABC):
    """Abstract revocation list interface."""

    @abstractmethod
    def revoke(self, token_id: str, expires_at: datetime) -> None:
        """Record a token as revoked until it would have expired anyway."""
        ...

    @abstractmethod
    def is_revoked(self, token_id: str) -> bool:
        """Whether the token has been revoked and has not yet expired."""
        ...


class MemoryRevocationList(RevocationList):
    """Process-local revocation list."""

    def __init__(self):
        self._entries: dict[str, datetime] = {}
        self._lock = threading.Lock()

    def revoke(self, token_id: str, expires_at: datetime) -> None:
        with self._lock:
            self._purge(datetime.now(UTC))
            self._entries[token_id] = expires_at

    def is_revoked(self, token_id: str) -> bool:
        with self._lock:
            expires_at = self._entries.get(token_id)
            if expires_at is None:
                return False
            if expires_at <= datetime.now(UTC):
                del self._entries[token_id]
                return False
            return True

    def _purge(self, now: datetime) -> None:
        for token_id in [t for t, exp in self._entries.items() if exp <= now]:
            del self._entries[token_id]

    def __len__(self) -> int:
        return len(self._entries)


class RedisRevocationList(RevocationList):
    """Revocation list shared by every service through Redis key expiry."""

    key_prefix = "blacklist:"

    def __init__(self, client: redis.Redis):
        self.client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisRevocationList":
        return cls(redis.Redis.from_url(url))

    def revoke(self, token_id: str, expires_at: datetime) -> None:
        ttl = int((expires_at - datetime.now(UTC)).total_seconds())
        if ttl <= 0:
            return
        self.client.set(f"{self.key_prefix}{token_id}", "1", ex=ttl)

    def is_revoked(self, token_id: str) -> bool:
        return bool(self.client.exists(f"{self.key_prefix}{token_id}"))


_current_list: RevocationList | None = None


def get_revocation_list() -> RevocationList:
    """Return the active revocation list, building it from settings on first use."""
    global _current_list
    if _current_list is None:
        redis_url = get_settings().redis_url
        if redis_url:
            logger.info("Using Redis revocation list", redis_url=redis_url)
            _current_list = RedisRevocationList.from_url(redis_url)
        else:
            _current_list = MemoryRevocationList()
    return _current_list


def set_revocation_list(revocation_list: RevocationList) -> None:
    """Override the active revocation list (useful for tests)."""
    global _current_list
    _current_list = revocation_list


def reset_revocation_list() -> None:
    """Reset to the default revocation list."""
    global _current_list
    _current_list = None
