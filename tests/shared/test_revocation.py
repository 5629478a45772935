from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

from shared.auth.revocation import (
    MemoryRevocationList,
    RedisRevocationList,
    get_revocation_list,
    reset_revocation_list,
    set_revocation_list,
)


class TestMemoryRevocationList:
    def test_revoked_token_is_reported(self):
        revocations = MemoryRevocationList()
        revocations.revoke("jti-1", datetime.now(UTC) + timedelta(hours=1))

        assert revocations.is_revoked("jti-1") is True
        assert revocations.is_revoked("jti-2") is False

    def test_entries_lapse_when_the_token_expires(self):
        revocations = MemoryRevocationList()
        revocations.revoke("jti-old", datetime.now(UTC) - timedelta(seconds=1))

        assert revocations.is_revoked("jti-old") is False
        assert len(revocations) == 0


class TestRedisRevocationList:
    def test_revoke_sets_key_with_remaining_lifetime(self):
        client = MagicMock()
        revocations = RedisRevocationList(client)

        revocations.revoke("jti-1", datetime.now(UTC) + timedelta(minutes=10))

        key = client.set.call_args.args[0]
        assert key == "blacklist:jti-1"
        assert 0 < client.set.call_args.kwargs["ex"] <= 600

    def test_is_revoked_checks_key(self):
        client = MagicMock()
        client.exists.return_value = 1
        assert RedisRevocationList(client).is_revoked("jti-1") is True

        client.exists.return_value = 0
        assert RedisRevocationList(client).is_revoked("jti-1") is False


class TestFactory:
    def test_defaults_to_memory_list(self):
        assert isinstance(get_revocation_list(), MemoryRevocationList)

    def test_override_and_reset(self):
        custom = MemoryRevocationList()
        set_revocation_list(custom)
        assert get_revocation_list() is custom

        reset_revocation_list()
        assert get_revocation_list() is not custom
