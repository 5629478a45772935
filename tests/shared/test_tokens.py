from datetime import UTC, datetime, timedelta

import jwt
import pytest
from shared.auth.tokens import decode_token, issue_token
from shared.config import get_settings
from shared.exceptions import AuthenticationError


class TestIssueToken:
    def test_token_round_trips_to_principal(self):
        issued = issue_token(user_id="u-1", username="jane", email="jane@example.com", role="seller")
        principal = decode_token(issued.token)

        assert principal.id == "u-1"
        assert principal.username == "jane"
        assert principal.email == "jane@example.com"
        assert principal.role == "seller"
        assert principal.token_id == issued.token_id
        assert principal.token == issued.token

    def test_every_token_gets_its_own_id(self):
        first = issue_token("u-1", "jane", "jane@example.com", "user")
        second = issue_token("u-1", "jane", "jane@example.com", "user")
        assert first.token_id != second.token_id

    def test_expiry_follows_configured_lifetime(self):
        now = datetime.now(UTC).replace(microsecond=0)
        issued = issue_token("u-1", "jane", "jane@example.com", "user", now=now)
        assert issued.expires_at == now + timedelta(seconds=get_settings().jwt_expires_in_seconds)

    def test_admin_principal(self):
        principal = decode_token(issue_token("u-9", "root", "root@example.com", "admin").token)
        assert principal.is_admin is True


class TestDecodeToken:
    def test_expired_token_is_rejected(self):
        issued = issue_token("u-1", "jane", "jane@example.com", "user", now=datetime.now(UTC) - timedelta(days=2))
        with pytest.raises(AuthenticationError) as exc:
            decode_token(issued.token)
        assert exc.value.reason == "Token expired"
        assert exc.value.message == "Unauthorized"

    def test_tampered_token_is_rejected(self):
        issued = issue_token("u-1", "jane", "jane@example.com", "user")
        forged = jwt.encode(
            jwt.decode(issued.token, options={"verify_signature": False}),
            "not-the-secret",
            algorithm="HS256",
        )
        with pytest.raises(AuthenticationError) as exc:
            decode_token(forged)
        assert exc.value.reason == "Invalid token"

    def test_garbage_is_rejected(self):
        with pytest.raises(AuthenticationError):
            decode_token("not-a-jwt")

    def test_token_without_role_is_rejected(self):
        settings = get_settings()
        token = jwt.encode(
            {"id": "u-1", "jti": "abc", "exp": int((datetime.now(UTC) + timedelta(hours=1)).timestamp())},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        with pytest.raises(AuthenticationError) as exc:
            decode_token(token)
        assert exc.value.reason == "Invalid token payload"
