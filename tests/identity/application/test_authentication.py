from datetime import UTC, datetime

import pytest
from identity.user.authentication import authenticate, issue_token_for, revoke
from identity.user.passwords import hash_password
from identity.user.user import User
from protean import current_domain
from shared.auth.revocation import get_revocation_list
from shared.auth.tokens import decode_token
from shared.exceptions import AuthenticationError


@pytest.fixture()
def user():
    user = User.register(
        username="janedoe",
        email="jane@example.com",
        password_hash=hash_password("s3cret", iterations=1000),
        first_name="Jane",
        last_name="Doe",
    )
    current_domain.repository_for(User).add(user)
    return user


class TestAuthenticate:
    def test_by_username(self, user):
        assert authenticate("s3cret", username="janedoe").id == user.id

    def test_by_email(self, user):
        assert authenticate("s3cret", email="Jane@Example.com").id == user.id

    def test_wrong_password(self, user):
        with pytest.raises(AuthenticationError) as exc:
            authenticate("wrong", username="janedoe")
        assert exc.value.message == "Invalid credentials"

    def test_unknown_user(self, user):
        with pytest.raises(AuthenticationError) as exc:
            authenticate("s3cret", username="nobody")
        assert exc.value.message == "Invalid credentials"

    def test_no_login_given(self, user):
        with pytest.raises(AuthenticationError):
            authenticate("s3cret")


class TestTokens:
    def test_token_describes_the_user(self, user):
        principal = decode_token(issue_token_for(user).token)

        assert principal.id == str(user.id)
        assert principal.username == "janedoe"
        assert principal.role == "user"
        assert principal.expires_at > datetime.now(UTC)

    def test_revoke_blocks_the_token(self, user):
        principal = decode_token(issue_token_for(user).token)
        revoke(principal)

        assert get_revocation_list().is_revoked(principal.token_id) is True
