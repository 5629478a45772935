"""Credential checks and token lifecycle for signed-in users."""

from protean.utils.globals import current_domain

from identity.user.passwords import verify_password
from identity.user.user import User
from shared.auth.revocation import get_revocation_list
from shared.auth.tokens import IssuedToken, Principal, issue_token
from shared.exceptions import AuthenticationError
from shared.logging import get_logger

logger = get_logger(__name__)


def authenticate(password: str, username: str | None = None, email: str | None = None) -> User:
    """Return the user whose username or email and password match.

    Raises:
        AuthenticationError: "Invalid credentials" for an unknown login or a wrong password.
    """
    if not username and not email:
        raise AuthenticationError("Invalid credentials", reason="No username or email given")

    user = current_domain.repository_for(User).find_by_login(username=username, email=email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login rejected", username=username, email=email)
        raise AuthenticationError("Invalid credentials")
    return user


def issue_token_for(user: User) -> IssuedToken:
    return issue_token(user_id=str(user.id), username=user.username, email=user.email, role=user.role)


def revoke(principal: Principal) -> None:
    """Revoke the caller's token until it would have expired anyway."""
    get_revocation_list().revoke(principal.token_id, principal.expires_at)
    logger.info("Token revoked", user_id=principal.id, token_id=principal.token_id)
