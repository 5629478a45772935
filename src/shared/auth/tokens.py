"""Signed access tokens (HS256 JWT).

Every service shares ``JWT_SECRET`` and validates tokens locally. Each token
carries a unique ``jti`` so logout can revoke exactly that token.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt

from shared.config import get_settings
from shared.exceptions import AuthenticationError


@dataclass(frozen=True)
class IssuedToken:
    token: str
    token_id: str
    expires_at: datetime


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, as described by a verified token."""

    id: str
    username: str
    email: str
    role: str
    token_id: str
    expires_at: datetime
    token: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def issue_token(user_id: str, username: str, email: str, role: str, now: datetime | None = None) -> IssuedToken:
    settings = get_settings()
    issued_at = now or datetime.now(UTC)
    expires_at = issued_at + timedelta(seconds=settings.jwt_expires_in_seconds)
    token_id = uuid4().hex

    payload = {
        "id": str(user_id),
        "username": username,
        "email": email,
        "role": role,
        "jti": token_id,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return IssuedToken(token=token, token_id=token_id, expires_at=expires_at)


def decode_token(token: str) -> Principal:
    """Verify signature and expiry, returning the caller.

    Raises:
        AuthenticationError: for any expired, tampered or incomplete token.
    """
    settings = get_settings()
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "jti"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthenticationError(reason="Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthenticationError(reason="Invalid token") from exc

    if not claims.get("id") or not claims.get("role"):
        raise AuthenticationError(reason="Invalid token payload")

    return Principal(
        id=str(claims["id"]),
        username=claims.get("username", ""),
        email=claims.get("email", ""),
        role=claims["role"],
        token_id=claims["jti"],
        expires_at=datetime.fromtimestamp(claims["exp"], tz=UTC),
        token=token,
    )
