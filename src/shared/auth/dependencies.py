"""FastAPI dependencies that authenticate the caller and gate routes by role.

Usage::

    @router.get("/me")
    async def me(principal: Principal = Depends(authorize(Role.USER, Role.ADMIN))):
        ...
"""

from fastapi import Request

from shared.auth.revocation import get_revocation_list
from shared.auth.roles import Role
from shared.auth.tokens import Principal, decode_token
from shared.config import get_settings
from shared.exceptions import AuthenticationError, PermissionDenied


def extract_token(request: Request) -> str | None:
    """Read the access token from the ``token`` cookie or a Bearer header."""
    token = request.cookies.get(get_settings().cookie_name)
    if token:
        return token

    header = request.headers.get("authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


def authenticate(request: Request) -> Principal:
    token = extract_token(request)
    if not token:
        raise AuthenticationError(reason="No token provided")

    principal = decode_token(token)
    if get_revocation_list().is_revoked(principal.token_id):
        raise AuthenticationError(reason="Token revoked")
    return principal


def authorize(*roles: Role):
    """Build a dependency admitting only callers whose role is in ``roles``.

    With no roles, any authenticated caller is admitted.
    """
    allowed = {role.value for role in roles}

    def dependency(request: Request) -> Principal:
        principal = authenticate(request)
        if allowed and principal.role not in allowed:
            raise PermissionDenied("Forbidden: insufficient permissions")
        return principal

    return dependency
