"""
Authentication dependency.

Every protected route depends on ``get_current_identity``. The identity
comes from the token alone; there is no database lookup, so rotating
SECRET_KEY invalidates every outstanding token at once.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from core.exceptions import UnauthorizedError, ForbiddenError
from core.security import decode_access_token

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, passed explicitly to route handlers."""
    user_id: int
    username: str


def identity_from_token(token: str) -> Identity:
    """
    Turn a bearer token into an Identity.

    Raises ForbiddenError when the signature, expiry or claims are bad.
    """
    payload = decode_access_token(token)
    if not payload:
        raise ForbiddenError()

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise ForbiddenError()

    username = payload.get("username")
    if not username:
        raise ForbiddenError()

    return Identity(user_id=user_id, username=username)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Identity:
    """FastAPI dependency: 401 without a bearer token, 403 for a bad one."""
    if not credentials or not credentials.credentials:
        raise UnauthorizedError("No token")

    return identity_from_token(credentials.credentials)
