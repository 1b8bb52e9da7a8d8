"""
Auth module: JWT creation/validation and the FastAPI dependencies that guard
the order routes.

Tokens carry only {username, role} and never expire. Validity is purely the
HS256 signature; there is no server-side revocation.
"""

from dataclasses import dataclass
from typing import Union
from jose import jwt, JWTError
from fastapi import Depends, Request
from order_tracker.config import get_settings
from order_tracker.exceptions import AuthenticationFailure, AuthorizationFailure

ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenClaims:
    """Identity attached to each authenticated request."""
    username: str
    role: str


def create_token(username: str, role: str) -> str:
    """Create a signed JWT with the username and role claims."""
    settings = get_settings()
    payload = {"username": username, "role": role}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=ALGORITHM)


def validate_token(token: str) -> Union[TokenClaims, AuthenticationFailure]:
    """Verify a token. Returns the claims, or the failure describing why not."""
    if not token:
        return AuthenticationFailure("Token required")
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[ALGORITHM])
    except JWTError:
        return AuthenticationFailure("Invalid token")
    username = payload.get("username")
    role = payload.get("role")
    if not isinstance(username, str) or not isinstance(role, str):
        return AuthenticationFailure("Invalid token")
    return TokenClaims(username=username, role=role)


def _token_from_header(header: str) -> str:
    header = header.strip()
    if header[:7].lower() == "bearer ":
        return header[7:].strip()
    return header


async def get_current_user(request: Request) -> TokenClaims:
    """
    FastAPI dependency. Reads the token from the Authorization header, either
    raw or with a "Bearer " prefix, and raises AuthenticationFailure if it
    does not verify.
    """
    token = _token_from_header(request.headers.get("Authorization", ""))
    result = validate_token(token)
    if isinstance(result, AuthenticationFailure):
        raise result
    return result


def require_role(role_setting: str):
    """
    Dependency factory: the caller's role must equal the configured role named
    by `role_setting` (e.g. "packer_role").
    """

    async def _check(current_user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
        required = getattr(get_settings(), role_setting)
        if current_user.role != required:
            raise AuthorizationFailure()
        return current_user

    return _check
