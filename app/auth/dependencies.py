# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Resolves the bearer token on each request to an AuthUser.
#
# Two strategies:
# - SUPABASE_JWT_SECRET set: verify the HS256 JWT locally with python-jose
# - otherwise: ask Supabase Auth who the token belongs to
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError, ExpiredSignatureError

from app.config import settings
from app.auth.models import AuthUser
from app.exceptions import UnauthorizedError
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

# Missing credentials are reported by get_current_user, not by HTTPBearer
security = HTTPBearer(auto_error=False)

JWT_AUDIENCE = "authenticated"


def _parse_user_id(user_id: str | None) -> UUID:
    if not user_id:
        logger.warning("Token resolved without a user ID")
        raise UnauthorizedError("Invalid token: missing user ID")
    try:
        return UUID(str(user_id))
    except ValueError:
        logger.warning(f"Invalid UUID in token: {user_id}")
        raise UnauthorizedError("Invalid token: malformed user ID")


def verify_jwt(token: str) -> AuthUser:
    """
    Verify a Supabase JWT locally against the project's JWT secret.

    Raises:
        UnauthorizedError: If the signature, expiry or audience is wrong
    """
    try:
        payload = jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=["HS256"],
            audience=JWT_AUDIENCE,
        )
    except ExpiredSignatureError:
        logger.warning("JWT token has expired")
        raise UnauthorizedError("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise UnauthorizedError("Invalid token")

    return AuthUser(id=_parse_user_id(payload.get("sub")), email=payload.get("email"))


def verify_with_supabase(token: str) -> AuthUser:
    """
    Resolve a token through Supabase Auth (`auth.get_user`).

    Raises:
        UnauthorizedError: If Supabase rejects the token
    """
    client = SupabaseClient.get_client()

    try:
        response = client.auth.get_user(token)
    except Exception as e:
        logger.warning(f"Supabase rejected token: {e}")
        raise UnauthorizedError("Invalid token")

    user = getattr(response, "user", None)
    if user is None:
        logger.warning("Supabase returned no user for token")
        raise UnauthorizedError("Invalid token")

    return AuthUser(id=_parse_user_id(user.id), email=getattr(user, "email", None))


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> AuthUser:
    """
    Extract and validate the user behind the Authorization header.

    Returns:
        AuthUser: The authenticated user

    Raises:
        UnauthorizedError: 401 if the header is missing, not a Bearer
            token, or the token is rejected
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Missing Authorization header")

    token = credentials.credentials

    if settings.SUPABASE_JWT_SECRET:
        user = verify_jwt(token)
    else:
        user = verify_with_supabase(token)

    logger.debug(f"Authenticated user: {user.id}")
    return user
