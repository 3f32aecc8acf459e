"""
Authentication module for Supabase access tokens.
Provides FastAPI dependencies for securing endpoints.

Clients send the access token they received from Supabase Auth as
`Authorization: Bearer <token>`. Tokens are HS256 JWTs signed with the
project's JWT secret and are validated locally.
"""
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException

from application.exceptions import AuthError
from backend.settings import Settings, get_settings
from infrastructure.auth import decode_access_token

logger = logging.getLogger(__name__)


async def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Authenticate via Supabase access token.
    Returns user_id string.

    Usage:
        @app.get("/protected")
        async def protected_route(user_id: str = Depends(get_current_user)):
            return {"user_id": user_id}
    """
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authentication. Provide Authorization header.",
        )
    return validate_bearer(authorization, settings.supabase_jwt_secret)


def validate_bearer(authorization: str, jwt_secret: Optional[str]) -> str:
    """
    Validate a bearer Authorization header and return user_id.
    """
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1]
    if not jwt_secret:
        raise HTTPException(
            status_code=500,
            detail="JWT validation not configured (missing SUPABASE_JWT_SECRET)",
        )

    try:
        user_id = decode_access_token(token, jwt_secret)
    except AuthError as e:
        raise HTTPException(status_code=401, detail=e.message)
    logger.debug(f"Access token validated for user: {user_id}")
    return user_id
