"""
Authentication module.
Validates bearer tokens and exposes the caller's identity to route handlers.
"""
import logging
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from .exceptions import AuthError
from .jwt_handler import TokenService, get_token_service

logger = logging.getLogger(__name__)

# Security scheme; missing tokens are reported by get_current_user
security = HTTPBearer(
    scheme_name="Bearer Token",
    description="Token returned by POST /login",
    auto_error=False,
)


class CurrentUser:
    """Represents the current authenticated user."""

    def __init__(self, user_id: str):
        self.user_id = user_id

    def __str__(self):
        return f"User(id={self.user_id})"

    def __repr__(self):
        return self.__str__()


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> CurrentUser:
    """
    Dependency to get current authenticated user.

    Args:
        request: Incoming request; the user is attached to ``request.state``
        credentials: HTTP Bearer credentials from request
        token_service: Application token service

    Returns:
        CurrentUser: Current authenticated user

    Raises:
        AuthError: If the token is missing or invalid
    """
    if not credentials:
        logger.warning(f"Token missing for {request.method} {request.url.path}")
        raise AuthError("Token missing")

    user_id = token_service.verify(credentials.credentials)

    current_user = CurrentUser(user_id=user_id)
    request.state.current_user = current_user
    logger.debug(f"Authenticated user: {current_user}")
    return current_user
