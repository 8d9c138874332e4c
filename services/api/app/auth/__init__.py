"""Auth module for token issuance, validation and user dependencies."""

from app.auth.dependencies import get_current_user
from app.auth.jwt import TokenService, get_token_service
from app.auth.schemas import CurrentUser, TokenPayload

__all__ = [
    "CurrentUser",
    "TokenPayload",
    "TokenService",
    "get_token_service",
    "get_current_user",
]
