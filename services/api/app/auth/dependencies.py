"""FastAPI dependencies for authentication."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.jwt import TokenService, get_token_service
from app.auth.schemas import CurrentUser
from app.errors import AuthFailure

# HTTPBearer with auto_error=False so we can handle missing tokens ourselves
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> CurrentUser:
    """
    Guard for protected routes: verify the bearer token and return its subject.

    Usage:
        @router.get("/{user_id}", dependencies=[Depends(get_current_user)])
        def get_user_profile(user_id: str):
            ...
    """
    if not credentials:
        raise AuthFailure("Not authenticated")

    token_payload = tokens.verify(credentials.credentials)
    return CurrentUser(id=token_payload.sub, email=token_payload.email)
