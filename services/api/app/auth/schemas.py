"""Auth schemas for user and token data."""

from pydantic import BaseModel


class CurrentUser(BaseModel):
    """Authenticated caller, taken from verified token claims."""

    id: str
    email: str | None = None


class TokenPayload(BaseModel):
    """Claims carried by an issued access token."""

    sub: str  # user_id
    email: str | None = None
    iat: int | None = None
    exp: int
