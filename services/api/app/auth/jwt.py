"""Signed access tokens (HS256 JWT)."""

import logging
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import HTTPException, status
from pydantic import ValidationError

from app.auth.schemas import TokenPayload
from app.config import get_settings
from app.errors import AuthFailure

logger = logging.getLogger(__name__)


class TokenService:
    """Issues and verifies stateless access tokens carrying `sub` and `email`."""

    def __init__(
        self,
        secret: str,
        expires_in: timedelta = timedelta(hours=1),
        algorithm: str = "HS256",
    ) -> None:
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._expires_in = expires_in
        self._algorithm = algorithm

    @property
    def expires_in(self) -> timedelta:
        return self._expires_in

    def issue(self, subject: str, email: str, now: datetime | None = None) -> str:
        """Sign a token for `subject` that expires after the configured lifetime."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(subject),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self._expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenPayload:
        """
        Verify signature and expiry and return the token claims.

        Raises:
            AuthFailure: on any failure (bad signature, malformed, expired, missing claims)
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
            return TokenPayload(
                sub=payload["sub"],
                email=payload.get("email"),
                iat=payload.get("iat"),
                exp=payload["exp"],
            )
        except (jwt.exceptions.PyJWTError, ValidationError) as e:
            logger.info("Rejected access token: %s", e)
            raise AuthFailure() from e


def get_token_service() -> TokenService:
    """FastAPI dependency building the token service from settings."""
    settings = get_settings()
    if not settings.jwt_secret_key:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="JWT secret not configured",
        )
    return TokenService(
        secret=settings.jwt_secret_key,
        expires_in=settings.jwt_lifetime,
        algorithm=settings.jwt_algorithm,
    )
