"""HTTP-facing error taxonomy.

Each error is an `HTTPException` so the global handler in `app.main` renders
it with the same body shape as any other HTTP error.
"""

from fastapi import HTTPException, status


class Conflict(HTTPException):
    """Resource already exists (duplicate email)."""

    def __init__(self, detail: str = "User already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class InvalidLocation(HTTPException):
    """Coordinates are outside the allowed region or cannot be resolved."""

    def __init__(self, detail: str = "You must be located in Egypt to sign up") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "User doesn't exist") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class AuthFailure(HTTPException):
    """Missing, malformed, tampered or expired bearer token.

    The reason is never exposed to the caller.
    """

    def __init__(self, detail: str = "Invalid or expired token") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )
