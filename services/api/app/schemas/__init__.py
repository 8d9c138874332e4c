"""Pydantic schemas for API request/response validation."""

from app.schemas.user import SignupResponse, UserCreate, UserProfileResponse

__all__ = [
    "UserCreate",
    "SignupResponse",
    "UserProfileResponse",
]
