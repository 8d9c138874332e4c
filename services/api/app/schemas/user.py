"""User schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Signup request. Unknown fields and non-numeric coordinates are rejected."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    latitude: float = Field(..., ge=-90, le=90, strict=True)
    longitude: float = Field(..., ge=-180, le=180, strict=True)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class SignupResponse(BaseModel):
    """Schema for a successful signup."""

    success: bool = True
    message: str = "User registered successfully"
    token: str


class UserProfileResponse(BaseModel):
    """Public view of a user: never includes id, coordinates or timestamps."""

    name: str
    email: str
    city: str

    model_config = ConfigDict(from_attributes=True)
