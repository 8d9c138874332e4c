"""API routers."""

from app.routers import health, users

__all__ = [
    "health",
    "users",
]
