"""Core business logic."""

from app.services.core.user_store import UserStore
from app.services.core.users import UserService

__all__ = ["UserService", "UserStore"]
