"""FastAPI dependencies."""

from .users import get_user_service, get_user_store

__all__ = ["get_user_service", "get_user_store"]
