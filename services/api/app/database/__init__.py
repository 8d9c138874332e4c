from .base import Base, created_at_column, utc_now
from .engine import build_engine, get_engine, resolve_database_url
from .session import SessionLocal, get_db

__all__ = [
    "Base",
    "created_at_column",
    "utc_now",
    "build_engine",
    "get_engine",
    "resolve_database_url",
    "SessionLocal",
    "get_db",
]
