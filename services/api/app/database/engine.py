from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import URL, make_url

from app.config import Settings, get_settings

DEFAULT_SQLITE_URL = "sqlite:///./local.db"


def resolve_database_url(settings: Settings) -> URL:
    """
    Pick the database the users table lives in.

    Shared by the app engine and alembic so both always talk to the same
    database. A SQLite DATABASE_URL wins, then the separate DB_* params,
    then any other DATABASE_URL, then a local SQLite file.
    """
    if settings.database_url and settings.database_url.startswith("sqlite"):
        return make_url(settings.database_url)

    # PostgreSQL - use separate params to handle special chars in password
    if settings.db_host:
        return URL.create(
            drivername="postgresql",
            username=settings.db_username,
            password=settings.db_password,  # SQLAlchemy handles encoding
            host=settings.db_host,
            port=settings.db_port,
            database=settings.db_name,
        )

    return make_url(settings.database_url or DEFAULT_SQLITE_URL)


def build_engine(url: URL, **kwargs) -> Engine:
    """Create an engine with the pool settings suited to its backend."""
    if url.get_backend_name() == "sqlite":
        return create_engine(url, connect_args={"check_same_thread": False}, echo=False, **kwargs)
    if "poolclass" not in kwargs:
        kwargs.update(pool_pre_ping=True, pool_size=5, max_overflow=10)
    return create_engine(url, echo=False, **kwargs)


@lru_cache
def get_engine() -> Engine:
    """Create and cache the database engine."""
    return build_engine(resolve_database_url(get_settings()))
