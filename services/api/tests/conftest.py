from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.auth.jwt import TokenService
from app.database.base import Base
from app.models import User
from app.services.providers.geocoding import GeocodingFailure

# Ensure all models are imported so they're registered with Base.metadata
__all__ = ["User"]

# Test secret - only used in tests
TEST_SECRET = "test-secret-key-for-testing-only"


class FakeGeocoder:
    """Stands in for OpenCage; records every lookup."""

    def __init__(self, city: str = "Cairo", fail: bool = False):
        self.city = city
        self.fail = fail
        self.calls: list[tuple[float, float]] = []

    def resolve_city(self, latitude: float, longitude: float) -> str:
        self.calls.append((latitude, longitude))
        if self.fail:
            raise GeocodingFailure("provider down")
        return self.city


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing.

    Uses StaticPool to ensure all connections share the same in-memory database.
    Without this, each connection would get a fresh database without tables.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture
def session_factory(engine):
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
def session(session_factory) -> Session:
    """Create a test database session."""
    session = session_factory()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret=TEST_SECRET, expires_in=timedelta(hours=1))


@pytest.fixture
def geocoder() -> FakeGeocoder:
    return FakeGeocoder()


@pytest.fixture
def sample_user(session: Session) -> User:
    """Create a registered user in Cairo."""
    user = User(
        name="John Doe",
        email="john@example.com",
        latitude=30.0444,
        longitude=31.2357,
        city="Cairo",
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def client(session_factory, token_service: TokenService, geocoder: FakeGeocoder) -> TestClient:
    """
    Create a FastAPI test client with in-memory database.

    The geocoder is replaced by FakeGeocoder and tokens are signed with TEST_SECRET.
    """
    from app.auth import jwt as jwt_module
    from app.database import session as session_module
    from app.main import app
    from app.services.providers import geocoding as geocoding_module

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[session_module.get_db] = override_get_db
    app.dependency_overrides[jwt_module.get_token_service] = lambda: token_service
    app.dependency_overrides[geocoding_module.get_geocoder] = lambda: geocoder

    with TestClient(app) as client:
        yield client

    # Clear overrides after test
    app.dependency_overrides.clear()
