"""User service wiring for FastAPI routes."""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.auth.jwt import TokenService, get_token_service
from app.database.session import get_db
from app.services.core.user_store import UserStore
from app.services.core.users import UserService
from app.services.providers.geocoding import OpenCageGeocoder, get_geocoder


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_user_service(
    store: UserStore = Depends(get_user_store),
    geocoder: OpenCageGeocoder = Depends(get_geocoder),
    tokens: TokenService = Depends(get_token_service),
) -> UserService:
    """Build a per-request UserService from its collaborators."""
    return UserService(store=store, geocoder=geocoder, tokens=tokens)
