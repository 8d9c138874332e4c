"""Signup and profile lookup."""

import logging
from decimal import Decimal
from typing import Callable, Protocol

from app.errors import Conflict, InvalidLocation, NotFound
from app.models.user import User
from app.schemas.user import UserCreate, UserProfileResponse
from app.services.providers.geocoding import GeocodingFailure
from app.services.utils.location import is_within_allowed_region

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    def resolve_city(self, latitude: float, longitude: float) -> str: ...


class TokenIssuer(Protocol):
    def issue(self, subject: str, email: str) -> str: ...


class Store(Protocol):
    def find_by_email(self, email: str) -> User | None: ...

    def find_by_id(self, user_id: str) -> User | None: ...

    def insert(self, user: User) -> User: ...


class UserService:
    """
    Orchestrates user signup and profile retrieval.

    All collaborators are passed in, so tests can swap any of them.
    """

    def __init__(
        self,
        store: Store,
        geocoder: Geocoder,
        tokens: TokenIssuer,
        region_check: Callable[[float, float], bool] = is_within_allowed_region,
    ) -> None:
        self.store = store
        self.geocoder = geocoder
        self.tokens = tokens
        self.region_check = region_check

    def add_new_user(self, data: UserCreate) -> str:
        """
        Register a user and return an access token for them.

        Checks run in order: email uniqueness, region, geocoding. Nothing is
        written until all of them pass.

        Raises:
            Conflict: email already registered
            InvalidLocation: outside the allowed region, or city lookup failed
        """
        if self.store.find_by_email(data.email) is not None:
            raise Conflict("User already exists")

        if not self.region_check(data.latitude, data.longitude):
            raise InvalidLocation("You must be located in Egypt to sign up")

        try:
            city = self.geocoder.resolve_city(data.latitude, data.longitude)
        except GeocodingFailure as e:
            raise InvalidLocation("Failed to determine city from coordinates") from e

        user = User(
            name=data.name,
            email=data.email,
            latitude=Decimal(str(data.latitude)),
            longitude=Decimal(str(data.longitude)),
            city=city,
        )
        user = self.store.insert(user)
        logger.info("Registered user %s in %s", user.id, city)

        return self.tokens.issue(user.id, user.email)

    def get_user_profile(self, user_id: str) -> UserProfileResponse:
        """
        Raises:
            NotFound: no user with this id
        """
        user = self.store.find_by_id(user_id)
        if user is None:
            raise NotFound("User doesn't exist")

        return UserProfileResponse(name=user.name, email=user.email, city=user.city)
