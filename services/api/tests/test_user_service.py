"""Tests for signup and profile orchestration."""

from unittest.mock import MagicMock

import pytest

from app.errors import Conflict, InvalidLocation, NotFound
from app.models import User
from app.schemas.user import UserCreate, UserProfileResponse
from app.services.core.users import UserService
from app.services.providers.geocoding import GeocodingFailure

CAIRO = {"name": "John Doe", "email": "john@example.com", "latitude": 30.0444, "longitude": 31.2357}


@pytest.fixture
def store():
    store = MagicMock()
    store.find_by_email.return_value = None

    def insert(user):
        user.id = "1"
        return user

    store.insert.side_effect = insert
    return store


@pytest.fixture
def geocoder():
    geocoder = MagicMock()
    geocoder.resolve_city.return_value = "Cairo"
    return geocoder


@pytest.fixture
def tokens():
    tokens = MagicMock()
    tokens.issue.return_value = "newJwtToken"
    return tokens


@pytest.fixture
def service(store, geocoder, tokens) -> UserService:
    return UserService(store=store, geocoder=geocoder, tokens=tokens)


class TestAddNewUser:
    def test_creates_user_and_returns_token(self, service, store, geocoder, tokens):
        token = service.add_new_user(UserCreate(**CAIRO))

        assert token == "newJwtToken"
        geocoder.resolve_city.assert_called_once_with(30.0444, 31.2357)
        saved = store.insert.call_args.args[0]
        assert saved.name == "John Doe"
        assert saved.email == "john@example.com"
        assert saved.city == "Cairo"
        assert float(saved.latitude) == 30.0444
        assert float(saved.longitude) == 31.2357
        tokens.issue.assert_called_once_with("1", "john@example.com")

    def test_existing_email_conflicts(self, service, store, geocoder, tokens):
        store.find_by_email.return_value = User(email="john@example.com")

        with pytest.raises(Conflict) as exc:
            service.add_new_user(UserCreate(**CAIRO))

        assert exc.value.status_code == 409
        assert exc.value.detail == "User already exists"
        store.insert.assert_not_called()
        geocoder.resolve_city.assert_not_called()
        tokens.issue.assert_not_called()

    @pytest.mark.parametrize("latitude, longitude", [(0, 0), (80, 100)])
    def test_outside_region_short_circuits(self, service, store, geocoder, latitude, longitude):
        data = UserCreate(**{**CAIRO, "latitude": latitude, "longitude": longitude})

        with pytest.raises(InvalidLocation) as exc:
            service.add_new_user(data)

        assert exc.value.status_code == 400
        assert exc.value.detail == "You must be located in Egypt to sign up"
        geocoder.resolve_city.assert_not_called()
        store.insert.assert_not_called()

    def test_uniqueness_checked_before_location(self, service, store, geocoder):
        store.find_by_email.return_value = User(email="john@example.com")
        data = UserCreate(**{**CAIRO, "latitude": 0, "longitude": 0})

        with pytest.raises(Conflict):
            service.add_new_user(data)

    def test_geocoding_failure_is_invalid_location(self, service, store, geocoder):
        geocoder.resolve_city.side_effect = GeocodingFailure("timeout")

        with pytest.raises(InvalidLocation) as exc:
            service.add_new_user(UserCreate(**CAIRO))

        assert exc.value.status_code == 400
        assert exc.value.detail == "Failed to determine city from coordinates"
        store.insert.assert_not_called()

    def test_injected_region_check(self, store, geocoder, tokens):
        service = UserService(store, geocoder, tokens, region_check=lambda lat, lon: True)

        service.add_new_user(UserCreate(**{**CAIRO, "latitude": 0, "longitude": 0}))

        store.insert.assert_called_once()

    def test_store_conflict_propagates(self, service, store, tokens):
        store.insert.side_effect = Conflict()

        with pytest.raises(Conflict):
            service.add_new_user(UserCreate(**CAIRO))

        tokens.issue.assert_not_called()


class TestGetUserProfile:
    def test_returns_profile(self, service, store):
        store.find_by_id.return_value = User(
            id="1",
            name="John Doe",
            email="john@example.com",
            latitude=30.0444,
            longitude=31.2357,
            city="Cairo",
        )

        profile = service.get_user_profile("1")

        assert profile == UserProfileResponse(name="John Doe", email="john@example.com", city="Cairo")
        assert profile.model_dump() == {"name": "John Doe", "email": "john@example.com", "city": "Cairo"}
        store.find_by_id.assert_called_once_with("1")

    def test_unknown_id(self, service, store):
        store.find_by_id.return_value = None

        with pytest.raises(NotFound) as exc:
            service.get_user_profile("nonExistentId")

        assert exc.value.status_code == 404
        assert exc.value.detail == "User doesn't exist"
