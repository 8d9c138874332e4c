"""OpenCage reverse geocoding.

Resolves coordinates to a city name for new signups:
https://opencagedata.com/api#reverse
"""

import logging
from typing import Any

import httpx

from app.config import get_settings

logger = logging.getLogger(__name__)

UNKNOWN_CITY = "unknown city"


class GeocodingFailure(Exception):
    """The provider could not be reached or returned an unusable response."""


class OpenCageGeocoder:
    """Blocking client for the OpenCage reverse geocoding endpoint."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://api.opencagedata.com/geocode/v1/json",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client = client

    def resolve_city(self, latitude: float, longitude: float) -> str:
        """
        Look up the city at the given coordinates.

        Returns:
            The first result's city, or "unknown city" when the provider has
            no result or the first result carries no city.

        Raises:
            GeocodingFailure: on transport errors, non-2xx responses or an
                unparseable body
        """
        if not self._api_key:
            raise GeocodingFailure("Geocoding API key not configured")

        params = {
            "q": f"{latitude},{longitude}",
            "key": self._api_key,
            "limit": 1,
            "no_annotations": 1,
        }
        try:
            data = self._get(params)
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Geocoding request failed with status %s", e.response.status_code
            )
            raise GeocodingFailure(f"Geocoding provider returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("Geocoding request failed: %s", e)
            raise GeocodingFailure("Geocoding provider unreachable") from e
        except ValueError as e:
            logger.warning("Geocoding response is not valid JSON: %s", e)
            raise GeocodingFailure("Unparseable geocoding response") from e

        return _city_from_payload(data)

    def _get(self, params: dict[str, Any]) -> Any:
        if self._client is not None:
            response = self._client.get(self._base_url, params=params, timeout=self._timeout)
            response.raise_for_status()
            return response.json()

        with httpx.Client() as client:
            response = client.get(self._base_url, params=params, timeout=self._timeout)
            response.raise_for_status()
            return response.json()


def _city_from_payload(data: Any) -> str:
    if not isinstance(data, dict) or not isinstance(data.get("results"), list):
        raise GeocodingFailure("Unexpected geocoding response shape")

    results = data["results"]
    if not results:
        return UNKNOWN_CITY

    first = results[0]
    components = first.get("components") if isinstance(first, dict) else None
    if not isinstance(components, dict):
        raise GeocodingFailure("Unexpected geocoding response shape")

    return components.get("city") or UNKNOWN_CITY


def get_geocoder() -> OpenCageGeocoder:
    """FastAPI dependency building the geocoder from settings."""
    settings = get_settings()
    return OpenCageGeocoder(
        api_key=settings.geocoding_api_key,
        base_url=settings.geocoding_base_url,
        timeout=settings.geocoding_timeout_seconds,
    )
