"""External API provider wrappers."""

from app.services.providers.geocoding import (
    UNKNOWN_CITY,
    GeocodingFailure,
    OpenCageGeocoder,
    get_geocoder,
)

__all__ = ["UNKNOWN_CITY", "GeocodingFailure", "OpenCageGeocoder", "get_geocoder"]
