"""Services for signup, persistence and external integrations.

Services are organized into:
- core/: Business logic and persistence (users, user_store)
- providers/: External API wrappers (geocoding)
- utils/: Pure helpers (location)
"""

from app.services.core.user_store import UserStore
from app.services.core.users import UserService
from app.services.providers.geocoding import GeocodingFailure, OpenCageGeocoder
from app.services.utils.location import is_within_allowed_region

__all__ = [
    "UserService",
    "UserStore",
    "OpenCageGeocoder",
    "GeocodingFailure",
    "is_within_allowed_region",
]
