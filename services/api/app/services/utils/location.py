"""Signup region check."""

# Bounding box approximating Egypt (inclusive)
MIN_LATITUDE = 22.0
MAX_LATITUDE = 31.5
MIN_LONGITUDE = 25.0
MAX_LONGITUDE = 35.0


def is_within_allowed_region(latitude: float, longitude: float) -> bool:
    """
    Check whether a point falls inside the allowed signup region.

    A rectangle is only an approximation of the border, so points close to it
    can be misclassified either way.
    """
    return (
        MIN_LATITUDE <= latitude <= MAX_LATITUDE
        and MIN_LONGITUDE <= longitude <= MAX_LONGITUDE
    )
