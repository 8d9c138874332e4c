"""Internal utilities."""

from app.services.utils.location import is_within_allowed_region

__all__ = ["is_within_allowed_region"]
