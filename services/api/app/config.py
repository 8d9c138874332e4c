import re
from datetime import timedelta
from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$", re.IGNORECASE)
_UNIT_SECONDS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: str | int) -> timedelta:
    """
    Parse a token lifetime such as ``3600``, ``"90s"``, ``"30m"``, ``"1h"`` or ``"7d"``.

    Raises:
        ValueError: if the value is not a positive duration
    """
    if isinstance(value, int):
        seconds = value
    else:
        match = _DURATION_RE.match(value)
        if not match:
            raise ValueError(f"Invalid duration: {value!r}")
        seconds = int(match.group(1)) * _UNIT_SECONDS[match.group(2).lower()]
    if seconds <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")
    return timedelta(seconds=seconds)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Database - can use either DATABASE_URL or separate params
    database_url: str | None = None

    # Separate DB params (for passwords with special characters)
    db_host: str | None = None
    db_port: int = 5432
    db_username: str = "postgres"
    db_password: str | None = None
    db_name: str = "postgres"

    # Create tables on startup instead of running migrations
    db_auto_create: bool = False

    # Auth
    jwt_secret_key: str | None = None
    jwt_expiration: str = "1h"
    jwt_algorithm: str = "HS256"

    # Reverse geocoding (OpenCage)
    geocoding_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("geocoding_api_key", "api_key"),
    )
    geocoding_base_url: str = "https://api.opencagedata.com/geocode/v1/json"
    geocoding_timeout_seconds: float = 10.0

    # CORS - production frontend URL
    frontend_url: str | None = None

    log_level: str = "INFO"

    @field_validator("jwt_expiration")
    @classmethod
    def check_jwt_expiration(cls, value: str) -> str:
        # Fails at startup instead of on the first request that needs a token
        parse_duration(value)
        return value

    @property
    def jwt_lifetime(self) -> timedelta:
        return parse_duration(self.jwt_expiration)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
