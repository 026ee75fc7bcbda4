"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from recipe_scaler.domain.ingredients import DEFAULT_UNITS

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    units: str = ",".join(DEFAULT_UNITS)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_units(raw: str | None) -> tuple[str, ...]:
    """Parse the configured measurement units, keeping their order."""
    if raw is None:
        return DEFAULT_UNITS
    units: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if not value or value in units:
            continue
        units.append(value)
    return tuple(units) or DEFAULT_UNITS
