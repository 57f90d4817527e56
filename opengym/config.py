"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    base_url: HttpUrl = Field(
        default="http://localhost:8999/",
        description="Root of the place REST API.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=120)


class DatabaseSettings(BaseModel):
    dsn: str = Field(
        default="sqlite+aiosqlite:///opengym.db",
        description="SQLAlchemy async DSN backing the search history.",
    )
    echo: bool = False


class HistorySettings(BaseModel):
    hint_limit: int | None = Field(
        default=None,
        ge=1,
        description="Most recent queries offered as hints; None offers all of them.",
    )

    @field_validator("hint_limit", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class Coordinate(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class MapSettings(BaseModel):
    # Krakow; the map falls back to this box while no places are displayed.
    default_southwest: Coordinate = Field(
        default_factory=lambda: Coordinate(latitude=49.97, longitude=19.79)
    )
    default_northeast: Coordinate = Field(
        default_factory=lambda: Coordinate(latitude=50.13, longitude=20.22)
    )


class OpenGymSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OPENGYM_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    api: ApiSettings = Field(default_factory=ApiSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    history: HistorySettings = Field(default_factory=HistorySettings)
    map: MapSettings = Field(default_factory=MapSettings)


@lru_cache
def get_settings() -> OpenGymSettings:
    """Return cached settings instance."""

    return OpenGymSettings()


__all__ = [
    "ApiSettings",
    "Coordinate",
    "DatabaseSettings",
    "HistorySettings",
    "MapSettings",
    "OpenGymSettings",
    "get_settings",
]
