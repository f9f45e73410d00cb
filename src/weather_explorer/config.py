"""
Application settings.

Values come from environment variables (or a ``.env`` file in the working
directory), e.g. ``OPENWEATHER_API_KEY=... weather-explorer weather Tokyo``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the dashboard."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "weather-explorer"
    app_env: str = "development"
    debug: bool = False

    # OpenWeather (https://openweathermap.org/api)
    openweather_api_key: str = ""
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    request_timeout: float = Field(default=10.0, gt=0)

    default_city: str = "Seattle"
    default_unit: str = Field(default="C", pattern="^[CF]$")
    favorite_cities: list[str] = Field(
        default_factory=lambda: ["Seattle", "Tokyo", "London", "Sydney"]
    )
    forecast_slots: int = Field(default=5, ge=1)

    data_dir: Path = Path("data")
    images_dir: Path = Path("images")
    # Probe a deployed site's images/ over HTTP instead of images_dir
    images_base_url: str = ""
    api_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (loaded once)."""
    return Settings()
