"""
Domain models for weather explorer.

Pydantic models for data from the weather provider and internal processing.
These define the canonical schema - normalize.py maps API responses to these.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# Core
# =============================================================================


class Unit(StrEnum):
    """Display unit preference. Stored values are always metric."""

    CELSIUS = "C"
    FAHRENHEIT = "F"


class Result(BaseModel):
    """Generic result wrapper for operations."""

    success: bool
    message: str
    data: dict[str, Any] | None = None
    error: str | None = None


# =============================================================================
# Weather
# =============================================================================


class WeatherRecord(BaseModel):
    """A single observation or forecast sample, normalized across payloads.

    Numeric fields are ``None`` when the provider omitted them or sent
    something non-numeric. Renderers show a placeholder for ``None``.
    """

    model_config = {"frozen": True}

    temperature: float | None = None
    feels_like: float | None = None
    min_temperature: float | None = None
    max_temperature: float | None = None
    humidity_pct: float | None = None
    wind_speed_ms: float | None = None
    cloud_pct: float | None = None
    sunrise_epoch_sec: float | None = None
    sunset_epoch_sec: float | None = None
    description: str = ""
    condition_main: str = ""


class ForecastSample(BaseModel):
    """One 3-hour forecast entry, tagged with the provider's ``dt_txt``."""

    model_config = {"frozen": True}

    timestamp: str = Field(..., description="'YYYY-MM-DD HH:MM:SS' as sent by the provider")
    record: WeatherRecord


class ForecastDay(BaseModel):
    """The representative forecast for one calendar date."""

    model_config = {"frozen": True}

    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    representative_sample: WeatherRecord
    timestamp: str = ""
    synthetic: bool = False


# =============================================================================
# Background
# =============================================================================


class Condition(StrEnum):
    """Coarse weather bucket driving gradient and image selection."""

    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SNOW = "snow"
    FOG = "fog"
    HOT = "hot"
    COLD = "cold"
    DEFAULT = "default"


class Gradient(BaseModel):
    """Two-stop colour gradient."""

    model_config = {"frozen": True}

    start: str
    end: str

    @property
    def css(self) -> str:
        """CSS ``linear-gradient`` value."""
        return f"linear-gradient(135deg, {self.start} 0%, {self.end} 100%)"


#: Darkening layer drawn over every background.
OVERLAY_CSS = "linear-gradient(rgba(0,0,0,0.30), rgba(0,0,0,0.30))"


class Background(BaseModel):
    """Resolved background: image file plus the condition's gradient."""

    model_config = {"frozen": True}

    image: str
    gradient: Gradient
    condition: Condition = Condition.DEFAULT

    @property
    def css(self) -> str:
        """Layered CSS background: overlay, gradient, then the photo."""
        return f"{OVERLAY_CSS}, {self.gradient.css}, url('images/{self.image}')"
