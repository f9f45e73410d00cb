"""Current-conditions card: display strings and HTML."""

from __future__ import annotations

from datetime import datetime

from weather_explorer.renderers import render_template
from weather_explorer.renderers.weather_utils import (
    ICON_ERROR,
    ICON_LOADING,
    capitalize_first,
    format_clock_time,
    weather_icon,
)
from weather_explorer.schemas import Unit, WeatherRecord
from weather_explorer.units import TEMPERATURE_PLACEHOLDER, format_percent, format_temperature, format_wind

DETAIL_SEPARATOR = " \u2022 "


def current_fields(
    record: WeatherRecord,
    city: str,
    unit: Unit,
    now: datetime | None = None,
) -> dict[str, str]:
    """Build every display string for the current-conditions card.

    Temperatures carry the unit letter (``"15°C"``); missing values render
    as placeholders.
    """
    suffix = unit.value
    now = now or datetime.now()

    def temp(value: float | None) -> str:
        return f"{format_temperature(value, unit)}{suffix}"

    details = [
        capitalize_first(record.description),
        f"Feels like: {temp(record.feels_like)}",
        f"Humidity: {format_percent(record.humidity_pct)}",
        f"Wind: {format_wind(record.wind_speed_ms, unit)}",
    ]

    return {
        "city": capitalize_first(city),
        "temperature": temp(record.temperature),
        "details": DETAIL_SEPARATOR.join(d for d in details if d),
        "icon": weather_icon(record.temperature, record.humidity_pct, record.description),
        "feels_like": temp(record.feels_like),
        "humidity": format_percent(record.humidity_pct),
        "wind": format_wind(record.wind_speed_ms, unit),
        "cloud_pct": format_percent(record.cloud_pct),
        "min_temp": temp(record.min_temperature),
        "max_temp": temp(record.max_temperature),
        "sunrise": format_clock_time(record.sunrise_epoch_sec),
        "sunset": format_clock_time(record.sunset_epoch_sec),
        "last_updated": now.strftime("%Y-%m-%d %H:%M:%S"),
    }


def loading_fields(city: str) -> dict[str, str]:
    """Placeholder card shown while a request is in flight."""
    return {
        "city": "Loading...",
        "temperature": TEMPERATURE_PLACEHOLDER,
        "details": f"Fetching weather data for {city}...",
        "icon": ICON_LOADING,
    }


def error_fields(city: str, message: str) -> dict[str, str]:
    """Card shown when the current-weather request failed."""
    return {
        "city": city,
        "temperature": "Error",
        "details": f"Failed to load data: {message}",
        "icon": ICON_ERROR,
    }


def build_current_html(fields: dict[str, str]) -> str:
    """Render the current-conditions card."""
    return render_template("current.html.j2", fields=fields)
