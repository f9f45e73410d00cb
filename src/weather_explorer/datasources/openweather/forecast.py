"""5-day / 3-hour forecast from the OpenWeather ``/forecast`` endpoint."""

from __future__ import annotations

from typing import Any

from weather_explorer.datasources.openweather.client import FORECAST_ENDPOINT, OPENWEATHER_BASE, get_json


def fetch_forecast(
    city: str,
    *,
    api_key: str,
    base_url: str = OPENWEATHER_BASE,
    timeout: float | None = None,
) -> dict[str, Any]:
    """
    Fetch the 3-hourly forecast for a city.

    Returns:
        Raw API response dict with a ``list`` of samples, each carrying
        ``dt_txt`` (``"YYYY-MM-DD HH:MM:SS"``, UTC) plus ``main``/``weather``.
    """
    return get_json(
        FORECAST_ENDPOINT, city, api_key=api_key, base_url=base_url, label="Forecast", timeout=timeout
    )
