"""Current conditions from the OpenWeather ``/weather`` endpoint."""

from __future__ import annotations

from typing import Any

from weather_explorer.datasources.openweather.client import CURRENT_ENDPOINT, OPENWEATHER_BASE, get_json


def fetch_current_weather(
    city: str,
    *,
    api_key: str,
    base_url: str = OPENWEATHER_BASE,
    timeout: float | None = None,
) -> dict[str, Any]:
    """
    Fetch the current observation for a city.

    Args:
        city: City name as typed by the user (e.g. ``"Seattle"``).
        api_key: OpenWeather API key.
        base_url: API root, overridable for tests or proxies.

    Returns:
        Raw API response dict (``main``, ``wind``, ``weather``, ``sys``, ...).
    """
    return get_json(
        CURRENT_ENDPOINT, city, api_key=api_key, base_url=base_url, label="Current weather", timeout=timeout
    )
