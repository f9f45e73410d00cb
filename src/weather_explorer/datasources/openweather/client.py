"""OpenWeather API client constants and the shared GET helper.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
"""

from __future__ import annotations

import logging
from typing import Any

from weather_explorer.services.http import session

logger = logging.getLogger(__name__)

OPENWEATHER_BASE = "https://api.openweathermap.org/data/2.5"
CURRENT_ENDPOINT = "weather"
FORECAST_ENDPOINT = "forecast"

# Everything is fetched metric; Fahrenheit is a display-time conversion.
UNITS = "metric"


class WeatherApiError(RuntimeError):
    """The provider answered with a non-2xx status."""

    def __init__(self, label: str, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"{label} error: {status_code} {reason}".rstrip())


def get_json(
    endpoint: str,
    city: str,
    *,
    api_key: str,
    base_url: str = OPENWEATHER_BASE,
    label: str,
    timeout: float | None = None,
) -> dict[str, Any]:
    """GET ``<base_url>/<endpoint>?q=<city>`` and return the decoded body.

    Raises:
        WeatherApiError: Non-2xx response. The message carries status and
            reason only; the request URL (which contains the key) is omitted.
        requests.RequestException: Transport failure or undecodable JSON.
    """
    params = {"q": city, "appid": api_key, "units": UNITS}
    url = f"{base_url.rstrip('/')}/{endpoint}"
    logger.debug("GET %s q=%s", url, city)

    if timeout is None:
        resp = session.get(url, params=params)
    else:
        resp = session.get(url, params=params, timeout=timeout)
    if not resp.ok:
        raise WeatherApiError(label, resp.status_code, resp.reason or "")
    result: dict[str, Any] = resp.json()
    return result
