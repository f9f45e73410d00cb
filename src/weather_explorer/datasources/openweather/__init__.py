"""OpenWeather data source.

Fetches current conditions and the 5-day/3-hour forecast by city name.
Requires an API key (``OPENWEATHER_API_KEY``).

Public API:
  - current: fetch_current_weather
  - forecast: fetch_forecast
  - client: API URL, WeatherApiError
"""

from weather_explorer.datasources.openweather.client import OPENWEATHER_BASE, WeatherApiError
from weather_explorer.datasources.openweather.current import fetch_current_weather
from weather_explorer.datasources.openweather.forecast import fetch_forecast

__all__ = [
    "OPENWEATHER_BASE",
    "WeatherApiError",
    "fetch_current_weather",
    "fetch_forecast",
]
