"""Weather Explorer - current conditions and multi-day forecast dashboard.

Architecture::

    datasources/   External APIs (OpenWeather current + 5-day/3-hour forecast)
    normalize.py   Raw provider JSON -> canonical WeatherRecord
    analysis/      Forecast day-bucketing, condition classification
    background.py  Background image probing (first match by priority)
    dashboard.py   Controller owning app state, drives the view callbacks
    store.py       JSON store with TTL (live snapshots, preferences)
    renderers/     Pure data -> text/HTML (console view, static site view)
    flows/         Prefect orchestration (refresh fetches and renders the site)
    services/      Shared utilities (HTTP session with timeout)

Data flow: datasources -> normalize -> analysis -> background -> renderers
"""

__version__ = "0.1.0"

from weather_explorer.config import Settings
from weather_explorer.schemas import Unit, WeatherRecord

__all__ = ["Settings", "Unit", "WeatherRecord", "__version__"]
