"""
Dashboard controller: one weather lookup from user action to view updates.

A lookup runs in a fixed order::

    resolve city -> fetch current -> normalize -> show current
                 -> fetch forecast -> bucketize (or synthetic) -> show forecast
                 -> classify + probe images -> show background

Only the current-weather fetch is fatal. A failed forecast falls back to a
synthetic one built from the current record, and missing images fall back
to ``default.jpg``.

All mutable state (unit, last city, last record/forecast, request counter)
lives on :class:`AppState`, owned by the controller. Every lookup takes a
sequence number; if a newer lookup has started by the time a response is
processed, the older response is dropped instead of overwriting the view.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Protocol

import requests

from weather_explorer.analysis.forecast_days import bucketize, synthetic_forecast
from weather_explorer.background import ImageProbe, choose_background, image_probe
from weather_explorer.config import Settings
from weather_explorer.datasources.openweather import (
    WeatherApiError,
    fetch_current_weather,
    fetch_forecast,
)
from weather_explorer.normalize import normalize_current, normalize_forecast
from weather_explorer.schemas import Background, ForecastDay, Result, Unit, WeatherRecord
from weather_explorer.store import LAST_CITY_KEY, UNIT_KEY, PreferenceStore

logger = logging.getLogger(__name__)

FALLBACK_CITY = "Seattle"

Fetcher = Callable[[str], dict[str, Any]]

# Failures that end a fetch: non-2xx, transport/JSON errors.
FETCH_ERRORS = (WeatherApiError, requests.RequestException, ValueError)


class DashboardView(Protocol):
    """Presentation surface the controller writes to."""

    def show_loading(self, city: str) -> None: ...

    def show_error(self, city: str, message: str) -> None: ...

    def show_current(self, record: WeatherRecord, city: str, unit: Unit) -> None: ...

    def show_forecast(self, days: list[ForecastDay], unit: Unit) -> None: ...

    def show_background(self, background: Background) -> None: ...


@dataclass
class AppState:
    """Everything the dashboard remembers between lookups."""

    unit: Unit = Unit.CELSIUS
    last_city: str = FALLBACK_CITY
    last_record: WeatherRecord | None = None
    last_forecast: list[ForecastDay] = field(default_factory=list)
    request_seq: int = 0


def parse_unit(value: str | None, default: Unit = Unit.CELSIUS) -> Unit:
    """Parse ``"C"``/``"F"`` (any case); anything else yields ``default``."""
    try:
        return Unit((value or "").strip().upper())
    except ValueError:
        return default


class Dashboard:
    """Owns the app state and drives a DashboardView.

    Args:
        view: Where results are shown.
        preferences: Persisted unit / last-city store.
        fetch_current: ``city -> raw current-weather JSON``.
        fetch_forecast: ``city -> raw forecast JSON``.
        probe: Image probe for background resolution.
        forecast_slots: Number of forecast slots the view shows.
        default_city: City used when nothing else is known.
        rng: Random source for the synthetic forecast.
    """

    def __init__(
        self,
        view: DashboardView,
        preferences: PreferenceStore,
        fetch_current: Fetcher,
        fetch_forecast: Fetcher,
        probe: ImageProbe,
        *,
        forecast_slots: int = 5,
        default_city: str = FALLBACK_CITY,
        default_unit: Unit = Unit.CELSIUS,
        rng: random.Random | None = None,
    ) -> None:
        self.view = view
        self.preferences = preferences
        self.fetch_current = fetch_current
        self.fetch_forecast = fetch_forecast
        self.probe = probe
        self.forecast_slots = forecast_slots
        self.default_city = default_city
        self.rng = rng or random.Random()
        self.state = AppState(
            unit=parse_unit(preferences.get(UNIT_KEY, default_unit.value), default_unit),
            last_city=preferences.get(LAST_CITY_KEY, default_city),
        )

    @classmethod
    def from_settings(cls, settings: Settings, view: DashboardView, preferences: PreferenceStore) -> Dashboard:
        """Wire a dashboard to the live OpenWeather API and the configured images."""
        api = {
            "api_key": settings.openweather_api_key,
            "base_url": settings.openweather_base_url,
            "timeout": settings.request_timeout,
        }
        return cls(
            view,
            preferences,
            fetch_current=partial(fetch_current_weather, **api),
            fetch_forecast=partial(fetch_forecast, **api),
            probe=image_probe(settings),
            forecast_slots=settings.forecast_slots,
            default_city=settings.default_city,
            default_unit=parse_unit(settings.default_unit),
        )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def resolve_city(self, city: str | None = None, raw_input: str = "") -> str:
        """Explicit city, else the typed input, else the last city, else the default."""
        return (
            (city or "").strip()
            or raw_input.strip()
            or self.state.last_city
            or self.default_city
            or FALLBACK_CITY
        )

    def _is_stale(self, seq: int) -> bool:
        return seq != self.state.request_seq

    def get_weather(self, city: str | None = None, raw_input: str = "") -> Result:
        """Fetch and display weather for a city.

        Returns:
            Result with ``success=False`` when the current-weather fetch
            failed (or the lookup was superseded); the view has already been
            told either way.
        """
        self.state.request_seq += 1
        seq = self.state.request_seq

        target = self.resolve_city(city, raw_input)
        self.state.last_city = target
        self.preferences.set(LAST_CITY_KEY, target)
        self.view.show_loading(target)

        logger.info("Fetching weather for %s...", target)
        try:
            record = normalize_current(self.fetch_current(target))
        except FETCH_ERRORS as exc:
            if self._is_stale(seq):
                return self._superseded(target)
            logger.error("Error fetching weather data for %s: %s", target, exc)
            self.view.show_error(target, str(exc))
            return Result(success=False, message=f"Failed to load {target}", error=str(exc))

        if self._is_stale(seq):
            return self._superseded(target)
        self.state.last_record = record
        self.view.show_current(record, target, self.state.unit)

        days = self._load_forecast(target, record)
        if self._is_stale(seq):
            return self._superseded(target)
        self.state.last_forecast = days
        self.view.show_forecast(days, self.state.unit)

        background = choose_background(record, self.probe)
        if self._is_stale(seq):
            return self._superseded(target)
        self.view.show_background(background)

        return Result(
            success=True,
            message=f"Weather updated for {target}",
            data={
                "city": target,
                "condition": background.condition.value,
                "background": background.image,
                "forecast_days": len(days),
                "synthetic_forecast": any(d.synthetic for d in days),
            },
        )

    def _load_forecast(self, city: str, record: WeatherRecord) -> list[ForecastDay]:
        try:
            samples = normalize_forecast(self.fetch_forecast(city))
        except FETCH_ERRORS as exc:
            logger.warning("Forecast fetch failed for %s, using synthetic forecast: %s", city, exc)
            return synthetic_forecast(record, self.forecast_slots, self.rng)
        return bucketize(samples)[: self.forecast_slots]

    def _superseded(self, city: str) -> Result:
        logger.info("Discarding stale response for %s", city)
        return Result(success=False, message=f"Superseded request for {city}", error="stale")

    # -------------------------------------------------------------------------
    # Unit toggle
    # -------------------------------------------------------------------------

    def set_unit(self, unit: Unit) -> None:
        """Switch display unit, persist it, and re-render what is on screen.

        Stored records are untouched; only display strings change. Before any
        lookup has succeeded, a synthetic forecast (20 C / 60 %) fills the
        slots. After one, the last forecast is shown as it was, even if empty.
        """
        self.state.unit = unit
        self.preferences.set(UNIT_KEY, unit.value)

        if self.state.last_record is None:
            self.view.show_forecast(synthetic_forecast(None, self.forecast_slots, self.rng), unit)
            return

        self.view.show_current(self.state.last_record, self.state.last_city, unit)
        self.view.show_forecast(self.state.last_forecast, unit)
