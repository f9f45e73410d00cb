"""
Map raw OpenWeather payloads onto :class:`WeatherRecord`.

Everything here is a pure transformation: no network, no I/O, and no
exceptions for malformed input. Missing nested objects are read as empty
dicts and unparseable numbers become ``None``.

Current weather payload (abridged)::

    {
        "weather": [{"main": "Rain", "description": "light rain"}],
        "main": {"temp": 15.2, "feels_like": 14.8, "temp_min": 13.0,
                 "temp_max": 17.1, "humidity": 70},
        "wind": {"speed": 4.1},
        "clouds": {"all": 90},
        "sys": {"sunrise": 1718023200, "sunset": 1718080800}
    }

Forecast entries share the same ``main``/``weather``/``wind``/``clouds``
shape and add ``dt_txt``.
"""

from __future__ import annotations

import math
from typing import Any

from weather_explorer.schemas import ForecastSample, WeatherRecord


def to_number(value: Any) -> float | None:
    """Return ``value`` as a finite float, or None if it isn't one.

    Numeric strings are parsed. ``None``, booleans, blank strings, NaN and
    infinities all map to None so a missing reading never shows up as 0.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _section(raw: Any, key: str) -> dict[str, Any]:
    """Return ``raw[key]`` if it is a dict, else an empty dict."""
    if not isinstance(raw, dict):
        return {}
    value = raw.get(key)
    return value if isinstance(value, dict) else {}


def _first_condition(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict):
        return {}
    conditions = raw.get("weather")
    if isinstance(conditions, list) and conditions and isinstance(conditions[0], dict):
        return conditions[0]
    return {}


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def normalize_current(raw: Any) -> WeatherRecord:
    """Build a WeatherRecord from a current-weather (or forecast entry) payload."""
    main = _section(raw, "main")
    wind = _section(raw, "wind")
    clouds = _section(raw, "clouds")
    sys = _section(raw, "sys")
    condition = _first_condition(raw)

    return WeatherRecord(
        temperature=to_number(main.get("temp")),
        feels_like=to_number(main.get("feels_like")),
        min_temperature=to_number(main.get("temp_min")),
        max_temperature=to_number(main.get("temp_max")),
        humidity_pct=to_number(main.get("humidity")),
        wind_speed_ms=to_number(wind.get("speed")),
        cloud_pct=to_number(clouds.get("all")),
        sunrise_epoch_sec=to_number(sys.get("sunrise")),
        sunset_epoch_sec=to_number(sys.get("sunset")),
        description=_text(condition.get("description")),
        condition_main=_text(condition.get("main")),
    )


def normalize_forecast(raw: Any) -> list[ForecastSample]:
    """Normalize every entry of a forecast payload's ``list``.

    Input order is preserved; entries that are not objects are skipped.
    An entry without ``dt_txt`` keeps an empty timestamp (the bucketizer
    drops it later).
    """
    entries = raw.get("list") if isinstance(raw, dict) else None
    if not isinstance(entries, list):
        return []

    samples: list[ForecastSample] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        samples.append(
            ForecastSample(
                timestamp=_text(entry.get("dt_txt")),
                record=normalize_current(entry),
            )
        )
    return samples
