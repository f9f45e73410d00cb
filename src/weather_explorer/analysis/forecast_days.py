"""Reduce a 5-day/3-hour forecast to one sample per calendar day.

The provider returns up to 40 samples tagged ``"YYYY-MM-DD HH:MM:SS"``.
For display we keep the sample nearest midday for each date, drop dates
before today, and order what is left chronologically. ISO date strings
compare lexicographically in calendar order, so plain string comparison
is used throughout.
"""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import TYPE_CHECKING, TypeVar

from weather_explorer.schemas import ForecastDay, ForecastSample, WeatherRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")

MIDDAY_HOUR = 12

# Synthetic forecast defaults and spread (original dashboard values)
DEFAULT_TEMPERATURE_C = 20.0
DEFAULT_HUMIDITY_PCT = 60.0
TEMPERATURE_SPREAD_C = 8.0  # +/- 4 C
HUMIDITY_SPREAD_PCT = 20.0  # +/- 10 %


def _split_timestamp(timestamp: str) -> tuple[str, int] | None:
    """Return ``(iso_date, hour)`` or None if either part is unusable."""
    parts = timestamp.split(" ")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None
    day, clock = parts[0], parts[1]
    try:
        date.fromisoformat(day)
        hour = int(clock[:2])
    except ValueError:
        return None
    return day, hour


def bucketize(
    samples: Sequence[ForecastSample],
    today: str | date | None = None,
) -> list[ForecastDay]:
    """Pick one representative sample per date, today onwards, in date order.

    Within a date the sample whose hour is closest to 12:00 wins. On a tie
    the first sample seen is kept (the comparison is strictly less-than).

    Args:
        samples: Forecast samples in provider order.
        today: ISO date to treat as "today". Defaults to the local date.

    Returns:
        ForecastDay list, ascending by date. Empty if nothing usable remains.
    """
    if today is None:
        today = date.today()
    today_str = today.isoformat() if isinstance(today, date) else today

    best: dict[str, tuple[int, ForecastSample]] = {}
    for sample in samples:
        parsed = _split_timestamp(sample.timestamp)
        if parsed is None:
            continue
        day, hour = parsed
        score = abs(hour - MIDDAY_HOUR)
        if day not in best or score < best[day][0]:
            best[day] = (score, sample)

    return [
        ForecastDay(
            date=day,
            representative_sample=sample.record,
            timestamp=sample.timestamp,
        )
        for day, (_, sample) in sorted(best.items(), key=lambda item: item[0])
        if day >= today_str
    ]


def fill_slots(days: Sequence[T], slot_count: int) -> list[T | None]:
    """Map days onto ``slot_count`` display slots.

    Extra days are discarded; when there are fewer days than slots the
    trailing slots are None and the view leaves them untouched.
    """
    filled: list[T | None] = list(days[:slot_count])
    filled.extend([None] * (slot_count - len(filled)))
    return filled


def synthetic_forecast(
    record: WeatherRecord | None,
    slot_count: int,
    rng: random.Random | None = None,
    today: date | None = None,
) -> list[ForecastDay]:
    """Fabricate a forecast from the current conditions.

    Used when the forecast endpoint fails. Each day jitters the current
    temperature by up to 4 C and humidity by up to 10 points (clamped to
    0-100). Days are flagged ``synthetic`` so views can label them
    "Today", "Tomorrow", "Day 3", ...
    """
    rng = rng or random.Random()
    today = today or date.today()
    base_temp = DEFAULT_TEMPERATURE_C
    base_humidity = DEFAULT_HUMIDITY_PCT
    if record is not None:
        if record.temperature is not None:
            base_temp = record.temperature
        if record.humidity_pct is not None:
            base_humidity = record.humidity_pct

    days: list[ForecastDay] = []
    for offset in range(slot_count):
        temp = base_temp + (rng.random() - 0.5) * TEMPERATURE_SPREAD_C
        humidity = base_humidity + (rng.random() - 0.5) * HUMIDITY_SPREAD_PCT
        humidity = max(0.0, min(100.0, humidity))
        days.append(
            ForecastDay(
                date=(today + timedelta(days=offset)).isoformat(),
                representative_sample=WeatherRecord(temperature=temp, humidity_pct=humidity),
                synthetic=True,
            )
        )
    return days
