"""Forecast strip: one slot per day."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from weather_explorer.analysis.forecast_days import fill_slots
from weather_explorer.renderers import render_template
from weather_explorer.renderers.weather_utils import weather_icon
from weather_explorer.units import format_temperature

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weather_explorer.schemas import ForecastDay, Unit

SYNTHETIC_LABELS = ["Today", "Tomorrow"]


def day_label(day: ForecastDay, index: int) -> str:
    """Short weekday (``"Mon"``) for real days, relative labels for synthetic ones."""
    if day.synthetic:
        return SYNTHETIC_LABELS[index] if index < len(SYNTHETIC_LABELS) else f"Day {index + 1}"
    try:
        return date.fromisoformat(day.date).strftime("%a")
    except ValueError:
        return "Day"


def forecast_slots(
    days: Sequence[ForecastDay],
    unit: Unit,
    slot_count: int,
) -> list[dict[str, str] | None]:
    """Display strings for each slot; None for slots with no day to show."""
    slots: list[dict[str, str] | None] = []
    for index, day in enumerate(fill_slots(days, slot_count)):
        if day is None:
            slots.append(None)
            continue
        sample = day.representative_sample
        slots.append(
            {
                "label": day_label(day, index),
                "icon": weather_icon(sample.temperature, sample.humidity_pct, sample.description),
                "temp": f"{format_temperature(sample.temperature, unit)}{unit.value}",
                "description": sample.description,
            }
        )
    return slots


def build_forecast_html(slots: Sequence[dict[str, str] | None]) -> str:
    """Render the forecast strip. Empty slots render as blank cards."""
    return render_template("forecast.html.j2", slots=slots)
