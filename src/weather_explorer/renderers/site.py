"""Static HTML dashboard page.

``SiteView`` collects the dashboard updates for one city and renders them
into a standalone page with ``render()``. ``build_index_html`` links the
per-city pages together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from weather_explorer.analysis.conditions import DEFAULT_GRADIENT
from weather_explorer.renderers import render_template
from weather_explorer.renderers.current import (
    build_current_html,
    current_fields,
    error_fields,
    loading_fields,
)
from weather_explorer.renderers.forecast import build_forecast_html, forecast_slots
from weather_explorer.schemas import OVERLAY_CSS

if TYPE_CHECKING:
    from weather_explorer.schemas import Background, ForecastDay, Unit, WeatherRecord


class SiteView:
    """Accumulates the latest state of each card for one page."""

    def __init__(self, slot_count: int = 5) -> None:
        self.slot_count = slot_count
        self.city = ""
        self.current_html = ""
        self.forecast_html = ""
        self.background_css = f"{OVERLAY_CSS}, {DEFAULT_GRADIENT.css}"
        self.background_color = DEFAULT_GRADIENT.start
        self.failed = False

    def show_loading(self, city: str) -> None:
        self.city = city
        self.failed = False
        self.current_html = build_current_html(loading_fields(city))

    def show_error(self, city: str, message: str) -> None:
        self.city = city
        self.failed = True
        self.current_html = build_current_html(error_fields(city, message))

    def show_current(self, record: WeatherRecord, city: str, unit: Unit) -> None:
        self.city = city
        self.current_html = build_current_html(current_fields(record, city, unit))

    def show_forecast(self, days: list[ForecastDay], unit: Unit) -> None:
        self.forecast_html = build_forecast_html(forecast_slots(days, unit, self.slot_count))

    def show_background(self, background: Background) -> None:
        self.background_css = background.css
        self.background_color = background.gradient.start

    def render(self) -> str:
        """Full HTML page for the collected state."""
        return render_template(
            "base.html.j2",
            title=self.city or "Weather",
            current_html=self.current_html,
            forecast_html=self.forecast_html,
            background_css=self.background_css,
            background_color=self.background_color,
        )


def build_index_html(pages: list[dict[str, Any]]) -> str:
    """Index page linking each city page.

    Args:
        pages: Dicts with ``city``, ``href`` and ``success`` keys.
    """
    return render_template("index.html.j2", pages=pages)
