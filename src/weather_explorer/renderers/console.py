"""Plain-text dashboard for the CLI."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from weather_explorer.renderers.current import current_fields, error_fields, loading_fields
from weather_explorer.renderers.forecast import forecast_slots

if TYPE_CHECKING:
    from weather_explorer.schemas import Background, ForecastDay, Unit, WeatherRecord


class ConsoleView:
    """Prints each dashboard update as it arrives."""

    def __init__(self, out: TextIO | None = None, slot_count: int = 5, *, quiet_loading: bool = False) -> None:
        self.out = out or sys.stdout
        self.slot_count = slot_count
        self.quiet_loading = quiet_loading

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def show_loading(self, city: str) -> None:
        if not self.quiet_loading:
            self._print(loading_fields(city)["details"])

    def show_error(self, city: str, message: str) -> None:
        fields = error_fields(city, message)
        self._print(f"{fields['icon']} {fields['city']}: {fields['temperature']}")
        self._print(f"   {fields['details']}")

    def show_current(self, record: WeatherRecord, city: str, unit: Unit) -> None:
        fields = current_fields(record, city, unit)
        self._print()
        self._print(f"{fields['icon']}  {fields['city']}  {fields['temperature']}")
        self._print(f"   {fields['details']}")
        self._print(
            f"   Low {fields['min_temp']} / High {fields['max_temp']}"
            f"   Clouds {fields['cloud_pct']}"
        )
        self._print(f"   Sunrise {fields['sunrise']}   Sunset {fields['sunset']}")
        self._print(f"   Updated {fields['last_updated']}")

    def show_forecast(self, days: list[ForecastDay], unit: Unit) -> None:
        cells = [
            f"{slot['label']:<9} {slot['icon']} {slot['temp']}"
            for slot in forecast_slots(days, unit, self.slot_count)
            if slot is not None
        ]
        if not cells:
            return
        self._print()
        self._print("   Forecast")
        for cell in cells:
            self._print(f"   {cell}")

    def show_background(self, background: Background) -> None:
        self._print()
        self._print(f"   Background: {background.image} ({background.condition.value})")
