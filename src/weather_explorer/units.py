"""Unit conversion and display formatting.

Pure functions with no external dependencies. Values are stored in
Celsius and m/s; conversion happens only when formatting for display.

Rounding: every display value goes through :func:`round_half_up`, which
rounds ``.5`` towards positive infinity (``2.5 -> 3``, ``-2.5 -> -2``).
Python's built-in ``round`` uses banker's rounding and is not used here.
"""

from __future__ import annotations

import math

from weather_explorer.schemas import Unit

TEMPERATURE_PLACEHOLDER = "--°"
PLACEHOLDER = "--"

MPH_PER_MS = 2.23694


def to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (fahrenheit - 32) * 5 / 9


def ms_to_mph(speed_ms: float) -> float:
    """Convert metres per second to miles per hour."""
    return speed_ms * MPH_PER_MS


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ``.5`` going up."""
    return math.floor(value + 0.5)


def _is_missing(value: object) -> bool:
    if value is None or isinstance(value, bool):
        return True
    if not isinstance(value, int | float):
        return True
    return math.isnan(value)


def format_temperature(celsius: float | None, unit: Unit) -> str:
    """Format a Celsius value for display, e.g. ``"15°"``.

    The unit letter is not included; callers append it.
    """
    if celsius is None or _is_missing(celsius):
        return TEMPERATURE_PLACEHOLDER
    value = to_fahrenheit(celsius) if unit == Unit.FAHRENHEIT else celsius
    return f"{round_half_up(value)}°"


def format_wind(speed_ms: float | None, unit: Unit) -> str:
    """Format a wind speed; mph alongside Fahrenheit, m/s alongside Celsius."""
    if speed_ms is None or _is_missing(speed_ms):
        return PLACEHOLDER
    if unit == Unit.FAHRENHEIT:
        return f"{round_half_up(ms_to_mph(speed_ms))} mph"
    return f"{round_half_up(speed_ms)} m/s"


def format_percent(value: float | None) -> str:
    """Format a 0-100 value as ``"70%"``, or ``"--%"`` when missing."""
    if value is None or _is_missing(value):
        return f"{PLACEHOLDER}%"
    return f"{round_half_up(value)}%"
