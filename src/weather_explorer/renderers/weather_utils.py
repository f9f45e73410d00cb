"""Weather display helpers for renderers.

Pure functions with no external dependencies.
"""

from __future__ import annotations

import re
from datetime import datetime

from weather_explorer.units import PLACEHOLDER

ICON_RAIN = "\U0001f327\ufe0f"
ICON_SNOW = "\u2744\ufe0f"
ICON_CLOUD = "\u2601\ufe0f"
ICON_SUN = "\u2600\ufe0f"
ICON_SUN_CLOUD = "\U0001f324\ufe0f"
ICON_SUN_RAIN = "\U0001f326\ufe0f"
ICON_RAINBOW = "\U0001f308"
ICON_LOADING = "\u23f3"
ICON_ERROR = "\u274c"

NBSP = "\u00a0"

_MERIDIEM = re.compile(r"\s+(AM|PM|am|pm)$")


def weather_icon(
    temperature: float | None,
    humidity: float | None,
    description: str = "",
) -> str:
    """Pick an emoji for a record: description first, then temperature, then humidity."""
    desc = description.lower()
    if "rain" in desc or "drizzle" in desc:
        return ICON_RAIN
    if "snow" in desc:
        return ICON_SNOW
    if "cloud" in desc:
        return ICON_CLOUD
    if temperature is not None and temperature > 25:
        return ICON_SUN
    if temperature is not None and temperature > 15:
        return ICON_SUN_CLOUD
    if humidity is not None and humidity > 80:
        return ICON_SUN_RAIN
    return ICON_RAINBOW


def format_clock_time(epoch_sec: float | None) -> str:
    """Local ``hh:mm AM`` for a Unix timestamp, ``--`` when missing.

    The space before AM/PM is non-breaking so narrow buttons don't wrap it.
    """
    if epoch_sec is None:
        return PLACEHOLDER
    try:
        text = datetime.fromtimestamp(epoch_sec).strftime("%I:%M %p")
    except (OverflowError, OSError, ValueError):
        return PLACEHOLDER
    return _MERIDIEM.sub(NBSP + r"\1", text)


def capitalize_first(text: str) -> str:
    """Uppercase the first character only (``"light rain"`` -> ``"Light rain"``)."""
    return text[:1].upper() + text[1:]
