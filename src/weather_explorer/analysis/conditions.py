"""Classify a weather record into a condition bucket and background candidates.

The bucket picks the colour gradient; the candidate list is the ordered set
of image filenames the background resolver probes, most specific first::

    "Light Rain", 10 C  ->  light-rain, light, rain, <known stems>, default
                            each as .jpeg, .jpg, .png, .webp
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from weather_explorer.schemas import Condition, Gradient

if TYPE_CHECKING:
    from collections.abc import Iterable

    from weather_explorer.schemas import WeatherRecord

# Checked in order; first bucket with a matching token wins.
CONDITION_PATTERNS: list[tuple[Condition, re.Pattern[str]]] = [
    (Condition.SNOW, re.compile(r"snow|sleet|blizzard|ice")),
    (Condition.RAIN, re.compile(r"rain|drizzle|shower|showers|thunder|storm")),
    (Condition.FOG, re.compile(r"mist|fog")),
    (Condition.CLOUDY, re.compile(r"cloud|overcast")),
    (Condition.CLEAR, re.compile(r"clear|sunny")),
]

# Temperature overrides for the bucket (Celsius)
HOT_THRESHOLD_C = 32.0
COLD_THRESHOLD_C = 3.0

# Image stems that are always tried after the record-specific ones
KNOWN_STEMS = [
    "blizzard", "clear", "cloudy", "drizzle", "fog", "ice", "mist", "overcast",
    "rain", "shower", "showers", "sleet", "snow", "sunny", "thunder",
    "storm", "thunderstorm", "light-rain", "heavy-rain", "light-snow", "heavy-snow",
    "freezing", "very-hot", "hot", "cold", "default",
]  # fmt: skip

#: Extension priority for every stem.
IMAGE_EXTENSIONS = ("jpeg", "jpg", "png", "webp")

DEFAULT_GRADIENT = Gradient(start="#667eea", end="#764ba2")

GRADIENTS: dict[Condition, Gradient] = {
    Condition.CLEAR: Gradient(start="#FFD27F", end="#FF7A18"),
    Condition.CLOUDY: Gradient(start="#dfe9f3", end="#c5d5f1"),
    Condition.RAIN: Gradient(start="#89f7fe", end="#66a6ff"),
    Condition.FOG: Gradient(start="#cfd9df", end="#e2ebf0"),
    Condition.SNOW: Gradient(start="#e0f7ff", end="#cdefff"),
    Condition.HOT: Gradient(start="#ff9a9e", end="#fecfef"),
    Condition.COLD: Gradient(start="#a1c4fd", end="#c2e9fb"),
}

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to ``-``, trim hyphens."""
    return _NON_ALNUM.sub("-", text.lower()).strip("-")


def _dedupe(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for item in items:
        if item and item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def tokenize(record: WeatherRecord) -> list[str]:
    """Whitespace tokens of the description then condition_main, lowercased."""
    text = f"{record.description} {record.condition_main}".lower()
    return _dedupe(text.split())


def classify(record: WeatherRecord) -> Condition:
    """Pick the condition bucket for a record.

    Token patterns are checked in priority order (snow, rain, fog, cloudy,
    clear). A temperature of 32 C or more then forces ``hot`` and 3 C or
    less forces ``cold``, whatever the tokens said.
    """
    tokens = tokenize(record)
    condition = Condition.DEFAULT
    for bucket, pattern in CONDITION_PATTERNS:
        if any(pattern.search(token) for token in tokens):
            condition = bucket
            break

    temp = record.temperature
    if temp is not None:
        if temp >= HOT_THRESHOLD_C:
            condition = Condition.HOT
        elif temp <= COLD_THRESHOLD_C:
            condition = Condition.COLD
    return condition


def _temperature_stems(temp: float | None) -> list[str]:
    # Independent of the bucket override; may repeat "hot"/"cold".
    if temp is None:
        return []
    stems = []
    if temp >= 35:
        stems.append("very-hot")
    if temp >= 30:
        stems.append("hot")
    if temp <= 0:
        stems.append("freezing")
    if temp <= 3:
        stems.append("cold")
    return stems


def candidate_stems(record: WeatherRecord, condition: Condition | None = None) -> list[str]:
    """Ordered, deduplicated image stems for a record, most specific first."""
    if condition is None:
        condition = classify(record)

    stems: list[str] = []
    if record.description:
        stems.append(slugify(record.description))
    stems.extend(slugify(token) for token in tokenize(record))
    stems.append(slugify(condition.value))
    stems.extend(_temperature_stems(record.temperature))
    stems.extend(KNOWN_STEMS)
    stems.append("default")
    return _dedupe(stems)


def candidate_filenames(stems: Iterable[str]) -> list[str]:
    """Expand stems to filenames in extension-priority order."""
    return _dedupe(f"{stem}.{ext}" for stem in stems for ext in IMAGE_EXTENSIONS)


def gradient_for(condition: Condition) -> Gradient:
    """Gradient for a bucket; ``DEFAULT_GRADIENT`` when unmapped."""
    return GRADIENTS.get(condition, DEFAULT_GRADIENT)
