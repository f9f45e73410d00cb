"""Domain logic over normalized weather records.

Dependency rule: analysis/ imports from schemas and normalize only.
It never fetches data or produces HTML.

Modules:
  - forecast_days: 3-hour samples -> one representative sample per day,
    plus the synthetic fallback forecast
  - conditions: record -> condition bucket, background filename candidates,
    gradient lookup

Both are pure functions; renderers and the dashboard controller consume
their outputs directly.
"""

from weather_explorer.analysis.conditions import (
    candidate_filenames,
    candidate_stems,
    classify,
    gradient_for,
    slugify,
)
from weather_explorer.analysis.forecast_days import bucketize, fill_slots, synthetic_forecast

__all__ = [
    "bucketize",
    "candidate_filenames",
    "candidate_stems",
    "classify",
    "fill_slots",
    "gradient_for",
    "slugify",
    "synthetic_forecast",
]
