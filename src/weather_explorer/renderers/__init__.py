"""Rendering: normalized records -> display strings, text and HTML.

All renderers follow the same pattern:
  - Input: WeatherRecord / ForecastDay / Background plus the display Unit
  - Output: dict of display strings, or an HTML fragment
  - No fetching; the only side effect is the console view's printing

Public API:
  - current: current_fields, loading_fields, error_fields, build_current_html
  - forecast: day_label, forecast_slots, build_forecast_html
  - weather_utils: weather_icon, format_clock_time, capitalize_first
  - console: ConsoleView (CLI dashboard)
  - site: SiteView (static HTML page), build_index_html

Both views implement ``weather_explorer.dashboard.DashboardView``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
