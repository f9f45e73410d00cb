"""
Prefect flow that refreshes the static dashboard site.

For each city: fetch current weather and forecast (reusing cached payloads
while they are fresh), run the dashboard controller against a ``SiteView``,
and write one HTML page per city plus an index.

Run locally:
    python -m weather_explorer.flows.refresh

Run with Prefect dashboard:
    prefect server start &
    python -m weather_explorer.flows.refresh
"""

from __future__ import annotations

import shutil
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_explorer.analysis.conditions import slugify
from weather_explorer.background import image_probe
from weather_explorer.config import get_settings
from weather_explorer.dashboard import Dashboard, parse_unit
from weather_explorer.datasources.openweather import current as ow_current
from weather_explorer.datasources.openweather import forecast as ow_forecast
from weather_explorer.renderers.site import SiteView, build_index_html
from weather_explorer.store import DataStore, PreferenceStore

SITE_SUBDIR = "site"

SOURCE = "openweathermap.org"
CURRENT_TTL = timedelta(minutes=10)
FORECAST_TTL = timedelta(hours=3)


def _store() -> DataStore:
    """Data store rooted at the configured data directory."""
    return DataStore(get_settings().data_dir)


def site_dir(store: DataStore) -> Path:
    """Directory the built pages are written to."""
    return store.derived / SITE_SUBDIR


def current_path(city: str) -> Path:
    """Store path of the cached current-weather payload for a city."""
    return Path("live/current") / f"{slugify(city) or 'city'}.json"


def forecast_path(city: str) -> Path:
    """Store path of the cached forecast payload for a city."""
    return Path("live/forecast") / f"{slugify(city) or 'city'}.json"


def page_name(city: str) -> str:
    """HTML filename of a city's page."""
    return f"{slugify(city) or 'city'}.html"


@task(name="fetch-current")
def fetch_current(city: str) -> dict[str, Any]:
    """Fetch current weather for a city, or reuse a fresh cached copy."""
    store = _store()
    path = current_path(city)
    if store.is_fresh(path):
        print(f"Current weather for {city} is fresh, skipping fetch.")
        return store.read(path) or {}

    settings = get_settings()
    raw = ow_current.fetch_current_weather(
        city,
        api_key=settings.openweather_api_key,
        base_url=settings.openweather_base_url,
        timeout=settings.request_timeout,
    )
    store.write(path, raw, source=SOURCE, valid_until=datetime.now(UTC) + CURRENT_TTL, city=city)
    return raw


@task(name="fetch-forecast")
def fetch_forecast(city: str) -> dict[str, Any]:
    """Fetch the 5-day forecast for a city, or reuse a fresh cached copy."""
    store = _store()
    path = forecast_path(city)
    if store.is_fresh(path):
        print(f"Forecast for {city} is fresh, skipping fetch.")
        return store.read(path) or {}

    settings = get_settings()
    raw = ow_forecast.fetch_forecast(
        city,
        api_key=settings.openweather_api_key,
        base_url=settings.openweather_base_url,
        timeout=settings.request_timeout,
    )
    store.write(path, raw, source=SOURCE, valid_until=datetime.now(UTC) + FORECAST_TTL, city=city)
    return raw


@task(name="write-page")
def write_page(name: str, html: str) -> Path:
    """Write one HTML page into the site directory."""
    target = site_dir(_store())
    target.mkdir(parents=True, exist_ok=True)
    path = target / name
    path.write_text(html)
    return path


@task(name="copy-images")
def copy_images(images_dir: Path) -> int:
    """Copy background images next to the pages; returns the file count."""
    if not images_dir.is_dir():
        print(f"No images directory at {images_dir}; pages use gradients only.")
        return 0
    target = site_dir(_store()) / "images"
    shutil.copytree(images_dir, target, dirs_exist_ok=True)
    return sum(1 for p in target.iterdir() if p.is_file())


@flow(name="refresh-dashboard", log_prints=True)
def refresh_dashboard(cities: list[str] | None = None) -> dict[str, Any]:
    """Render the dashboard page for each city (favorites by default)."""
    settings = get_settings()
    cities = cities or settings.favorite_cities
    preferences = PreferenceStore(_store())

    results: dict[str, Any] = {"cities": {}}
    results["images"] = copy_images(settings.images_dir)

    pages: list[dict[str, Any]] = []
    for city in cities:
        print(f"Refreshing {city}...")
        view = SiteView(slot_count=settings.forecast_slots)
        dashboard = Dashboard(
            view,
            preferences,
            fetch_current=fetch_current,
            fetch_forecast=fetch_forecast,
            probe=image_probe(settings),
            forecast_slots=settings.forecast_slots,
            default_city=settings.default_city,
            default_unit=parse_unit(settings.default_unit),
        )
        result = dashboard.get_weather(city)
        name = page_name(city)
        path = write_page(name, view.render())
        print(f"Saved {city} ({'ok' if result.success else result.error}) to {path}")

        results["cities"][city] = result.model_dump()
        pages.append({"city": city, "href": name, "success": result.success})

    write_page("index.html", build_index_html(pages))
    results["pages"] = len(pages)
    return results


if __name__ == "__main__":
    result = refresh_dashboard()
    print(f"Flow complete: {result}")
