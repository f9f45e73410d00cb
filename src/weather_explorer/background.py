"""
Background image resolution.

Probes candidate image files strictly in priority order and stops at the
first that exists, so the most specific picture available wins. Each probe
either returns the filename or None. When nothing resolves, the hardcoded
``default.jpg`` is used and the gradient alone carries the condition.

Two probes are provided:
  - LocalImageProbe: files in a directory (static site build, CLI)
  - HttpImageProbe: HEAD requests against a deployed site's ``images/``

``image_probe(settings)`` picks the HTTP probe when ``images_base_url`` is
set and the local one otherwise.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

import requests

from weather_explorer.analysis.conditions import (
    candidate_filenames,
    candidate_stems,
    classify,
    gradient_for,
)
from weather_explorer.schemas import Background
from weather_explorer.services.http import session as default_session

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from weather_explorer.config import Settings
    from weather_explorer.schemas import WeatherRecord

logger = logging.getLogger(__name__)

DEFAULT_IMAGE = "default.jpg"


class ImageProbe(Protocol):
    """Checks whether a single image can be loaded."""

    def __call__(self, filename: str) -> str | None: ...


class LocalImageProbe:
    """Resolve ``filename`` if it exists as a file under ``images_dir``."""

    def __init__(self, images_dir: Path) -> None:
        self.images_dir = images_dir

    def __call__(self, filename: str) -> str | None:
        return filename if (self.images_dir / filename).is_file() else None


class HttpImageProbe:
    """Resolve ``filename`` if ``<base_url>/images/<filename>`` answers 2xx."""

    def __init__(self, base_url: str, session: requests.Session | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or default_session

    def __call__(self, filename: str) -> str | None:
        url = f"{self.base_url}/images/{filename}"
        try:
            resp = self.session.head(url, allow_redirects=True)
        except requests.RequestException as exc:
            logger.debug("Probe failed for %s: %s", url, exc)
            return None
        return filename if resp.ok else None


def image_probe(settings: Settings) -> ImageProbe:
    """HTTP probe when ``images_base_url`` is set, else the local images directory."""
    if settings.images_base_url:
        return HttpImageProbe(settings.images_base_url)
    return LocalImageProbe(settings.images_dir)


def resolve_background(
    candidates: Iterable[str],
    probe: ImageProbe,
    default: str = DEFAULT_IMAGE,
) -> str:
    """Return the first candidate the probe accepts, else ``default``.

    Candidates after the first success are never probed.
    """
    for filename in candidates:
        found = probe(filename)
        if found:
            return found
    logger.warning("No matching background image found; using %s", default)
    return default


def choose_background(record: WeatherRecord, probe: ImageProbe) -> Background:
    """Classify the record and resolve its background image and gradient."""
    condition = classify(record)
    filenames = candidate_filenames(candidate_stems(record, condition))
    image = resolve_background(filenames, probe)
    logger.info("Background updated: condition=%s chosen=%s", condition, image)
    return Background(image=image, gradient=gradient_for(condition), condition=condition)
