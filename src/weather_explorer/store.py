"""JSON data store with freshness-aware caching, plus persisted preferences.

Files are organized into tiers by update frequency:
  - live/: Raw provider payloads, short TTL (current weather 10 min,
    forecast 3 h)
  - derived/: Computed outputs, always recomputed (HTML site)

Every JSON file is wrapped in a metadata envelope with ``valid_until`` so the
refresh flow can skip cities whose payloads are still fresh.

``PreferenceStore`` keeps the two user preferences (display unit and last
searched city) in ``preferences.json`` using the same envelope.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class DataStore:
    """Manages read/write of cached data files with TTL."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.live = base_dir / "live"
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> Any:
        """Read data payload from a metadata-enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            envelope = json.load(f)
        if not isinstance(envelope, dict):
            return envelope
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``live/current/seattle.json``).
            data: Payload to store under the ``data`` key.
            source: Data source identifier (e.g. ``"openweathermap.org"``).
            valid_until: Expiry timestamp. None means derived/no-cache.
            **params: Extra metadata fields (city, query params, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        with full.open("w") as f:
            json.dump(envelope, f, indent=2)

        return full

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Returns False if the file is missing, has no ``valid_until``, or
        the expiry time has passed.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return False

        valid_until = envelope.get("meta", {}).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry


PREFERENCES_PATH = Path("preferences.json")

UNIT_KEY = "unit"
LAST_CITY_KEY = "lastCity"


class PreferenceStore:
    """String key-value preferences persisted in a DataStore.

    Reads never fail: a missing or unreadable file yields the default.
    Writes are best-effort: failures are logged and swallowed so a
    read-only data directory never breaks a weather lookup.
    """

    def __init__(self, store: DataStore, path: Path = PREFERENCES_PATH) -> None:
        self.store = store
        self.path = path

    def _load(self) -> dict[str, str]:
        try:
            data = self.store.read(self.path)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read preferences from %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str, default: str) -> str:
        """Return the stored value for ``key``, or ``default`` if absent."""
        return self._load().get(key) or default

    def set(self, key: str, value: str) -> None:
        """Persist ``key = value``; never raises on I/O failure."""
        data = self._load()
        data[key] = value
        try:
            self.store.write(self.path, data, source="user")
        except OSError as exc:
            logger.warning("Could not save preference %s: %s", key, exc)
