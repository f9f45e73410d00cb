"""Tests for the DataStore and PreferenceStore."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path
from unittest.mock import patch

import pytest

from weather_explorer.store import LAST_CITY_KEY, UNIT_KEY, DataStore, PreferenceStore


class TestDataStoreInit:
    """Test DataStore initialization."""

    def test_creates_tier_paths(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.base == tmp_path
        assert store.live == tmp_path / "live"
        assert store.derived == tmp_path / "derived"


class TestDataStoreWrite:
    """Test writing data with metadata envelopes."""

    def test_write_envelope_format(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        valid = datetime(2026, 3, 1, tzinfo=UTC)
        store.write(
            Path("live/current/seattle.json"),
            {"main": {"temp": 15}},
            source="openweathermap.org",
            valid_until=valid,
        )

        data = json.loads((tmp_path / "live" / "current" / "seattle.json").read_text())
        assert data["meta"]["source"] == "openweathermap.org"
        assert "fetched_at" in data["meta"]
        assert data["meta"]["valid_until"] == valid.isoformat()
        assert data["data"] == {"main": {"temp": 15}}

    def test_write_extra_params(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("live/test.json"), {}, source="test", city="Seattle")
        data = json.loads((tmp_path / "live" / "test.json").read_text())
        assert data["meta"]["city"] == "Seattle"

    def test_write_no_valid_until(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/output.json"), {}, source="test")
        data = json.loads((tmp_path / "derived" / "output.json").read_text())
        assert "valid_until" not in data["meta"]

    def test_path_escape_rejected(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "store")
        with pytest.raises(ValueError, match="escapes"):
            store.write(Path("../outside.json"), {}, source="test")


class TestDataStoreRead:
    """Test reading data from the store."""

    def test_read_returns_data_payload(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("live/test.json"), {"key": "value"}, source="test")
        assert store.read(Path("live/test.json")) == {"key": "value"}

    def test_read_missing_file(self, tmp_path: Path) -> None:
        assert DataStore(tmp_path).read(Path("nonexistent.json")) is None

    def test_read_raw_returns_envelope(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("live/test.json"), [1, 2], source="test")
        raw = store.read_raw(Path("live/test.json"))
        assert raw is not None
        assert raw["data"] == [1, 2]
        assert raw["meta"]["source"] == "test"


class TestDataStoreFreshness:
    """Test TTL checks."""

    def test_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(
            Path("live/a.json"), {}, source="t", valid_until=datetime.now(UTC) + timedelta(minutes=10)
        )
        assert store.is_fresh(Path("live/a.json")) is True

    def test_expired(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(
            Path("live/a.json"), {}, source="t", valid_until=datetime.now(UTC) - timedelta(minutes=1)
        )
        assert store.is_fresh(Path("live/a.json")) is False

    def test_no_valid_until(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/a.json"), {}, source="t")
        assert store.is_fresh(Path("derived/a.json")) is False

    def test_missing(self, tmp_path: Path) -> None:
        assert DataStore(tmp_path).is_fresh(Path("live/none.json")) is False


class TestPreferenceStore:
    """Persisted unit and last-city preferences."""

    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        prefs = PreferenceStore(DataStore(tmp_path))
        assert prefs.get(UNIT_KEY, "C") == "C"
        assert prefs.get(LAST_CITY_KEY, "Seattle") == "Seattle"

    def test_round_trip(self, tmp_path: Path) -> None:
        prefs = PreferenceStore(DataStore(tmp_path))
        prefs.set(UNIT_KEY, "F")
        prefs.set(LAST_CITY_KEY, "Tokyo")

        reopened = PreferenceStore(DataStore(tmp_path))
        assert reopened.get(UNIT_KEY, "C") == "F"
        assert reopened.get(LAST_CITY_KEY, "Seattle") == "Tokyo"

    def test_stored_under_envelope(self, tmp_path: Path) -> None:
        PreferenceStore(DataStore(tmp_path)).set(UNIT_KEY, "F")
        data = json.loads((tmp_path / "preferences.json").read_text())
        assert data["data"] == {"unit": "F"}

    def test_corrupt_file_falls_back(self, tmp_path: Path) -> None:
        (tmp_path / "preferences.json").write_text("{not json")
        prefs = PreferenceStore(DataStore(tmp_path))
        assert prefs.get(UNIT_KEY, "C") == "C"

    def test_non_string_values_ignored(self, tmp_path: Path) -> None:
        DataStore(tmp_path).write(Path("preferences.json"), {"unit": 7}, source="user")
        assert PreferenceStore(DataStore(tmp_path)).get(UNIT_KEY, "C") == "C"

    def test_write_failure_is_swallowed(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        prefs = PreferenceStore(DataStore(tmp_path))
        with patch.object(DataStore, "write", side_effect=PermissionError("read-only")):
            prefs.set(UNIT_KEY, "F")
        assert "Could not save preference unit" in caplog.text
        assert prefs.get(UNIT_KEY, "C") == "C"
