"""Tests for forecast day-bucketing and the synthetic fallback forecast."""

from __future__ import annotations

import random
from datetime import date

from weather_explorer.analysis.forecast_days import bucketize, fill_slots, synthetic_forecast
from weather_explorer.schemas import ForecastSample, WeatherRecord


def _sample(timestamp: str, temp: float | None = None, description: str = "") -> ForecastSample:
    return ForecastSample(
        timestamp=timestamp,
        record=WeatherRecord(temperature=temp, description=description),
    )


class TestBucketize:
    """One representative sample per date, today onwards."""

    def test_picks_sample_closest_to_midday(self) -> None:
        samples = [
            _sample("2024-01-02 06:00:00", 1),
            _sample("2024-01-02 12:00:00", 2),
            _sample("2024-01-02 18:00:00", 3),
        ]
        days = bucketize(samples, today="2024-01-01")
        assert len(days) == 1
        assert days[0].date == "2024-01-02"
        assert days[0].representative_sample.temperature == 2
        assert days[0].timestamp == "2024-01-02 12:00:00"

    def test_tie_keeps_first_seen(self) -> None:
        # |9 - 12| == |15 - 12|; the earlier sample in input order wins
        samples = [
            _sample("2024-01-01 09:00:00", 9),
            _sample("2024-01-01 15:00:00", 15),
            _sample("2024-01-02 12:00:00", 12),
        ]
        days = bucketize(samples, today="2024-01-01")
        assert days[0].representative_sample.temperature == 9
        assert days[1].representative_sample.temperature == 12

    def test_tie_keeps_first_seen_regardless_of_hour_order(self) -> None:
        samples = [
            _sample("2024-01-01 15:00:00", 15),
            _sample("2024-01-01 09:00:00", 9),
        ]
        days = bucketize(samples, today="2024-01-01")
        assert days[0].representative_sample.temperature == 15

    def test_drops_past_dates_and_sorts(self) -> None:
        samples = [
            _sample("2024-01-03 12:00:00"),
            _sample("2024-01-01 12:00:00"),
            _sample("2024-01-02 12:00:00"),
        ]
        days = bucketize(samples, today="2024-01-02")
        assert [d.date for d in days] == ["2024-01-02", "2024-01-03"]

    def test_today_as_date(self) -> None:
        samples = [_sample("2024-01-01 12:00:00"), _sample("2024-01-02 12:00:00")]
        days = bucketize(samples, today=date(2024, 1, 2))
        assert [d.date for d in days] == ["2024-01-02"]

    def test_defaults_to_local_today(self) -> None:
        today = date.today().isoformat()
        days = bucketize([_sample("1999-12-31 12:00:00"), _sample(f"{today} 12:00:00")])
        assert [d.date for d in days] == [today]

    def test_skips_malformed_timestamps(self) -> None:
        samples = [
            _sample(""),
            _sample("2024-01-02"),
            _sample("not-a-date 12:00:00"),
            _sample("2024-01-02 xx:00:00"),
            _sample("2024-01-02 12:00:00", 7),
        ]
        days = bucketize(samples, today="2024-01-01")
        assert len(days) == 1
        assert days[0].representative_sample.temperature == 7

    def test_empty(self) -> None:
        assert bucketize([], today="2024-01-01") == []

    def test_days_are_not_synthetic(self) -> None:
        days = bucketize([_sample("2024-01-02 12:00:00")], today="2024-01-01")
        assert days[0].synthetic is False


class TestFillSlots:
    """Mapping days onto display slots."""

    def test_extra_days_discarded(self) -> None:
        assert fill_slots([1, 2, 3, 4, 5, 6], 5) == [1, 2, 3, 4, 5]

    def test_missing_days_left_empty(self) -> None:
        assert fill_slots([1, 2], 4) == [1, 2, None, None]

    def test_no_days(self) -> None:
        assert fill_slots([], 3) == [None, None, None]


class TestSyntheticForecast:
    """Fallback forecast derived from the current record."""

    def test_slot_count_and_dates(self) -> None:
        days = synthetic_forecast(
            WeatherRecord(temperature=15, humidity_pct=70), 5, random.Random(1), today=date(2024, 1, 30)
        )
        assert [d.date for d in days] == [
            "2024-01-30",
            "2024-01-31",
            "2024-02-01",
            "2024-02-02",
            "2024-02-03",
        ]
        assert all(d.synthetic for d in days)

    def test_variation_bounds(self) -> None:
        days = synthetic_forecast(WeatherRecord(temperature=15, humidity_pct=95), 50, random.Random(7))
        for day in days:
            sample = day.representative_sample
            assert sample.temperature is not None
            assert 11 <= sample.temperature <= 19
            assert sample.humidity_pct is not None
            assert 85 <= sample.humidity_pct <= 100

    def test_defaults_without_record(self) -> None:
        days = synthetic_forecast(None, 20, random.Random(3))
        for day in days:
            sample = day.representative_sample
            assert sample.temperature is not None
            assert 16 <= sample.temperature <= 24
            assert sample.humidity_pct is not None
            assert 50 <= sample.humidity_pct <= 70

    def test_humidity_clamped_at_zero(self) -> None:
        days = synthetic_forecast(WeatherRecord(temperature=10, humidity_pct=0), 30, random.Random(5))
        assert all(d.representative_sample.humidity_pct >= 0 for d in days)  # type: ignore[operator]

    def test_deterministic_with_seed(self) -> None:
        record = WeatherRecord(temperature=10, humidity_pct=50)
        a = synthetic_forecast(record, 3, random.Random(42), today=date(2024, 1, 1))
        b = synthetic_forecast(record, 3, random.Random(42), today=date(2024, 1, 1))
        assert a == b
