"""Tests for the OpenWeather datasource."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest

from weather_explorer.datasources.openweather import (
    OPENWEATHER_BASE,
    WeatherApiError,
    fetch_current_weather,
    fetch_forecast,
)


def _response(ok: bool = True, status: int = 200, reason: str = "OK", body: object = None) -> Mock:
    resp = Mock()
    resp.ok = ok
    resp.status_code = status
    resp.reason = reason
    resp.json.return_value = body if body is not None else {}
    return resp


class TestFetchCurrentWeather:
    """Current weather endpoint."""

    @patch("weather_explorer.datasources.openweather.client.session.get")
    def test_request_params(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(body={"main": {"temp": 15}})

        result = fetch_current_weather("Seattle", api_key="k3y")

        assert result == {"main": {"temp": 15}}
        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        assert args[0] == f"{OPENWEATHER_BASE}/weather"
        assert kwargs["params"] == {"q": "Seattle", "appid": "k3y", "units": "metric"}
        assert "timeout" not in kwargs

    @patch("weather_explorer.datasources.openweather.client.session.get")
    def test_custom_base_url_and_timeout(self, mock_get: Mock) -> None:
        mock_get.return_value = _response()

        fetch_current_weather("Tokyo", api_key="k", base_url="http://proxy.local/api/", timeout=3)

        args, kwargs = mock_get.call_args
        assert args[0] == "http://proxy.local/api/weather"
        assert kwargs["timeout"] == 3

    @patch("weather_explorer.datasources.openweather.client.session.get")
    def test_non_2xx_raises(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(ok=False, status=404, reason="Not Found")

        with pytest.raises(WeatherApiError) as excinfo:
            fetch_current_weather("Atlantis", api_key="secret")

        assert str(excinfo.value) == "Current weather error: 404 Not Found"
        assert excinfo.value.status_code == 404
        assert "secret" not in str(excinfo.value)


class TestFetchForecast:
    """Forecast endpoint."""

    @patch("weather_explorer.datasources.openweather.client.session.get")
    def test_request_params(self, mock_get: Mock) -> None:
        body = {"list": [{"dt_txt": "2024-01-01 12:00:00"}]}
        mock_get.return_value = _response(body=body)

        result = fetch_forecast("Seattle", api_key="k")

        assert result == body
        args, kwargs = mock_get.call_args
        assert args[0] == f"{OPENWEATHER_BASE}/forecast"
        assert kwargs["params"]["units"] == "metric"

    @patch("weather_explorer.datasources.openweather.client.session.get")
    def test_non_2xx_raises(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(ok=False, status=401, reason="Unauthorized")

        with pytest.raises(WeatherApiError, match="Forecast error: 401 Unauthorized"):
            fetch_forecast("Seattle", api_key="bad")
