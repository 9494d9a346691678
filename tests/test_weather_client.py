"""
Unit tests for the historical weather client
"""

import io
import json
import urllib.error
import urllib.parse
from unittest.mock import patch, MagicMock

import pytest

from forensic_report.config import ReportConfig
from forensic_report.weather.client import get_weather_data, summarize_day


def _history_payload(condition="Moderate or heavy rain with thunder", gusts=(12.5, 40.0, 66.7, 66.7)):
    hours = [
        {"time": f"2014-03-28 {i:02d}:00", "gust_mph": gust}
        for i, gust in enumerate(gusts)
    ]
    return {
        "forecast": {
            "forecastday": [{
                "day": {
                    "maxtemp_f": 75.0,
                    "mintemp_f": 55.4,
                    "avgtemp_f": 64.2,
                    "totalprecip_in": 1.2,
                    "avghumidity": 81,
                    "condition": {"text": condition},
                },
                "hour": hours,
            }]
        }
    }


def _mock_urlopen_response(mock_urlopen, payload):
    response = MagicMock()
    response.read.return_value = json.dumps(payload).encode("utf-8")
    mock_urlopen.return_value.__enter__.return_value = response


@pytest.fixture
def cfg():
    return ReportConfig(
        openai_api_key="sk-test",
        weather_api_key="wx-key",
        llm_provider="openai",
    )


class TestSummarizeDay:
    """Test cases for reducing a history response."""

    def test_summary_values(self):
        data = summarize_day(_history_payload())

        assert data["maxTemp"] == "75°F"
        assert data["minTemp"] == "55.4°F"
        assert data["avgTemp"] == "64.2°F"
        assert data["maxWindGust"] == "66.7 mph"
        assert data["totalPrecip"] == "1.2 inches"
        assert data["humidity"] == "81%"
        assert data["conditions"] == "Moderate or heavy rain with thunder"
        assert data["thunderstorm"] == "Yes"
        assert data["hailPossible"] == "No"

    def test_max_gust_time_is_first_matching_hour(self):
        data = summarize_day(_history_payload())
        assert data["maxWindTime"] == "2014-03-28 02:00"

    def test_hail_detection_is_case_insensitive(self):
        data = summarize_day(_history_payload(condition="HAIL showers"))

        assert data["hailPossible"] == "Yes"
        assert data["thunderstorm"] == "No"

    def test_missing_time_reports_na(self):
        payload = _history_payload(gusts=(10.0,))
        del payload["forecast"]["forecastday"][0]["hour"][0]["time"]

        assert summarize_day(payload)["maxWindTime"] == "N/A"

    def test_empty_hours_is_an_error(self):
        with pytest.raises(ValueError):
            summarize_day(_history_payload(gusts=()))


class TestGetWeatherData:
    """Test cases for get_weather_data."""

    @patch("forensic_report.weather.client.urllib.request.urlopen")
    @pytest.mark.parametrize("location,date", [
        (None, "2014-03-28"),
        ("", "2014-03-28"),
        ("Killeen, TX", None),
        ("Killeen, TX", "sometime last spring"),
    ])
    def test_skipped_without_location_or_date(self, mock_urlopen, location, date, cfg):
        result = get_weather_data(location, date, config=cfg)

        assert result == {"success": True, "data": {}}
        mock_urlopen.assert_not_called()

    @patch("forensic_report.weather.client.logger")
    @patch("forensic_report.weather.client.urllib.request.urlopen")
    def test_successful_lookup(self, mock_urlopen, mock_logger, cfg):
        _mock_urlopen_response(mock_urlopen, _history_payload())

        result = get_weather_data("Killeen, TX", "March 28, 2014", config=cfg)

        assert result["success"] is True
        assert result["data"]["maxWindGust"] == "66.7 mph"

        request = mock_urlopen.call_args[0][0]
        query = urllib.parse.parse_qs(urllib.parse.urlparse(request.full_url).query)
        assert query == {"key": ["wx-key"], "q": ["Killeen, TX"], "dt": ["2014-03-28"]}
        assert request.full_url.startswith("http://api.weatherapi.com/v1/history.json?")
        assert mock_urlopen.call_args[1]["timeout"] == cfg.weather_timeout_seconds

    @patch("forensic_report.weather.client.logger")
    @patch("forensic_report.weather.client.urllib.request.urlopen")
    def test_network_error_degrades(self, mock_urlopen, mock_logger, cfg):
        mock_urlopen.side_effect = urllib.error.URLError("connection refused")

        result = get_weather_data("Killeen, TX", "2014-03-28", config=cfg)

        assert result["success"] is False
        assert "connection refused" in result["error"]
        mock_logger.warning.assert_called_once()

    @patch("forensic_report.weather.client.logger")
    @patch("forensic_report.weather.client.urllib.request.urlopen")
    def test_http_error_degrades(self, mock_urlopen, mock_logger, cfg):
        mock_urlopen.side_effect = urllib.error.HTTPError(
            cfg.weather_api_url, 401, "Unauthorized", {}, io.BytesIO(b'{"error": "bad key"}')
        )

        result = get_weather_data("Killeen, TX", "2014-03-28", config=cfg)

        assert result["success"] is False
        assert "401" in result["error"]

    @patch("forensic_report.weather.client.logger")
    @patch("forensic_report.weather.client.urllib.request.urlopen")
    def test_malformed_response_degrades(self, mock_urlopen, mock_logger, cfg):
        _mock_urlopen_response(mock_urlopen, {"location": {"name": "Killeen"}})

        result = get_weather_data("Killeen, TX", "2014-03-28", config=cfg)

        assert result["success"] is False
        assert "error" in result
