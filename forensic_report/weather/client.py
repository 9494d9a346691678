"""
Historical Weather Client
=========================

Looks up observed weather for the date and location of a loss using the
WeatherAPI.com history endpoint, and reduces the response to the handful
of values a meteorologist section needs.

Weather data is optional: any failure here is reported back as
{"success": False, "error": ...} and the report section is written
without it.
"""

import json
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Dict, Optional

from ..config import ReportConfig, config as default_config
from ..utils.logger import logger
from ..utils.sanitize import iso_date, safe_parse_date


class WeatherAPIError(Exception):
    """Raised when the weather service answers with an error status."""
    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(f"Weather API error: {status_code} {message}".strip())


def _fmt(value: Any) -> str:
    """Render numbers without a trailing .0 so 75.0 reads as 75."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _contains(text: str, word: str) -> str:
    return "Yes" if word in text.lower() else "No"


def summarize_day(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Reduce a history.json response to report-ready values.

    Args:
        payload: Decoded response with forecast.forecastday[0].day/hour

    Returns:
        Dict of formatted temperature, wind, precipitation and condition values

    Raises:
        KeyError, IndexError, TypeError, ValueError: malformed payload
    """
    forecast_day = payload["forecast"]["forecastday"][0]
    day = forecast_day["day"]
    hours = forecast_day["hour"]

    gusts = [hour["gust_mph"] for hour in hours]
    max_gust = max(gusts)
    max_gust_time = next(
        (hour.get("time") for hour in hours if hour["gust_mph"] == max_gust),
        None,
    ) or "N/A"

    conditions = day["condition"]["text"]

    return {
        "maxTemp": f"{_fmt(day['maxtemp_f'])}°F",
        "minTemp": f"{_fmt(day['mintemp_f'])}°F",
        "avgTemp": f"{_fmt(day['avgtemp_f'])}°F",
        "maxWindGust": f"{_fmt(max_gust)} mph",
        "maxWindTime": max_gust_time,
        "totalPrecip": f"{_fmt(day['totalprecip_in'])} inches",
        "humidity": f"{_fmt(day['avghumidity'])}%",
        "conditions": conditions,
        "hailPossible": _contains(conditions, "hail"),
        "thunderstorm": _contains(conditions, "thunder"),
    }


def _fetch_history(location: str, date: str, cfg: ReportConfig) -> Dict[str, Any]:
    query = urllib.parse.urlencode({
        "key": cfg.weather_api_key,
        "q": location,
        "dt": date,
    })
    url = f"{cfg.weather_api_url}?{query}"

    logger.info(f"Fetching historical weather: location={location}, date={date}")

    req = urllib.request.Request(url, headers={"User-Agent": "ForensicReportGenerator/1.0"})
    try:
        with urllib.request.urlopen(req, timeout=cfg.weather_timeout_seconds) as response:
            return json.loads(response.read().decode("utf-8"))
    except urllib.error.HTTPError as e:
        error_body = e.read().decode("utf-8", errors="replace")
        raise WeatherAPIError(e.code, error_body)


def get_weather_data(
    location: Optional[str],
    date_string: Optional[str],
    config: Optional[ReportConfig] = None,
) -> Dict[str, Any]:
    """
    Fetch summarized historical weather for a location and date.

    Missing location, missing date or an unparseable date skip the lookup
    and return an empty (successful) result.

    Returns:
        {"success": True, "data": {...}} or {"success": False, "error": "..."}
    """
    cfg = config or default_config

    try:
        if not location or not date_string:
            return {"success": True, "data": {}}

        parsed = safe_parse_date(date_string)
        if parsed is None:
            return {"success": True, "data": {}}

        payload = _fetch_history(location, iso_date(parsed), cfg)
        data = summarize_day(payload)

        logger.info(
            f"Weather fetched: conditions={data['conditions']}, "
            f"max gust={data['maxWindGust']} at {data['maxWindTime']}"
        )
        return {"success": True, "data": data}

    except Exception as e:
        logger.warning(f"Weather API error: {e}")
        return {"success": False, "error": str(e)}
