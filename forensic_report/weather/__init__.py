from .client import get_weather_data, summarize_day, WeatherAPIError

__all__ = ["get_weather_data", "summarize_day", "WeatherAPIError"]
