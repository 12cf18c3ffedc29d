"""OpenWeatherMap One Call client for hourly site forecasts."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone

import requests

from flybrief.analysis.daylight import classify_day_phase
from flybrief.measures import Temperature, WindSpeed
from flybrief.models import DayForecast, HourlyForecast

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://api.openweathermap.org/data/2.5/onecall"


class OpenWeatherMapClient:
    """Client for fetching forecasts from the OpenWeatherMap One Call API."""

    def __init__(self, url: str, app_id: str, timeout: int = 30):
        self.url = url
        self.app_id = app_id
        self.timeout = timeout
        self.session = requests.Session()

    def get_forecast(self, lat: float, lon: float) -> list[DayForecast]:
        """Fetch and parse the forecast for a location.

        Returns one DayForecast per local calendar day that has hourly data,
        sorted by date. Times carry the location's fixed UTC offset.

        Raises:
            requests.RequestException: On transport or HTTP status errors.
            ValueError: If the body is not valid JSON.
        """
        params = {
            "lat": lat,
            "lon": lon,
            "appid": self.app_id,
            "exclude": "current,minutely,alerts",
            "units": "metric",
        }

        logger.info("Fetching forecast for %.4f,%.4f", lat, lon)

        resp = self.session.get(self.url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        return parse_forecast(resp.json())


def parse_forecast(data: dict) -> list[DayForecast]:
    """Build per-day forecasts from a One Call response body."""
    tz = timezone(timedelta(seconds=data.get("timezone_offset", 0)))

    days: dict[date, DayForecast] = {}
    for daily in data.get("daily", []):
        day_date = datetime.fromtimestamp(daily["dt"], tz).date()
        days[day_date] = DayForecast(
            date=day_date,
            sunrise=datetime.fromtimestamp(daily["sunrise"], tz),
            sunset=datetime.fromtimestamp(daily["sunset"], tz),
        )

    for hourly in data.get("hourly", []):
        time = datetime.fromtimestamp(hourly["dt"], tz)
        day = days.get(time.date())
        if day is None:
            logger.debug("No daily entry for hour %s, skipping", time.isoformat())
            continue
        day.hourly.append(_parse_hourly(hourly, time, day))

    result = [d for d in days.values() if d.hourly]
    for day in result:
        day.hourly.sort(key=lambda h: h.time)
    result.sort(key=lambda d: d.date)
    return result


def _parse_hourly(hourly: dict, time: datetime, day: DayForecast) -> HourlyForecast:
    """Parse one hourly entry; units=metric gives Celsius and m/s."""
    return HourlyForecast(
        time=time,
        day_phase=classify_day_phase(time, day.sunrise, day.sunset),
        temperature=Temperature.from_celsius(hourly["temp"]),
        feels_like=Temperature.from_celsius(hourly["feels_like"]),
        wind_speed=WindSpeed.from_mps(hourly["wind_speed"]),
        wind_direction_deg=hourly["wind_deg"],
        precipitation_probability=hourly.get("pop", 0.0),
    )
