"""Shared test fixtures."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from flybrief.measures import Temperature, WindSpeed
from flybrief.models import DayForecast, DayPhase, FlyingSite, HourlyForecast

TZ = timezone(timedelta(hours=5))


@pytest.fixture
def sample_site():
    return FlyingSite(
        name="Chimgan",
        latitude=41.55,
        longitude=70.01,
        min_flyable_wind=WindSpeed.from_mps(2.0),
        max_flyable_wind=WindSpeed.from_mps(8.0),
        min_flyable_wind_degree=180,
        max_flyable_wind_degree=270,
    )


@pytest.fixture
def make_hour():
    """Factory for a flyable-by-default forecast hour on 2026-10-20 (+05:00)."""

    def _make(
        hour: int,
        minute: int = 0,
        wind_mps: float = 4.0,
        wind_deg: int = 200,
        temp_c: float = 15.0,
        pop: float = 0.1,
        phase: DayPhase = DayPhase.DAY,
    ) -> HourlyForecast:
        return HourlyForecast(
            time=datetime(2026, 10, 20, hour, minute, tzinfo=TZ),
            day_phase=phase,
            temperature=Temperature.from_celsius(temp_c),
            feels_like=Temperature.from_celsius(temp_c - 1),
            wind_speed=WindSpeed.from_mps(wind_mps),
            wind_direction_deg=wind_deg,
            precipitation_probability=pop,
        )

    return _make


@pytest.fixture
def sample_day(make_hour):
    """Tomorrow (relative to 2026-10-19 12:00 +05:00) with a gap at 11:00."""
    return DayForecast(
        date=date(2026, 10, 20),
        sunrise=datetime(2026, 10, 20, 6, 40, tzinfo=TZ),
        sunset=datetime(2026, 10, 20, 17, 50, tzinfo=TZ),
        hourly=[
            make_hour(6, phase=DayPhase.NIGHT),
            make_hour(8, wind_mps=3.0, temp_c=12.0),
            make_hour(9, wind_mps=5.0, wind_deg=220, temp_c=14.0),
            make_hour(10, wind_mps=4.0, wind_deg=190, temp_c=16.0),
            make_hour(11, pop=0.6),
            make_hour(12, wind_mps=6.0, wind_deg=250, temp_c=18.0),
            make_hour(13, wind_mps=7.0, wind_deg=260, temp_c=19.0),
            make_hour(14, wind_mps=12.0),
        ],
    )


@pytest.fixture
def now():
    """Reference run time: noon on the day before the sample day."""
    return datetime(2026, 10, 19, 12, 0, tzinfo=TZ)
