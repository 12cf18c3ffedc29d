"""Pydantic v2 models for flybrief."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from flybrief.measures import Temperature, WindSpeed


class DayPhase(str, Enum):
    """Position of a forecast hour relative to sunrise and sunset."""

    NIGHT = "night"
    TWILIGHT = "twilight"
    DAY = "day"


class FlyingSite(BaseModel):
    """A launch site and the wind window it works in."""

    name: str
    latitude: float
    longitude: float
    min_flyable_wind: WindSpeed
    max_flyable_wind: WindSpeed
    min_flyable_wind_degree: int = Field(ge=0, le=360)
    max_flyable_wind_degree: int = Field(ge=0, le=360)

    @model_validator(mode="after")
    def _validate_thresholds(self) -> FlyingSite:
        if self.min_flyable_wind > self.max_flyable_wind:
            raise ValueError(
                f"Site {self.name}: min_flyable_wind is above max_flyable_wind"
            )
        if self.min_flyable_wind_degree > self.max_flyable_wind_degree:
            raise ValueError(
                f"Site {self.name}: min_flyable_wind_degree is above max_flyable_wind_degree"
            )
        return self


class HourlyForecast(BaseModel):
    """Forecast for one hour at one site."""

    time: datetime
    day_phase: DayPhase
    temperature: Temperature
    feels_like: Temperature
    wind_speed: WindSpeed
    wind_direction_deg: int  # compass degrees [0, 360)
    precipitation_probability: float  # 0..1


class DayForecast(BaseModel):
    """One calendar day of forecast in the forecast's fixed UTC offset."""

    date: date
    sunrise: datetime
    sunset: datetime
    hourly: list[HourlyForecast] = Field(default_factory=list)


class FlyablePeriod(BaseModel):
    """A run of consecutive flyable hours with the extremes seen during it."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    duration_hours: int = 1
    wind_min: WindSpeed
    wind_max: WindSpeed
    wind_degree_min: int
    wind_degree_max: int
    temp_min: Temperature
    temp_max: Temperature

    @classmethod
    def from_hour(cls, hour: HourlyForecast) -> FlyablePeriod:
        return cls(
            start=hour.time,
            duration_hours=1,
            wind_min=hour.wind_speed,
            wind_max=hour.wind_speed,
            wind_degree_min=hour.wind_direction_deg,
            wind_degree_max=hour.wind_direction_deg,
            temp_min=hour.temperature,
            temp_max=hour.temperature,
        )

    @property
    def end(self) -> datetime:
        """First instant after the period."""
        return self.start + timedelta(hours=self.duration_hours)

    def is_next_hour(self, hour: HourlyForecast) -> bool:
        """True if ``hour`` starts exactly where this period ends."""
        return self.end == hour.time

    def extend(self, hour: HourlyForecast) -> FlyablePeriod:
        """Return a copy of this period lengthened by ``hour``."""
        return self.model_copy(
            update={
                "duration_hours": self.duration_hours + 1,
                "wind_min": min(self.wind_min, hour.wind_speed),
                "wind_max": max(self.wind_max, hour.wind_speed),
                "wind_degree_min": min(self.wind_degree_min, hour.wind_direction_deg),
                "wind_degree_max": max(self.wind_degree_max, hour.wind_direction_deg),
                "temp_min": min(self.temp_min, hour.temperature),
                "temp_max": max(self.temp_max, hour.temperature),
            }
        )


class SiteReport(BaseModel):
    """Tomorrow's flyable periods for one site."""

    site: FlyingSite
    periods: list[FlyablePeriod] = Field(min_length=1)
