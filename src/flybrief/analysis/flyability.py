"""Per-hour flyability check against a site's thresholds."""

from __future__ import annotations

import logging

from flybrief.models import DayForecast, DayPhase, FlyingSite, HourlyForecast

logger = logging.getLogger(__name__)

MAX_PRECIPITATION_PROBABILITY = 0.3


def is_flyable(site: FlyingSite, hour: HourlyForecast) -> bool:
    """True if every condition of the site holds during ``hour``.

    Requires daylight, a precipitation probability of at most 30%, and wind
    speed and direction inside the site's inclusive ranges.
    """
    if hour.precipitation_probability > MAX_PRECIPITATION_PROBABILITY:
        return False
    if hour.day_phase is not DayPhase.DAY:
        return False
    if not (
        site.min_flyable_wind_degree
        <= hour.wind_direction_deg
        <= site.max_flyable_wind_degree
    ):
        return False
    return site.min_flyable_wind <= hour.wind_speed <= site.max_flyable_wind


def flyable_hours(site: FlyingSite, day: DayForecast) -> list[HourlyForecast]:
    """Hours of ``day`` that pass :func:`is_flyable`, in time order."""
    hours = [h for h in day.hourly if is_flyable(site, h)]
    logger.debug(
        "%s: %d of %d hours flyable on %s",
        site.name, len(hours), len(day.hourly), day.date.isoformat(),
    )
    return hours
