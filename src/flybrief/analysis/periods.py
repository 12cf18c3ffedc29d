"""Merge flyable hours into contiguous periods."""

from __future__ import annotations

from typing import Iterable

from flybrief.models import FlyablePeriod, HourlyForecast


def merge_periods(hours: Iterable[HourlyForecast]) -> list[FlyablePeriod]:
    """Group time-ascending flyable hours into maximal runs without gaps.

    An hour extends the open period only when it starts exactly where that
    period ends; anything else closes the period and opens a new one.
    """
    periods: list[FlyablePeriod] = []
    current: FlyablePeriod | None = None

    for hour in hours:
        if current is None:
            current = FlyablePeriod.from_hour(hour)
        elif current.is_next_hour(hour):
            current = current.extend(hour)
        else:
            periods.append(current)
            current = FlyablePeriod.from_hour(hour)

    if current is not None:
        periods.append(current)
    return periods
