"""Day / twilight / night classification of forecast hours."""

from __future__ import annotations

from datetime import datetime, timedelta

from flybrief.models import DayPhase

HOUR = timedelta(hours=1)

# Sun event this close to the hour start snaps to the phase after it
NIGHT_SNAP = timedelta(minutes=14)
# Sun event before this point (and after NIGHT_SNAP) makes the hour twilight
TWILIGHT_LIMIT = timedelta(minutes=45)


def classify_day_phase(
    time: datetime, sunrise: datetime, sunset: datetime
) -> DayPhase:
    """Classify the hour window [time, time + 1h) against sunrise and sunset.

    An hour fully between sunrise and sunset is day, an hour fully outside
    them is night. An hour containing a sun event is labelled by how far into
    the hour the event falls:

        sunset  < +14 min -> night, < +45 min -> twilight, else day
        sunrise < +14 min -> day,   < +45 min -> twilight, else night

    All three datetimes must share the same offset (or all be naive).
    """
    end_hour = time + HOUR

    if sunset >= end_hour and sunrise < time:
        return DayPhase.DAY
    if sunrise >= end_hour or sunset < time:
        return DayPhase.NIGHT

    if sunset < end_hour:
        if sunset < time + NIGHT_SNAP:
            return DayPhase.NIGHT
        if sunset < time + TWILIGHT_LIMIT:
            return DayPhase.TWILIGHT
        return DayPhase.DAY

    if sunrise < time + NIGHT_SNAP:
        return DayPhase.DAY
    if sunrise < time + TWILIGHT_LIMIT:
        return DayPhase.TWILIGHT
    return DayPhase.NIGHT
