"""Sidereal time and its inversion back to civil time."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from ..constants import J2000, JULIAN_CENTURY_DAYS, SIDEREAL_RATE
from ..core.angles import normalize_degrees, normalize_hours
from ..core.time import julian_date, start_of_day, to_utc

__all__ = [
    "greenwich_from_local_sidereal",
    "greenwich_sidereal_time",
    "hour_angle",
    "local_sidereal_time",
    "universal_time_from_greenwich_sidereal",
]


def _sidereal_time_at_midnight(moment: datetime) -> float:
    jd = julian_date(moment)
    jd0 = math.floor(jd - 0.5) + 0.5
    T = (jd0 - J2000) / JULIAN_CENTURY_DAYS
    return normalize_hours(6.697374558 + 2400.051336 * T + 0.000025862 * T**2)


def greenwich_sidereal_time(moment: datetime) -> float:
    """Return Greenwich sidereal time in hours ``[0, 24)``."""

    utc_moment = to_utc(moment)
    ut_hours = (
        utc_moment.hour
        + utc_moment.minute / 60.0
        + utc_moment.second / 3600.0
        + utc_moment.microsecond / 3.6e9
    )
    return normalize_hours(
        _sidereal_time_at_midnight(utc_moment) + ut_hours * SIDEREAL_RATE
    )


def local_sidereal_time(moment: datetime, longitude: float) -> float:
    """Return local sidereal time in hours for an east-positive ``longitude``."""

    return normalize_hours(greenwich_sidereal_time(moment) + longitude / 15.0)


def hour_angle(moment: datetime, longitude: float, ra: float) -> float:
    """Return the hour angle of right ascension ``ra`` in degrees ``[0, 360)``."""

    return normalize_degrees(local_sidereal_time(moment, longitude) * 15.0 - ra)


def greenwich_from_local_sidereal(lst: float, longitude: float) -> float:
    """Return the Greenwich sidereal time matching local sidereal time ``lst``."""

    return normalize_hours(lst - longitude / 15.0)


def universal_time_from_greenwich_sidereal(gst: float, day: datetime) -> datetime:
    """Return the first UTC instant on the calendar ``day`` with sidereal time ``gst``.

    A sidereal day is slightly shorter than a solar one, so a given
    sidereal time recurs about four minutes earlier each day and,
    for a few minutes each day, twice on the same date.  Only the first
    occurrence after UTC midnight is returned.
    """

    midnight = start_of_day(day)
    elapsed = normalize_hours(gst - _sidereal_time_at_midnight(midnight))
    return midnight + timedelta(hours=elapsed / SIDEREAL_RATE)
