"""Time scale helpers used across apparentsky.

Every downstream formula takes its independent variable from this
module.  Inputs are never assumed to be UTC: each public helper first
normalises the ``datetime`` through :func:`to_utc`, treating naive values
as UTC and converting aware ones.  Julian dates are derived directly from
the POSIX timestamp so that the conversion is exact for any instant the
``datetime`` type can represent.

Atomic scales (TAI, TT and GPS) depend on the leap second table provided
by :mod:`apparentsky.core.leap_seconds`.  The table is injectable so tests
and callers with fresher data can substitute their own.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Final

from ..constants import (
    J2000,
    JULIAN_CENTURY_DAYS,
    MJD_OFFSET,
    TT_MINUS_TAI_SECONDS,
    UNIX_EPOCH_JD,
)
from .leap_seconds import LeapSecondTable, default_table

__all__ = [
    "GPS_EPOCH",
    "SECONDS_PER_DAY",
    "TAI_EPOCH",
    "TimeScales",
    "centuries_since_j2000",
    "gps_time",
    "international_atomic_time",
    "julian_date",
    "leap_second_correction",
    "modified_julian_date",
    "start_of_day",
    "terrestrial_time",
    "time_scales",
    "to_utc",
    "utc_from_julian_date",
]


SECONDS_PER_DAY: Final[float] = 86_400.0

#: Origin of the leap-second-corrected TAI-UTC offset.
TAI_EPOCH: Final[_dt.datetime] = _dt.datetime(1972, 1, 1, tzinfo=_dt.UTC)
#: Origin of GPS time.
GPS_EPOCH: Final[_dt.datetime] = _dt.datetime(1980, 1, 6, tzinfo=_dt.UTC)

_UNIX_EPOCH: Final[_dt.datetime] = _dt.datetime(1970, 1, 1, tzinfo=_dt.UTC)


@dataclass(frozen=True)
class TimeScales:
    """One instant expressed on every supported time scale."""

    utc: _dt.datetime
    jd: float
    mjd: float
    centuries: float
    tai: _dt.datetime
    tt: _dt.datetime
    gps: _dt.datetime


def to_utc(moment: _dt.datetime) -> _dt.datetime:
    """Return ``moment`` converted to UTC."""

    tzinfo = moment.tzinfo
    if tzinfo is None:
        return moment.replace(tzinfo=_dt.UTC)
    return moment.astimezone(_dt.UTC)


def start_of_day(moment: _dt.datetime) -> _dt.datetime:
    """Return UTC midnight of the calendar day containing ``moment``."""

    return to_utc(moment).replace(hour=0, minute=0, second=0, microsecond=0)


def julian_date(moment: _dt.datetime) -> float:
    """Return the Julian Date of ``moment``."""

    return to_utc(moment).timestamp() / SECONDS_PER_DAY + UNIX_EPOCH_JD


def modified_julian_date(moment: _dt.datetime) -> float:
    """Return the Modified Julian Date of ``moment``."""

    return julian_date(moment) - MJD_OFFSET


def centuries_since_j2000(moment: _dt.datetime) -> float:
    """Return Julian centuries elapsed between J2000.0 and ``moment``."""

    return (julian_date(moment) - J2000) / JULIAN_CENTURY_DAYS


def utc_from_julian_date(jd: float) -> _dt.datetime:
    """Return the UTC ``datetime`` corresponding to Julian Date ``jd``."""

    seconds = (jd - UNIX_EPOCH_JD) * SECONDS_PER_DAY
    return _UNIX_EPOCH + _dt.timedelta(seconds=seconds)


def leap_second_correction(
    moment: _dt.datetime,
    epoch_zero: _dt.datetime,
    table: LeapSecondTable | None = None,
) -> int:
    """Return leap seconds accumulated between ``epoch_zero`` and ``moment``.

    The table is scanned in order.  Entries preceding ``epoch_zero`` set
    the baseline count for the scale's origin, and the scan stops at the
    first entry whose transition lies after ``moment``.  Instants before
    the first tabulated leap second yield ``0``, as do instants that precede
    ``epoch_zero`` itself.
    """

    records = table if table is not None else default_table()
    instant = to_utc(moment).timestamp()
    origin = to_utc(epoch_zero).timestamp()
    if instant < origin:
        return 0

    correction = 0
    dtai = 0
    for record in records:
        if origin > record.unix:
            correction = record.dtai
        if instant >= record.unix:
            dtai = record.dtai
        else:
            break
    return dtai - correction


def _offset_scale(
    moment: _dt.datetime,
    epoch_zero: _dt.datetime,
    table: LeapSecondTable | None,
) -> _dt.datetime:
    utc_moment = to_utc(moment)
    seconds = leap_second_correction(utc_moment, epoch_zero, table)
    return utc_moment + _dt.timedelta(seconds=seconds)


def international_atomic_time(
    moment: _dt.datetime, table: LeapSecondTable | None = None
) -> _dt.datetime:
    """Return International Atomic Time for ``moment``.

    The result is expressed as a UTC-labelled ``datetime`` shifted by the
    leap seconds in force; instants before 1972 are returned unchanged.
    """

    return _offset_scale(moment, TAI_EPOCH, table)


def terrestrial_time(
    moment: _dt.datetime, table: LeapSecondTable | None = None
) -> _dt.datetime:
    """Return Terrestrial Time, ``TAI + 32.184 s``."""

    tai = international_atomic_time(moment, table)
    return tai + _dt.timedelta(seconds=TT_MINUS_TAI_SECONDS)


def gps_time(
    moment: _dt.datetime, table: LeapSecondTable | None = None
) -> _dt.datetime:
    """Return GPS time for ``moment``; instants before 1980-01-06 pass through."""

    return _offset_scale(moment, GPS_EPOCH, table)


def time_scales(
    moment: _dt.datetime, table: LeapSecondTable | None = None
) -> TimeScales:
    """Return ``moment`` on every time scale in one container."""

    utc_moment = to_utc(moment)
    jd = julian_date(utc_moment)
    return TimeScales(
        utc=utc_moment,
        jd=jd,
        mjd=jd - MJD_OFFSET,
        centuries=(jd - J2000) / JULIAN_CENTURY_DAYS,
        tai=international_atomic_time(utc_moment, table),
        tt=terrestrial_time(utc_moment, table),
        gps=gps_time(utc_moment, table),
    )
