"""Angle and time scale primitives."""

from __future__ import annotations

from .angles import (
    clamp_unit,
    fold_declination,
    normalize_degrees,
    normalize_hours,
    signed_delta,
)
from .leap_seconds import (
    LeapSecondRecord,
    LeapSecondTable,
    default_table,
    load_table,
    parse_table,
)
from .time import (
    GPS_EPOCH,
    TAI_EPOCH,
    TimeScales,
    centuries_since_j2000,
    gps_time,
    international_atomic_time,
    julian_date,
    leap_second_correction,
    modified_julian_date,
    start_of_day,
    terrestrial_time,
    time_scales,
    to_utc,
    utc_from_julian_date,
)

__all__ = [
    "GPS_EPOCH",
    "LeapSecondRecord",
    "LeapSecondTable",
    "TAI_EPOCH",
    "TimeScales",
    "centuries_since_j2000",
    "clamp_unit",
    "default_table",
    "fold_declination",
    "gps_time",
    "international_atomic_time",
    "julian_date",
    "leap_second_correction",
    "load_table",
    "modified_julian_date",
    "normalize_degrees",
    "normalize_hours",
    "parse_table",
    "signed_delta",
    "start_of_day",
    "terrestrial_time",
    "time_scales",
    "to_utc",
    "utc_from_julian_date",
]
