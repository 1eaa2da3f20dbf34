"""apparentsky package bootstrap and curated public API surface."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

from .core.time import (
    centuries_since_j2000,
    gps_time,
    international_atomic_time,
    julian_date,
    leap_second_correction,
    modified_julian_date,
    terrestrial_time,
    to_utc,
)
from .exceptions import LeapSecondTableError, RiseSetSearchError
from .models import (
    ApparentPosition,
    EquatorialCoordinate,
    GalacticCoordinate,
    GeographicCoordinate,
    HorizontalCoordinate,
    MetConditions,
    Transit,
    TransitInstant,
    TransitParameters,
)
from .observational import (
    annual_aberration_correction,
    apparent_equatorial,
    correct_for_refraction,
    diurnal_aberration_correction,
    equatorial_to_horizontal,
    galactic_to_equatorial,
    greenwich_sidereal_time,
    hour_angle,
    is_above_horizon,
    is_circumpolar,
    is_visible,
    local_sidereal_time,
    next_rise,
    next_set,
    nutation_correction,
    observe,
    precession_correction,
    refraction,
    rise_set_gate,
    transit,
)

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("apparentsky")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the resolved apparentsky package version."""

    return __version__


__all__ = [
    "ApparentPosition",
    "EquatorialCoordinate",
    "GalacticCoordinate",
    "GeographicCoordinate",
    "HorizontalCoordinate",
    "LeapSecondTableError",
    "MetConditions",
    "RiseSetSearchError",
    "Transit",
    "TransitInstant",
    "TransitParameters",
    "__version__",
    "annual_aberration_correction",
    "apparent_equatorial",
    "centuries_since_j2000",
    "correct_for_refraction",
    "diurnal_aberration_correction",
    "equatorial_to_horizontal",
    "galactic_to_equatorial",
    "get_version",
    "gps_time",
    "greenwich_sidereal_time",
    "hour_angle",
    "international_atomic_time",
    "is_above_horizon",
    "is_circumpolar",
    "is_visible",
    "julian_date",
    "leap_second_correction",
    "local_sidereal_time",
    "modified_julian_date",
    "next_rise",
    "next_set",
    "nutation_correction",
    "observe",
    "precession_correction",
    "refraction",
    "rise_set_gate",
    "terrestrial_time",
    "to_utc",
    "transit",
]
