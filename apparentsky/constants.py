"""Physical and model constants shared by the observability pipeline."""

from __future__ import annotations

from typing import Final

__all__ = [
    "ABERRATION_CONSTANT_ARCSEC",
    "DEFAULT_HORIZON_DEG",
    "DEFAULT_PRESSURE_PA",
    "DEFAULT_TEMPERATURE_K",
    "EARTH_ANGULAR_VELOCITY",
    "EARTH_RADIUS_M",
    "GALACTIC_NODE_LONGITUDE",
    "GALACTIC_POLE_DEC",
    "GALACTIC_POLE_RA",
    "J2000",
    "JULIAN_CENTURY_DAYS",
    "MAX_SEARCH_DAYS",
    "MJD_OFFSET",
    "SIDEREAL_RATE",
    "SPEED_OF_LIGHT",
    "TT_MINUS_TAI_SECONDS",
    "UNIX_EPOCH_JD",
]

#: Julian Date of the Unix epoch, 1970-01-01T00:00:00Z.
UNIX_EPOCH_JD: Final[float] = 2_440_587.5
#: Julian Date of the J2000.0 reference epoch.
J2000: Final[float] = 2_451_545.0
MJD_OFFSET: Final[float] = 2_400_000.5
JULIAN_CENTURY_DAYS: Final[float] = 36_525.0

TT_MINUS_TAI_SECONDS: Final[float] = 32.184

#: Ratio of a mean solar day to a sidereal day.
SIDEREAL_RATE: Final[float] = 1.002737909

#: Earth rotation rate in radians per second.
EARTH_ANGULAR_VELOCITY: Final[float] = 7.292115e-5
EARTH_RADIUS_M: Final[float] = 6.378e6
SPEED_OF_LIGHT: Final[float] = 299_792_458.0

ABERRATION_CONSTANT_ARCSEC: Final[float] = 20.49552

#: Equatorial position of the north galactic pole and the galactic
#: longitude of the ascending node of the galactic plane, J2000.0.
GALACTIC_POLE_RA: Final[float] = 192.8598
GALACTIC_POLE_DEC: Final[float] = 27.128027
GALACTIC_NODE_LONGITUDE: Final[float] = 32.9319

DEFAULT_HORIZON_DEG: Final[float] = 0.0
DEFAULT_TEMPERATURE_K: Final[float] = 283.15
DEFAULT_PRESSURE_PA: Final[float] = 101_325.0

#: Upper bound on the number of calendar days a rise/set search may step.
MAX_SEARCH_DAYS: Final[int] = 400
