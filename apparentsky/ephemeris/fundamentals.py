"""Fundamental arguments of the Sun, Moon and Earth orbit.

These low order series provide the handful of angles the correction
chain depends on: mean longitudes, mean anomaly, the lunar ascending
node, orbital eccentricity and the obliquity of the ecliptic.  Full
planetary and lunar theories are outside the scope of apparentsky and
are consumed through
:data:`apparentsky.models.EquatorialSource` callables instead.

All angles are returned in degrees.  Functions accept any ``datetime``;
naive values are interpreted as UTC.
"""

from __future__ import annotations

import math
from datetime import datetime

from ..constants import (
    GALACTIC_NODE_LONGITUDE,
    GALACTIC_POLE_DEC,
    GALACTIC_POLE_RA,
    J2000,
)
from ..core.angles import clamp_unit, normalize_degrees
from ..core.time import centuries_since_j2000, julian_date
from ..models import EclipticCoordinate, EquatorialCoordinate, GalacticCoordinate

__all__ = [
    "earth_orbit_eccentricity",
    "ecliptic_to_equatorial",
    "galactic_to_equatorial",
    "longitude_of_perihelion",
    "lunar_ascending_node",
    "lunar_mean_longitude",
    "mean_obliquity",
    "solar_ecliptic_coordinate",
    "solar_equation_of_center",
    "solar_equatorial_coordinate",
    "solar_mean_anomaly",
    "solar_mean_longitude",
    "solar_true_longitude",
]


def solar_mean_anomaly(moment: datetime) -> float:
    """Return the Sun's mean anomaly ``M``."""

    T = centuries_since_j2000(moment)
    return normalize_degrees(357.52911 + 35999.05029 * T - 0.0001537 * T**2)


def solar_mean_longitude(moment: datetime) -> float:
    """Return the Sun's geometric mean longitude ``L0``."""

    T = centuries_since_j2000(moment)
    return normalize_degrees(280.46646 + 36000.76983 * T + 0.0003032 * T**2)


def solar_equation_of_center(moment: datetime) -> float:
    """Return the equation of centre ``C`` of the solar orbit."""

    T = centuries_since_j2000(moment)
    M = math.radians(solar_mean_anomaly(moment))
    return (
        (1.914602 - 0.004817 * T - 0.000014 * T**2) * math.sin(M)
        + (0.019993 - 0.000101 * T) * math.sin(2 * M)
        + 0.000289 * math.sin(3 * M)
    )


def solar_true_longitude(moment: datetime) -> float:
    """Return the Sun's true geometric longitude ``L0 + C``."""

    return normalize_degrees(
        solar_mean_longitude(moment) + solar_equation_of_center(moment)
    )


def lunar_mean_longitude(moment: datetime) -> float:
    """Return the Moon's mean geometric longitude."""

    T = centuries_since_j2000(moment)
    return normalize_degrees(
        218.3164477
        + 481267.88123421 * T
        - 0.0015786 * T**2
        + T**3 / 538841.0
        - T**4 / 65194000.0
    )


def lunar_ascending_node(moment: datetime) -> float:
    """Return the longitude of the Moon's mean ascending node ``Ω``.

    The daily rate is applied from J2000.0 and the result carries the
    small annual term driven by the solar mean anomaly.
    """

    d = julian_date(moment) - J2000
    node = normalize_degrees(125.044522 - 0.0529539 * d)
    M = math.radians(solar_mean_anomaly(moment))
    return node - 0.16 * math.sin(M)


def earth_orbit_eccentricity(moment: datetime) -> float:
    """Return the (dimensionless) eccentricity of the Earth's orbit."""

    T = centuries_since_j2000(moment)
    return 0.0167086342 - 0.000042037 * T - 0.0000001267 * T**2


def longitude_of_perihelion(moment: datetime) -> float:
    """Return the longitude of perihelion of the Earth's orbit ``ϖ``."""

    T = centuries_since_j2000(moment)
    return 102.93735 + 1.71953 * T + 0.00046 * T**2


def mean_obliquity(moment: datetime) -> float:
    """Return the mean obliquity of the ecliptic ``ε0``."""

    T = centuries_since_j2000(moment)
    return 23.439292 - (46.845 * T + 0.00059 * T**2 + 0.001813 * T**3) / 3600.0


def ecliptic_to_equatorial(
    coordinate: EclipticCoordinate, obliquity: float
) -> EquatorialCoordinate:
    """Rotate an ecliptic coordinate into the equatorial frame."""

    lam = math.radians(coordinate.longitude)
    beta = math.radians(coordinate.latitude)
    eps = math.radians(obliquity)

    sin_dec = math.sin(beta) * math.cos(eps) + math.cos(beta) * math.sin(
        eps
    ) * math.sin(lam)
    dec = math.asin(clamp_unit(sin_dec))

    y = math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps)
    x = math.cos(lam)
    ra = math.atan2(y, x)
    return EquatorialCoordinate(
        ra=normalize_degrees(math.degrees(ra)), dec=math.degrees(dec)
    )


def galactic_to_equatorial(coordinate: GalacticCoordinate) -> EquatorialCoordinate:
    """Return the J2000.0 equatorial position of a galactic coordinate."""

    b = math.radians(coordinate.b)
    dl = math.radians(coordinate.l - GALACTIC_NODE_LONGITUDE)
    pole_dec = math.radians(GALACTIC_POLE_DEC)

    sin_dec = math.cos(b) * math.cos(pole_dec) * math.sin(dl) + math.sin(b) * math.sin(
        pole_dec
    )
    dec = math.asin(clamp_unit(sin_dec))

    y = math.cos(b) * math.cos(dl)
    x = math.sin(b) * math.cos(pole_dec) - math.cos(b) * math.sin(pole_dec) * math.sin(dl)
    ra = math.degrees(math.atan2(y, x)) + GALACTIC_POLE_RA
    return EquatorialCoordinate(ra=normalize_degrees(ra), dec=math.degrees(dec))


def solar_ecliptic_coordinate(moment: datetime) -> EclipticCoordinate:
    """Return the Sun's low precision geometric ecliptic coordinate."""

    return EclipticCoordinate(longitude=solar_true_longitude(moment), latitude=0.0)


def solar_equatorial_coordinate(moment: datetime) -> EquatorialCoordinate:
    """Return the Sun's low precision equatorial coordinate.

    Good to roughly a hundredth of a degree, which is adequate for
    day/night tests but not for solar astrometry.
    """

    return ecliptic_to_equatorial(
        solar_ecliptic_coordinate(moment), mean_obliquity(moment)
    )
