"""Small-angle corrections from a catalog position to an apparent one.

Each corrector returns an :class:`~apparentsky.models.EquatorialDelta` in
degrees which is *added* to the catalog coordinate.  The deltas are
first order and independent of one another, so the order in which they
are summed does not matter; by magnitude precession dominates, followed
by annual aberration and nutation, with diurnal aberration a few
hundredths of an arcsecond at most.

Targets exactly at a celestial pole have no defined right ascension.
The nutation and aberration terms that divide by ``cos(dec)`` return
``nan`` for the right ascension delta in that case rather than raising,
so callers can filter with :func:`math.isfinite`.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import datetime
from typing import NamedTuple

from ..constants import (
    ABERRATION_CONSTANT_ARCSEC,
    EARTH_ANGULAR_VELOCITY,
    EARTH_RADIUS_M,
    SPEED_OF_LIGHT,
)
from ..core.angles import POLE_EPSILON, clamp_unit, fold_declination, signed_delta
from ..core.time import centuries_since_j2000
from ..ephemeris.fundamentals import (
    earth_orbit_eccentricity,
    longitude_of_perihelion,
    lunar_ascending_node,
    lunar_mean_longitude,
    mean_obliquity,
    solar_mean_longitude,
    solar_true_longitude,
)
from ..models import EquatorialCoordinate, EquatorialDelta, GeographicCoordinate
from .sidereal import hour_angle

__all__ = [
    "NutationAngles",
    "annual_aberration_correction",
    "apparent_equatorial",
    "apply_corrections",
    "diurnal_aberration_correction",
    "nutation_angles",
    "nutation_correction",
    "precession_correction",
]


def precession_correction(
    moment: datetime, target: EquatorialCoordinate
) -> EquatorialDelta:
    """Return the precession of ``target`` from J2000.0 to ``moment``.

    The IAU 1976 rotation angles ζ, z and θ are third order polynomials
    in Julian centuries.  The right ascension delta is wrapped to
    ``[-180, 180)`` so it stays small across the 0°/360° boundary.
    """

    T = centuries_since_j2000(moment)
    zeta = (2306.2181 * T + 0.30188 * T**2 + 0.017998 * T**3) / 3600.0
    z = (2306.2181 * T + 1.09468 * T**2 + 0.018203 * T**3) / 3600.0
    theta = math.radians((2004.3109 * T - 0.42665 * T**2 - 0.041833 * T**3) / 3600.0)

    ra_zeta = math.radians(target.ra + zeta)
    dec = math.radians(target.dec)

    A = math.cos(dec) * math.sin(ra_zeta)
    B = math.cos(theta) * math.cos(dec) * math.cos(ra_zeta) - math.sin(theta) * math.sin(dec)
    C = math.sin(theta) * math.cos(dec) * math.cos(ra_zeta) + math.cos(theta) * math.sin(dec)

    ra = math.degrees(math.atan2(A, B)) + z
    precessed_dec = math.degrees(math.asin(clamp_unit(C)))
    return EquatorialDelta(ra=signed_delta(ra - target.ra), dec=precessed_dec - target.dec)


class NutationAngles(NamedTuple):
    """Nutation in longitude and in obliquity, both in arcseconds."""

    longitude: float
    obliquity: float


def nutation_angles(moment: datetime) -> NutationAngles:
    """Return the truncated four term nutation series at ``moment``."""

    node = math.radians(lunar_ascending_node(moment))
    L = math.radians(solar_mean_longitude(moment))
    l = math.radians(lunar_mean_longitude(moment))

    d_psi = (
        -17.2 * math.sin(node)
        - 1.32 * math.sin(2 * L)
        - 0.23 * math.sin(2 * l)
        + 0.21 * math.sin(2 * node)
    )
    d_eps = (
        9.2 * math.cos(node)
        + 0.57 * math.cos(2 * L)
        + 0.1 * math.cos(2 * l)
        - 0.09 * math.cos(2 * node)
    )
    return NutationAngles(d_psi, d_eps)


def _true_obliquity(moment: datetime, d_eps: float) -> float:
    return math.radians(mean_obliquity(moment) + d_eps / 3600.0)


def nutation_correction(
    moment: datetime, target: EquatorialCoordinate
) -> EquatorialDelta:
    """Return the nutation of ``target`` at ``moment``."""

    d_psi, d_eps = nutation_angles(moment)
    eps = _true_obliquity(moment, d_eps)
    ra = math.radians(target.ra)
    dec = math.radians(target.dec)

    d_dec = math.sin(eps) * math.cos(ra) * d_psi + math.sin(ra) * d_eps
    if abs(math.cos(dec)) < POLE_EPSILON:
        return EquatorialDelta(ra=math.nan, dec=d_dec / 3600.0)

    tan_dec = math.tan(dec)
    d_ra = (math.cos(eps) + math.sin(eps) * math.sin(ra) * tan_dec) * d_psi - (
        math.cos(ra) * tan_dec * d_eps
    )
    return EquatorialDelta(ra=d_ra / 3600.0, dec=d_dec / 3600.0)


def annual_aberration_correction(
    moment: datetime, target: EquatorialCoordinate
) -> EquatorialDelta:
    """Return the annual aberration of ``target`` at ``moment``.

    Combines the constant of aberration with the eccentricity and the
    longitude of perihelion of the Earth's orbit (the elliptic
    E-terms) and the true geometric longitude of the Sun.
    """

    _, d_eps = nutation_angles(moment)
    eps = _true_obliquity(moment, d_eps)
    kappa = math.radians(ABERRATION_CONSTANT_ARCSEC / 3600.0)
    e = earth_orbit_eccentricity(moment)
    perihelion = math.radians(longitude_of_perihelion(moment))
    sun = math.radians(solar_true_longitude(moment))

    ra = math.radians(target.ra)
    dec = math.radians(target.dec)
    cos_dec = math.cos(dec)

    d_dec = -kappa * (
        math.cos(sun) * math.cos(eps) * (math.tan(eps) * cos_dec - math.sin(ra) * math.sin(dec))
        + math.cos(ra) * math.sin(dec) * math.sin(sun)
    ) + e * kappa * (
        math.cos(perihelion)
        * math.cos(eps)
        * (math.tan(eps) * cos_dec - math.sin(ra) * math.sin(dec))
        + math.cos(ra) * math.sin(dec) * math.sin(perihelion)
    )
    if abs(cos_dec) < POLE_EPSILON:
        return EquatorialDelta(ra=math.nan, dec=math.degrees(d_dec))

    d_ra = -kappa * (
        math.cos(ra) * math.cos(sun) * math.cos(eps) + math.sin(ra) * math.sin(sun) / cos_dec
    ) + e * kappa * (
        math.cos(ra) * math.cos(perihelion) * math.cos(eps)
        + math.sin(ra) * math.sin(perihelion) / cos_dec
    )
    return EquatorialDelta(ra=math.degrees(d_ra), dec=math.degrees(d_dec))


def diurnal_aberration_correction(
    moment: datetime,
    observer: GeographicCoordinate,
    target: EquatorialCoordinate,
) -> EquatorialDelta:
    """Return the diurnal aberration caused by the observer's rotation."""

    phi = math.radians(observer.latitude)
    dec = math.radians(target.dec)
    H = math.radians(hour_angle(moment, observer.longitude, target.ra))

    speed = EARTH_ANGULAR_VELOCITY * EARTH_RADIUS_M * math.cos(phi)
    ratio = speed / SPEED_OF_LIGHT

    d_dec = ratio * (math.sin(phi) * math.cos(dec) - math.cos(phi) * math.sin(dec) * math.cos(H))
    if abs(math.cos(dec)) < POLE_EPSILON:
        return EquatorialDelta(ra=math.nan, dec=math.degrees(d_dec))

    d_ra = ratio * math.cos(phi) * math.sin(H) / math.cos(dec)
    return EquatorialDelta(ra=math.degrees(d_ra), dec=math.degrees(d_dec))


def apply_corrections(
    catalog: EquatorialCoordinate, deltas: Iterable[EquatorialDelta]
) -> EquatorialCoordinate:
    """Add ``deltas`` onto ``catalog`` and renormalise the result."""

    total = EquatorialDelta(0.0, 0.0)
    for delta in deltas:
        total = total + delta
    ra, dec = fold_declination(catalog.ra + total.ra, catalog.dec + total.dec)
    return EquatorialCoordinate(ra=ra, dec=dec)


def apparent_equatorial(
    moment: datetime,
    catalog: EquatorialCoordinate,
    observer: GeographicCoordinate | None = None,
) -> EquatorialCoordinate:
    """Return the apparent place of a J2000.0 ``catalog`` coordinate.

    Precession, nutation and annual aberration are always applied;
    diurnal aberration is included when ``observer`` is given.
    """

    deltas = [
        precession_correction(moment, catalog),
        nutation_correction(moment, catalog),
        annual_aberration_correction(moment, catalog),
    ]
    if observer is not None:
        deltas.append(diurnal_aberration_correction(moment, observer, catalog))
    return apply_corrections(catalog, deltas)
