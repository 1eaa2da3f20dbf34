"""Equatorial and horizontal coordinate transforms for a ground observer."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Final

from ..core.angles import POLE_EPSILON, clamp_unit, normalize_degrees
from ..models import EquatorialCoordinate, GeographicCoordinate, HorizontalCoordinate
from .sidereal import hour_angle, local_sidereal_time

__all__ = [
    "POLE_SENTINEL",
    "angular_separation",
    "equatorial_to_horizontal",
    "horizontal_to_equatorial",
    "parallactic_angle",
]


#: Returned by :func:`equatorial_to_horizontal` for an observer at a pole.
POLE_SENTINEL: Final[HorizontalCoordinate] = HorizontalCoordinate(alt=-1.0, az=-1.0)


def equatorial_to_horizontal(
    moment: datetime,
    observer: GeographicCoordinate,
    target: EquatorialCoordinate,
) -> HorizontalCoordinate:
    """Convert ``target`` to altitude/azimuth for ``observer`` at ``moment``.

    Azimuth is measured eastward from north.  At a geographic pole the
    azimuth is undefined and :data:`POLE_SENTINEL` is returned instead;
    callers must compare against it before using the result.
    """

    phi = math.radians(observer.latitude)
    cos_phi = math.cos(phi)
    if abs(cos_phi) < POLE_EPSILON:
        return POLE_SENTINEL

    H = math.radians(hour_angle(moment, observer.longitude, target.ra))
    dec = math.radians(target.dec)
    sin_phi = math.sin(phi)

    alt = math.asin(
        clamp_unit(math.sin(dec) * sin_phi + math.cos(dec) * cos_phi * math.cos(H))
    )
    denom = cos_phi * math.cos(alt)
    if denom == 0:
        az = 0.0
    else:
        az = math.degrees(
            math.acos(clamp_unit((math.sin(dec) - sin_phi * math.sin(alt)) / denom))
        )
    if math.sin(H) > 0:
        az = 360.0 - az
    return HorizontalCoordinate(alt=math.degrees(alt), az=normalize_degrees(az))


def horizontal_to_equatorial(
    moment: datetime,
    observer: GeographicCoordinate,
    target: HorizontalCoordinate,
) -> EquatorialCoordinate:
    """Invert :func:`equatorial_to_horizontal` for a non-polar observer."""

    phi = math.radians(observer.latitude)
    alt = math.radians(target.alt)
    az = math.radians(target.az)

    dec = math.asin(
        clamp_unit(
            math.sin(phi) * math.sin(alt) + math.cos(phi) * math.cos(alt) * math.cos(az)
        )
    )
    H = math.atan2(
        -math.sin(az) * math.cos(alt) / math.cos(dec),
        (math.sin(alt) - math.sin(phi) * math.sin(dec)) / (math.cos(phi) * math.cos(dec)),
    )
    lst = local_sidereal_time(moment, observer.longitude)
    ra = normalize_degrees(lst * 15.0 - math.degrees(H))
    return EquatorialCoordinate(ra=ra, dec=math.degrees(dec))


def parallactic_angle(
    moment: datetime,
    observer: GeographicCoordinate,
    target: EquatorialCoordinate,
) -> float:
    """Return the parallactic angle of ``target`` in degrees ``(-180, 180]``."""

    H = math.radians(hour_angle(moment, observer.longitude, target.ra))
    phi = math.radians(observer.latitude)
    dec = math.radians(target.dec)
    return math.degrees(
        math.atan2(
            math.sin(H),
            math.tan(phi) * math.cos(dec) - math.sin(dec) * math.cos(H),
        )
    )


def angular_separation(a: EquatorialCoordinate, b: EquatorialCoordinate) -> float:
    """Return the great-circle separation of two coordinates in degrees."""

    dec_a = math.radians(a.dec)
    dec_b = math.radians(b.dec)
    cos_sep = math.sin(dec_a) * math.sin(dec_b) + math.cos(dec_a) * math.cos(
        dec_b
    ) * math.cos(math.radians(a.ra - b.ra))
    return math.degrees(math.acos(clamp_unit(cos_sep)))
