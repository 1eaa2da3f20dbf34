"""Atmospheric refraction, airmass and horizon dip."""

from __future__ import annotations

import math

from ..constants import DEFAULT_PRESSURE_PA, DEFAULT_TEMPERATURE_K, EARTH_RADIUS_M
from ..models import HorizontalCoordinate, MetConditions

__all__ = [
    "airmass",
    "correct_for_refraction",
    "local_horizon_dip",
    "refraction",
    "refraction_for",
]


def refraction(
    target: HorizontalCoordinate,
    temperature_k: float = DEFAULT_TEMPERATURE_K,
    pressure_pa: float = DEFAULT_PRESSURE_PA,
) -> float:
    """Return the refraction at altitude ``target.alt`` in degrees.

    Uses Saemundsson's cotangent formula scaled to the supplied pressure
    and temperature.  Below the horizon the model is invalid and
    ``math.inf`` is returned so callers can treat the body as not yet
    risen.  Near the zenith the cotangent crosses zero, so the result is
    floored at ``0``.
    """

    alt = target.alt
    if alt < 0:
        return math.inf
    R = max(1.02 / math.tan(math.radians(alt + 10.3 / (alt + 5.11))) / 60.0, 0.0)
    return R * (pressure_pa / DEFAULT_PRESSURE_PA) * (DEFAULT_TEMPERATURE_K / temperature_k)


def correct_for_refraction(
    target: HorizontalCoordinate,
    temperature_k: float = DEFAULT_TEMPERATURE_K,
    pressure_pa: float = DEFAULT_PRESSURE_PA,
) -> HorizontalCoordinate:
    """Return ``target`` with its altitude raised by atmospheric refraction.

    Azimuth is unaffected.  Coordinates below the horizon are returned
    unchanged.
    """

    if target.alt < 0:
        return target
    delta = refraction(target, temperature_k, pressure_pa)
    return HorizontalCoordinate(alt=target.alt + delta, az=target.az)


def refraction_for(target: HorizontalCoordinate, met: MetConditions) -> HorizontalCoordinate:
    """Apply :func:`correct_for_refraction` using ``met`` conditions."""

    return correct_for_refraction(target, met.temperature_k, met.pressure_pa)


def airmass(target: HorizontalCoordinate) -> float:
    """Return the relative airmass along the line of sight to ``target``.

    Uses Pickering's (2002) interpolation, which stays finite at the
    horizon.  Below the horizon ``math.inf`` is returned.
    """

    alt = target.alt
    if alt < 0:
        return math.inf
    return 1.0 / math.sin(math.radians(alt + 244.0 / (165.0 + 47.0 * alt**1.1)))


def local_horizon_dip(elevation: float, k: float = 0.167) -> float:
    """Return the depression of the visible horizon in degrees.

    ``elevation`` is the observer's height above the surrounding terrain
    in metres and ``k`` the terrestrial refraction coefficient.
    """

    if elevation <= 0:
        return 0.0
    return math.degrees(math.sqrt(2.0 * (1.0 - k) * elevation / EARTH_RADIUS_M))
