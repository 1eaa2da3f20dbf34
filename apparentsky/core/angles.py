"""Angular utilities shared across the correction and transform layers.

Sidereal times live on a 24 hour circle while coordinates live on a
360° one.  Raw modulo arithmetic on either invites subtle bugs at the
wrap boundary, so the helpers here centralise normalisation together
with the handful of clamped trigonometric inverses the transforms need.
"""

from __future__ import annotations

import math
from typing import Final

__all__ = [
    "EPSILON_DEG",
    "POLE_EPSILON",
    "clamp_unit",
    "fold_declination",
    "normalize_degrees",
    "normalize_hours",
    "signed_delta",
]


EPSILON_DEG: Final[float] = 1e-9
#: ``cos`` values below this magnitude are treated as an exact pole.
POLE_EPSILON: Final[float] = 1e-12


def normalize_degrees(angle: float) -> float:
    """Return ``angle`` normalised to the ``[0, 360)`` interval.

    Parameters
    ----------
    angle:
        Value in **degrees**. Inputs outside the canonical range are
        wrapped by multiples of 360°.

    Returns
    -------
    float
        A degree value in ``[0, 360)``. Values within ``1e-9`` of
        ``360`` are coerced to ``0`` so callers can rely on a consistent
        wrap-around contract when comparing right ascensions.
    """

    wrapped = float(angle) % 360.0
    if wrapped >= 360.0 - EPSILON_DEG:
        wrapped = 0.0
    return wrapped if wrapped >= 0.0 else wrapped + 360.0


def signed_delta(angle: float) -> float:
    """Return ``angle`` wrapped to the ``[-180, 180)`` interval."""

    wrapped = normalize_degrees(angle)
    if wrapped >= 180.0:
        return wrapped - 360.0
    return wrapped


def normalize_hours(hours: float) -> float:
    """Return ``hours`` wrapped to the ``[0, 24)`` sidereal clock."""

    wrapped = float(hours) % 24.0
    if wrapped >= 24.0 - EPSILON_DEG / 15.0:
        wrapped = 0.0
    return wrapped


def clamp_unit(value: float) -> float:
    """Clamp ``value`` into ``[-1, 1]`` before ``asin``/``acos``."""

    return max(-1.0, min(1.0, value))


def fold_declination(ra: float, dec: float) -> tuple[float, float]:
    """Fold a declination that overshot a pole back onto the sphere.

    Crossing a celestial pole reflects the declination and moves the
    right ascension by half a turn.
    """

    if dec > 90.0:
        return normalize_degrees(ra + 180.0), 180.0 - dec
    if dec < -90.0:
        return normalize_degrees(ra + 180.0), -180.0 - dec
    return normalize_degrees(ra), dec
