"""Composite apparent position of a catalog target for one observer."""

from __future__ import annotations

import logging
from datetime import datetime

from ..core.time import to_utc
from ..models import (
    ApparentPosition,
    EquatorialCoordinate,
    GeographicCoordinate,
    MetConditions,
)
from .corrections import apparent_equatorial
from .horizontal import POLE_SENTINEL, equatorial_to_horizontal
from .refraction import airmass, refraction_for
from .sidereal import hour_angle

__all__ = ["observe"]

LOG = logging.getLogger(__name__)


def observe(
    moment: datetime,
    observer: GeographicCoordinate,
    catalog: EquatorialCoordinate,
    *,
    apparent: bool = True,
    refraction: bool = True,
    met: MetConditions | None = None,
) -> ApparentPosition:
    """Return where the J2000.0 ``catalog`` coordinate appears at ``moment``.

    The catalog position is carried through the correction chain (when
    ``apparent`` is set, including diurnal aberration for ``observer``),
    transformed to the horizon frame, and finally refracted using ``met``
    when ``refraction`` is set.
    """

    met = met or MetConditions()
    utc_moment = to_utc(moment)
    place = apparent_equatorial(utc_moment, catalog, observer) if apparent else catalog
    horizontal = equatorial_to_horizontal(utc_moment, observer, place)
    if horizontal == POLE_SENTINEL:
        LOG.debug("observer at latitude %.6f has no defined azimuth", observer.latitude)
        observed = horizontal
    elif refraction:
        observed = refraction_for(horizontal, met)
    else:
        observed = horizontal
    return ApparentPosition(
        moment=utc_moment,
        catalog=catalog,
        apparent=place,
        hour_angle=hour_angle(utc_moment, observer.longitude, place.ra),
        horizontal=horizontal,
        observed=observed,
        airmass=airmass(observed),
    )
