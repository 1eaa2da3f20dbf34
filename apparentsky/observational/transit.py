"""Circumpolarity, visibility and rise/set search for fixed targets.

The predicates here are purely geometric: they depend only on the
observer latitude, the target declination and an optional horizon
altitude.  :func:`next_rise` and :func:`next_set` walk forward one UTC
calendar day at a time until the event lies at or after the requested
instant.  The walk is an explicit loop capped at ``max_days`` so that a
target whose rise/set gate never opens (for example one just short of
circumpolar against a raised horizon) ends in
:class:`~apparentsky.exceptions.RiseSetSearchError` instead of running
forever.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta

from ..constants import DEFAULT_HORIZON_DEG, MAX_SEARCH_DAYS
from ..core.angles import normalize_degrees, normalize_hours
from ..core.time import start_of_day, to_utc
from ..exceptions import RiseSetSearchError
from ..models import (
    EquatorialCoordinate,
    GeographicCoordinate,
    HorizontalCoordinate,
    Transit,
    TransitInstant,
    TransitParameters,
)
from .horizontal import equatorial_to_horizontal
from .sidereal import greenwich_from_local_sidereal, universal_time_from_greenwich_sidereal

__all__ = [
    "SIDEREAL_DAY",
    "is_above_horizon",
    "is_circumpolar",
    "is_visible",
    "next_rise",
    "next_set",
    "rise_set_gate",
    "transit",
]

LOG = logging.getLogger(__name__)

SIDEREAL_DAY = timedelta(hours=23, minutes=56, seconds=4.0905)


def is_circumpolar(
    observer: GeographicCoordinate,
    target: EquatorialCoordinate,
    horizon: float = DEFAULT_HORIZON_DEG,
) -> bool:
    """Return ``True`` when ``target`` never sinks below ``horizon``.

    The lower culmination altitude is ``|φ| + δ − 90`` in the northern
    hemisphere and ``|φ| − δ − 90`` in the southern one; the target is
    circumpolar when that altitude clears the horizon.
    """

    latitude = observer.latitude
    dec = target.dec if latitude >= 0 else -target.dec
    return abs(latitude) + dec - 90.0 > horizon


def is_visible(
    observer: GeographicCoordinate,
    target: EquatorialCoordinate,
    horizon: float = DEFAULT_HORIZON_DEG,
) -> bool:
    """Return ``True`` when ``target`` culminates above ``horizon``."""

    return 90.0 - abs(observer.latitude - target.dec) > horizon


def is_above_horizon(
    moment: datetime,
    observer: GeographicCoordinate,
    target: EquatorialCoordinate | HorizontalCoordinate,
    horizon: float = DEFAULT_HORIZON_DEG,
) -> bool:
    """Return ``True`` when ``target`` is above ``horizon`` at ``moment``.

    ``target`` may be given in either frame; equatorial coordinates are
    first transformed for ``observer``.
    """

    if isinstance(target, EquatorialCoordinate):
        target = equatorial_to_horizontal(moment, observer, target)
    return target.alt > horizon


def rise_set_gate(
    observer: GeographicCoordinate, target: EquatorialCoordinate
) -> TransitParameters | None:
    """Return the rise/set ratios, or ``None`` if the target never crosses.

    ``None`` means the target is either always above or always below the
    astronomical horizon for this latitude.
    """

    phi = math.radians(observer.latitude)
    dec = math.radians(target.dec)
    cos_phi = math.cos(phi)
    if cos_phi == 0:
        return None

    ar = math.sin(dec) / cos_phi
    if abs(ar) > 1:
        return None
    h1 = math.tan(phi) * math.tan(dec)
    if abs(h1) > 1:
        return None
    return TransitParameters(ar=ar, h1=h1)


def transit(observer: GeographicCoordinate, target: EquatorialCoordinate) -> Transit | None:
    """Return the local sidereal times and azimuths of rise and set."""

    params = rise_set_gate(observer, target)
    if params is None:
        return None

    ra_hours = target.ra / 15.0
    h2 = math.degrees(math.acos(-params.h1)) / 15.0
    rise_azimuth = math.degrees(math.acos(params.ar))
    return Transit(
        lst_rise=normalize_hours(24.0 + ra_hours - h2),
        lst_set=normalize_hours(ra_hours + h2),
        rise_azimuth=normalize_degrees(rise_azimuth),
        set_azimuth=normalize_degrees(360.0 - rise_azimuth),
    )


def _event_on_day(
    day: datetime, not_before: datetime, gst: float
) -> datetime | None:
    """Return the first UTC instant on ``day`` with ``gst`` not before ``not_before``."""

    candidate = universal_time_from_greenwich_sidereal(gst, day)
    if candidate >= not_before:
        return candidate
    repeat = candidate + SIDEREAL_DAY
    if repeat.date() == candidate.date() and repeat >= not_before:
        return repeat
    return None


def _search(
    event: str,
    moment: datetime,
    observer: GeographicCoordinate,
    target: EquatorialCoordinate,
    horizon: float,
    max_days: int,
) -> TransitInstant | bool:
    if is_circumpolar(observer, target, horizon):
        return True
    if not is_visible(observer, target, horizon):
        return False

    start = to_utc(moment)
    current = start
    for _ in range(max_days):
        params = transit(observer, target)
        if params is not None:
            if event == "rise":
                lst, az = params.lst_rise, params.rise_azimuth
            else:
                lst, az = params.lst_set, params.set_azimuth
            gst = greenwich_from_local_sidereal(lst, observer.longitude)
            found = _event_on_day(current, current, gst)
            if found is not None:
                return TransitInstant(datetime=found, lst=lst, gst=gst, az=az)
        current = start_of_day(current) + timedelta(days=1)

    LOG.debug(
        "%s search for ra=%.6f dec=%.6f at lat=%.6f exhausted %d days",
        event,
        target.ra,
        target.dec,
        observer.latitude,
        max_days,
    )
    raise RiseSetSearchError(event, start, max_days)


def next_rise(
    moment: datetime,
    observer: GeographicCoordinate,
    target: EquatorialCoordinate,
    horizon: float = DEFAULT_HORIZON_DEG,
    *,
    max_days: int = MAX_SEARCH_DAYS,
) -> TransitInstant | bool:
    """Return the next rise of ``target`` at or after ``moment``.

    Returns ``True`` for a circumpolar target (it is always up), ``False``
    for one that never clears ``horizon``, and otherwise the
    :class:`~apparentsky.models.TransitInstant` of the rise.

    Raises
    ------
    RiseSetSearchError
        If no rise is found within ``max_days`` calendar days.
    """

    return _search("rise", moment, observer, target, horizon, max_days)


def next_set(
    moment: datetime,
    observer: GeographicCoordinate,
    target: EquatorialCoordinate,
    horizon: float = DEFAULT_HORIZON_DEG,
    *,
    max_days: int = MAX_SEARCH_DAYS,
) -> TransitInstant | bool:
    """Return the next set of ``target`` at or after ``moment``.

    The return contract mirrors :func:`next_rise`.
    """

    return _search("set", moment, observer, target, horizon, max_days)
